"""core/operators.py"""
import math

import numpy as np

from config.config import INT32_CONFIG
from core.errors import DivisionByZero, FormatError
from core.number_format import format_number, parse_number

# 操作名 -> 操作数个数
OPERATION_ARITY = {
    'add': 2,
    'subtract': 2,
    'multiply': 2,
    'divide': 2,
    'power': 2,
    'square_root': 1,
    'abs': 1,
    'super_sum': 2,
}


class Operators:
    """float64 操作符的静态方法集合"""

    @staticmethod
    def add(operand1, operand2):
        with np.errstate(over='ignore', invalid='ignore'):
            return float(np.float64(operand1) + np.float64(operand2))

    @staticmethod
    def subtract(operand1, operand2):
        with np.errstate(over='ignore', invalid='ignore'):
            return float(np.float64(operand1) - np.float64(operand2))

    @staticmethod
    def multiply(operand1, operand2):
        """乘法操作符，溢出时得到 inf"""
        with np.errstate(over='ignore', invalid='ignore'):
            return float(np.float64(operand1) * np.float64(operand2))

    @staticmethod
    def divide(operand1, operand2):
        """除法操作符，除数为 0（含 -0.0）时抛出 DivisionByZero"""
        if operand2 == 0:
            raise DivisionByZero("Division by zero")
        with np.errstate(over='ignore', invalid='ignore'):
            return float(np.float64(operand1) / np.float64(operand2))

    @staticmethod
    def power(base, exponent):
        """
        幂运算
        底数为 0 且指数为负时抛出 DivisionByZero；
        负底数配小数指数得到 NaN。
        """
        if base == 0 and exponent < 0:
            raise DivisionByZero("Zero cannot be raised to a negative power")
        with np.errstate(all='ignore'):
            return float(np.power(np.float64(base), np.float64(exponent)))

    @staticmethod
    def square_root(operand):
        if operand < 0:
            raise FormatError("Square root of negative number is not defined")
        return float(np.sqrt(np.float64(operand)))

    @staticmethod
    def abs(operand):
        return float(np.fabs(np.float64(operand)))

    @staticmethod
    def super_sum(operand1, operand2):
        """
        把 operand1 截断为 int32 的文本，拼接 operand2 的默认字符串形式，再解析为 float。
        例如 super_sum(12.7, 3.5) == 123.5
        """
        if not np.isfinite(operand1):
            raise FormatError("Concatenated value is not a valid double.")
        integer_part = int(np.trunc(operand1))
        if not INT32_CONFIG["min_value"] <= integer_part <= INT32_CONFIG["max_value"]:
            raise FormatError("Concatenated value is not a valid double.")
        try:
            return parse_number(f"{integer_part}{format_number(operand2)}")
        except FormatError:
            raise FormatError("Concatenated value is not a valid double.") from None


class IntOperators:
    """int32 操作符：结果按 32 位补码回绕"""

    @staticmethod
    def _check(value):
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
            raise FormatError(f"Expected an int32 value, got {value!r}")
        value = int(value)
        if not INT32_CONFIG["min_value"] <= value <= INT32_CONFIG["max_value"]:
            raise FormatError(f"Value {value} is outside the int32 range")
        return value

    @staticmethod
    def _wrap(value):
        return int(np.array(value % INT32_CONFIG["modulus"], dtype=np.uint32).astype(np.int32))

    @staticmethod
    def add(operand1, operand2):
        return IntOperators._wrap(IntOperators._check(operand1) + IntOperators._check(operand2))

    @staticmethod
    def subtract(operand1, operand2):
        return IntOperators._wrap(IntOperators._check(operand1) - IntOperators._check(operand2))

    @staticmethod
    def multiply(operand1, operand2):
        return IntOperators._wrap(IntOperators._check(operand1) * IntOperators._check(operand2))

    @staticmethod
    def divide(operand1, operand2):
        """整数除法，向零截断"""
        a, b = IntOperators._check(operand1), IntOperators._check(operand2)
        if b == 0:
            raise DivisionByZero("Division by zero")
        quotient = abs(a) // abs(b)
        if (a < 0) != (b < 0):
            quotient = -quotient
        return IntOperators._wrap(quotient)

    @staticmethod
    def power(base, exponent):
        """非负整数指数的幂；负指数视为未定义操作，抛出 DivisionByZero"""
        base, exponent = IntOperators._check(base), IntOperators._check(exponent)
        if exponent < 0:
            raise DivisionByZero("Integer power doesn't support negative exponents")
        return IntOperators._wrap(pow(base, exponent, INT32_CONFIG["modulus"]))

    @staticmethod
    def square_root(operand):
        """不超过真实平方根的最大整数"""
        operand = IntOperators._check(operand)
        if operand < 0:
            raise FormatError("Square root of negative number is not defined")
        return math.isqrt(operand)

    @staticmethod
    def abs(operand):
        operand = IntOperators._check(operand)
        return IntOperators._wrap(-operand if operand < 0 else operand)

    @staticmethod
    def super_sum(operand1, operand2):
        a, b = IntOperators._check(operand1), IntOperators._check(operand2)
        try:
            return parse_number(f"{a}{b}")
        except FormatError:
            raise FormatError("Concatenated value is not a valid integer.") from None


class StringOperators:
    """数字字符串操作符：先解析为 float64，运算后格式化回字符串"""

    @staticmethod
    def _parse_pair(operand1, operand2):
        return parse_number(operand1), parse_number(operand2)

    @staticmethod
    def add(operand1, operand2):
        return format_number(Operators.add(*StringOperators._parse_pair(operand1, operand2)))

    @staticmethod
    def subtract(operand1, operand2):
        return format_number(Operators.subtract(*StringOperators._parse_pair(operand1, operand2)))

    @staticmethod
    def multiply(operand1, operand2):
        return format_number(Operators.multiply(*StringOperators._parse_pair(operand1, operand2)))

    @staticmethod
    def divide(operand1, operand2):
        return format_number(Operators.divide(*StringOperators._parse_pair(operand1, operand2)))

    @staticmethod
    def power(operand1, operand2):
        return format_number(Operators.power(*StringOperators._parse_pair(operand1, operand2)))

    @staticmethod
    def square_root(operand):
        return format_number(Operators.square_root(parse_number(operand)))

    @staticmethod
    def abs(operand):
        return format_number(Operators.abs(parse_number(operand)))

    @staticmethod
    def super_sum(operand1, operand2):
        """返回 float，与 float64 版本一致"""
        return Operators.super_sum(*StringOperators._parse_pair(operand1, operand2))
