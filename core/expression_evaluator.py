"""中缀表达式求值器 - 调用统一的Operators类"""
import logging

from core.errors import FormatError
from core.operators import Operators
from core.token_system import (
    ExpressionScanner, TOKEN_DEFINITIONS, HIGH_PRECEDENCE_SYMBOLS, LOW_PRECEDENCE_SYMBOLS
)

logger = logging.getLogger(__name__)


class ExpressionEvaluator:
    """评估中缀算术表达式的值"""

    @staticmethod
    def _apply(symbol, operand1, operand2):
        op_method = getattr(Operators, TOKEN_DEFINITIONS[symbol].name)
        return op_method(operand1, operand2)

    @staticmethod
    def reduce(numbers, operators):
        """
        两轮归约：先从左到右合并 * 和 /，再从左到右折叠 + 和 -
        Args:
            numbers: 数字序列
            operators: 操作符序列，长度比 numbers 少 1
        Returns:
            float
        """
        numbers = list(numbers)
        operators = list(operators)

        if not numbers or len(numbers) != len(operators) + 1:
            raise FormatError("Invalid expression format")

        # ================== * 和 / ==================
        j = 0
        while j < len(operators):
            op = operators[j]
            if op in HIGH_PRECEDENCE_SYMBOLS:
                numbers[j] = ExpressionEvaluator._apply(op, numbers[j], numbers[j + 1])
                del numbers[j + 1]
                del operators[j]
            else:
                j += 1

        # ================== + 和 - ==================
        result = numbers[0]
        for j, op in enumerate(operators):
            if op not in LOW_PRECEDENCE_SYMBOLS:
                raise FormatError(f"Unknown operator: {op!r}")
            result = ExpressionEvaluator._apply(op, result, numbers[j + 1])

        return float(result)

    @staticmethod
    def evaluate(expression):
        """
        解析并计算表达式，例如 "2+3*4" -> 14.0
        Raises:
            FormatError: 输入为空、含非法字符或格式错误
            DivisionByZero: 除数为 0
        """
        numbers, operators = ExpressionScanner.scan(expression)
        logger.debug(f"Scanned {expression!r}: numbers={numbers}, operators={operators}")

        result = ExpressionEvaluator.reduce(numbers, operators)
        logger.debug(f"Result of {expression!r}: {result}")
        return result


def evaluate(expression):
    return ExpressionEvaluator.evaluate(expression)
