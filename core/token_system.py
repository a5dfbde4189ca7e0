"""core/token_system.py"""
from enum import Enum
import logging

from config.config import EVALUATOR_CONFIG
from core.errors import FormatError

logger = logging.getLogger(__name__)


class TokenType(Enum):
    NUMBER = "number"  # 数字字面量（可带一元负号）
    OPERATOR = "operator"  # 二元操作符


class Token:
    def __init__(self, token_type, name, symbol=None, value=None, precedence=0, position=None):
        self.type = token_type
        self.name = name  # 对应 Operators 中的方法名
        self.symbol = symbol
        self.value = value
        self.precedence = precedence
        self.position = position  # 在去除空白后的字符串中的起始位置

    def __repr__(self):
        if self.type == TokenType.NUMBER:
            return f"Token(NUMBER, {self.value!r}, pos={self.position})"
        return f"Token(OPERATOR, {self.symbol!r}, pos={self.position})"


# Token定义字典（操作符）
TOKEN_DEFINITIONS = {
    # 高优先级：第一轮归约
    '*': Token(TokenType.OPERATOR, 'multiply', symbol='*', precedence=2),
    '/': Token(TokenType.OPERATOR, 'divide', symbol='/', precedence=2),

    # 低优先级：第二轮从左到右折叠
    '+': Token(TokenType.OPERATOR, 'add', symbol='+', precedence=1),
    '-': Token(TokenType.OPERATOR, 'subtract', symbol='-', precedence=1),
}

OPERATOR_SYMBOLS = frozenset(EVALUATOR_CONFIG["operators"])
HIGH_PRECEDENCE_SYMBOLS = frozenset(EVALUATOR_CONFIG["high_precedence_operators"])
LOW_PRECEDENCE_SYMBOLS = frozenset(EVALUATOR_CONFIG["low_precedence_operators"])
DIGITS = frozenset("0123456789")


class ExpressionScanner:
    """把中缀表达式拆分为数字序列和操作符序列"""

    @staticmethod
    def is_operator(char):
        return char in OPERATOR_SYMBOLS

    @staticmethod
    def _strip(expression):
        if not isinstance(expression, str) or not expression.strip():
            raise FormatError("Input string cannot be empty or null.")
        return "".join(expression.split())

    @staticmethod
    def _scan(text):
        """
        从左到右扫描，产出 (数字, 起始位置) 与 (操作符, 位置)。
        一元负号只在字符串开头或紧跟操作符时并入数字。
        """
        numbers = []
        operators = []
        unary_minus = EVALUATOR_CONFIG["unary_minus"]
        decimal_point = EVALUATOR_CONFIG["decimal_point"]
        i = 0

        while i < len(text):
            start = i
            if text[i] == unary_minus and (i == 0 or ExpressionScanner.is_operator(text[i - 1])):
                i += 1
            while i < len(text) and (text[i] in DIGITS or text[i] == decimal_point):
                i += 1

            literal = text[start:i]
            try:
                value = float(literal)
            except ValueError:
                raise FormatError(f"Invalid number at position {start}") from None
            numbers.append((value, start))

            if i >= len(text):
                break

            # 数字读取结束，但下一个字符不是操作符
            if not ExpressionScanner.is_operator(text[i]):
                raise FormatError(f"Invalid operator at position {i}")

            operators.append((text[i], i))
            i += 1

        if len(numbers) != len(operators) + 1:
            raise FormatError("Invalid expression format")

        logger.debug(f"Scanned {len(numbers)} numbers and {len(operators)} operators from {text!r}")
        return numbers, operators

    @staticmethod
    def scan(expression):
        """
        扫描表达式
        Args:
            expression: 中缀表达式字符串，空白会被忽略
        Returns:
            (numbers, operators): 两个并行列表，len(numbers) == len(operators) + 1
        Raises:
            FormatError: 空输入、非法字符、非法数字或语法不完整
        """
        text = ExpressionScanner._strip(expression)
        numbers, operators = ExpressionScanner._scan(text)
        return [value for value, _ in numbers], [symbol for symbol, _ in operators]

    @staticmethod
    def tokenize(expression):
        """返回交错排列、带位置信息的 Token 列表（用于诊断输出）"""
        text = ExpressionScanner._strip(expression)
        numbers, operators = ExpressionScanner._scan(text)

        tokens = []
        for idx, (value, position) in enumerate(numbers):
            tokens.append(Token(TokenType.NUMBER, 'number', value=value, position=position))
            if idx < len(operators):
                symbol, op_position = operators[idx]
                definition = TOKEN_DEFINITIONS[symbol]
                tokens.append(Token(TokenType.OPERATOR, definition.name, symbol=symbol,
                                    precedence=definition.precedence, position=op_position))
        logger.debug(f"Tokens: {tokens}")
        return tokens
