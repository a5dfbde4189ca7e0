"""核心模块 - Token系统、表达式求值器和操作符"""
from .errors import EvaluationError, FormatError, DivisionByZero
from .number_format import parse_number, format_number
from .token_system import (
    TokenType, Token, TOKEN_DEFINITIONS, OPERATOR_SYMBOLS,
    HIGH_PRECEDENCE_SYMBOLS, LOW_PRECEDENCE_SYMBOLS, ExpressionScanner
)
from .operators import Operators, IntOperators, StringOperators, OPERATION_ARITY
from .expression_evaluator import ExpressionEvaluator, evaluate

__all__ = [
    'EvaluationError', 'FormatError', 'DivisionByZero',
    'parse_number', 'format_number',
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'OPERATOR_SYMBOLS',
    'HIGH_PRECEDENCE_SYMBOLS', 'LOW_PRECEDENCE_SYMBOLS', 'ExpressionScanner',
    'Operators', 'IntOperators', 'StringOperators', 'OPERATION_ARITY',
    'ExpressionEvaluator', 'evaluate'
]
