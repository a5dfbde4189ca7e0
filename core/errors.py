"""core/errors.py"""


class EvaluationError(Exception):
    """表达式求值与算术操作的异常基类"""


class FormatError(EvaluationError, ValueError):
    """输入格式错误：空输入、非法字符、无法解析的数字或语法不完整"""


class DivisionByZero(EvaluationError, ZeroDivisionError):
    """除数为零；power 中负指数等未定义操作也使用该错误类型"""
