"""core/number_format.py"""
import numpy as np

from config.config import FORMAT_CONFIG
from core.errors import FormatError


def parse_number(text):
    """
    将数字字符串解析为 float64。

    Args:
        text: 数字字符串，允许首尾空白、符号、小数点、指数以及 Infinity/NaN
    Returns:
        float
    Raises:
        FormatError: 不是字符串，或无法解析为数字（包括带下划线分组的写法）
    """
    if not isinstance(text, str) or '_' in text:
        raise FormatError(f"Strings must contain valid numbers: {text!r}")
    try:
        return float(text.strip())
    except ValueError as e:
        raise FormatError(f"Strings must contain valid numbers: {text!r}") from e


def format_number(value):
    """
    float64 的默认字符串形式（最短可往返表示）：
    整数值不带小数部分，1e-4 <= |x| < 1e15 用定点表示，其余用科学计数法（1E+15, 1E-05）。
    """
    value = float(value)
    if np.isnan(value):
        return FORMAT_CONFIG["nan"]
    if np.isinf(value):
        return FORMAT_CONFIG["positive_infinity"] if value > 0 else FORMAT_CONFIG["negative_infinity"]

    magnitude = abs(value)
    if magnitude == 0 or FORMAT_CONFIG["positional_min"] <= magnitude < FORMAT_CONFIG["positional_max"]:
        return np.format_float_positional(value, trim='-')

    text = np.format_float_scientific(value, trim='-', exp_digits=FORMAT_CONFIG["exponent_digits"])
    return text.upper()
