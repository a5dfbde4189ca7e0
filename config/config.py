"""配置文件"""

# 表达式求值参数
EVALUATOR_CONFIG = {
    "operators": "+-*/",
    "high_precedence_operators": "*/",  # 第一轮先归约
    "low_precedence_operators": "+-",
    "unary_minus": "-",  # 仅在开头或紧跟操作符时作为符号
    "decimal_point": ".",
}

# int32 运算（溢出时按补码回绕）
INT32_CONFIG = {
    "min_value": -2 ** 31,
    "max_value": 2 ** 31 - 1,
    "modulus": 2 ** 32,
}

# 数字字符串格式化
FORMAT_CONFIG = {
    "positional_min": 1e-4,  # |x| < 1e-4 使用科学计数法
    "positional_max": 1e15,  # |x| >= 1e15 使用科学计数法
    "exponent_digits": 2,  # 1E+15, 1E-05
    "positive_infinity": "Infinity",
    "negative_infinity": "-Infinity",
    "nan": "NaN",
}

# 日志
LOGGING_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

# 批量求值
DATA_CONFIG = {
    "expression_column": "expression",
    "result_column": "result",
    "error_column": "error",
    "default_output_path": "evaluated_expressions.csv",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    operators = EVALUATOR_CONFIG["operators"]
    high = EVALUATOR_CONFIG["high_precedence_operators"]
    low = EVALUATOR_CONFIG["low_precedence_operators"]
    assert sorted(high + low) == sorted(operators), "每个操作符必须恰好属于一个优先级"
    assert all(len(op) == 1 for op in operators), "只支持单字符操作符"
    assert EVALUATOR_CONFIG["unary_minus"] in low, "一元负号必须同时是减法操作符"
    assert EVALUATOR_CONFIG["decimal_point"] not in operators
    assert INT32_CONFIG["max_value"] - INT32_CONFIG["min_value"] + 1 == INT32_CONFIG["modulus"]
    assert FORMAT_CONFIG["positional_min"] < FORMAT_CONFIG["positional_max"]
    assert FORMAT_CONFIG["exponent_digits"] >= 1
    return True
