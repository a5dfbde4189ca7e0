"""数据加载和批量求值模块"""
import logging

import numpy as np
import pandas as pd

from config.config import DATA_CONFIG
from core.errors import EvaluationError
from core.expression_evaluator import ExpressionEvaluator

logger = logging.getLogger(__name__)


def load_expression_dataset(file_path, expression_column=None):
    """
    加载表达式数据集。

    Parameters:
    - file_path: CSV 文件，或每行一个表达式的文本文件
    - expression_column: CSV 中表达式所在的列名, 默认为 DATA_CONFIG['expression_column']

    Returns:
    - pd.Series (表达式字符串)
    """
    expression_column = expression_column or DATA_CONFIG["expression_column"]
    logger.info(f"Loading expressions from {file_path}")

    if str(file_path).endswith('.csv'):
        dataset = pd.read_csv(file_path, dtype=str, keep_default_na=False)

        # 确保表达式列存在
        if expression_column not in dataset.columns:
            raise ValueError(f"Expression column '{expression_column}' not found in dataset.")

        expressions = dataset[expression_column]
    else:
        with open(file_path, 'r', encoding='utf-8') as f:
            lines = [line.strip() for line in f]
        expressions = pd.Series([line for line in lines if line], dtype=object)

    expressions = expressions.astype(str).reset_index(drop=True)
    expressions.name = DATA_CONFIG["expression_column"]
    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions


def evaluate_expression_column(expressions):
    """
    逐行求值，单行失败不影响其他行。

    Returns:
    - pd.DataFrame: expression / result（失败为 NaN）/ error（成功为空字符串）
    """
    results = []
    errors = []
    for expression in expressions:
        try:
            results.append(ExpressionEvaluator.evaluate(expression))
            errors.append("")
        except EvaluationError as e:
            logger.warning(f"Failed to evaluate {expression!r}: {e}")
            results.append(np.nan)
            errors.append(f"{type(e).__name__}: {e}")

    return pd.DataFrame({
        DATA_CONFIG["expression_column"]: list(expressions),
        DATA_CONFIG["result_column"]: pd.Series(results, dtype=float),
        DATA_CONFIG["error_column"]: errors,
    })


def summarize_results(results):
    """统计成功和失败的行数"""
    failed = int((results[DATA_CONFIG["error_column"]] != "").sum())
    return {
        'total': len(results),
        'succeeded': len(results) - failed,
        'failed': failed,
    }


def save_results(results, output_path=None):
    output_path = output_path or DATA_CONFIG["default_output_path"]
    logger.info(f"Saving results to {output_path}")
    results.to_csv(output_path, index=False)
    return output_path
