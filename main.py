"""主程序入口 - 表达式求值、算术操作和批量求值"""
import argparse
import logging
import sys

from config.config import DATA_CONFIG, LOGGING_CONFIG, validate_config
from core.errors import EvaluationError, FormatError
from core.expression_evaluator import ExpressionEvaluator
from core.number_format import format_number, parse_number
from core.operators import Operators, IntOperators, StringOperators, OPERATION_ARITY
from core.token_system import ExpressionScanner
from data.data_loader import (
    load_expression_dataset,
    evaluate_expression_column,
    summarize_results,
    save_results
)

logger = logging.getLogger(__name__)

OPERAND_TYPES = {
    'float': Operators,
    'int': IntOperators,
    'string': StringOperators,
}


def _convert_operand(text, operand_type):
    """把命令行参数转换为对应类型的操作数"""
    if operand_type == 'float':
        return parse_number(text)
    if operand_type == 'int':
        try:
            return int(text)
        except ValueError:
            raise FormatError(f"Invalid int32 operand: {text!r}") from None
    return text


def run_operation(operation, operand_type, operands):
    """调用 Operators / IntOperators / StringOperators 中对应的方法"""
    arity = OPERATION_ARITY[operation]
    if len(operands) != arity:
        raise FormatError(f"Operation '{operation}' expects {arity} operand(s), got {len(operands)}")

    op_class = OPERAND_TYPES[operand_type]
    op_method = getattr(op_class, operation)
    values = [_convert_operand(text, operand_type) for text in operands]
    return op_method(*values)


def _display(value):
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        return format_number(value)
    return str(value)


def main(args):
    validate_config()
    status = 0

    # 第1部分：单个表达式
    for expression in args.expressions:
        try:
            if args.show_tokens:
                tokens = ExpressionScanner.tokenize(expression)
                print(" ".join(repr(token) for token in tokens))
            result = ExpressionEvaluator.evaluate(expression)
            print(f"{expression} = {format_number(result)}")
        except EvaluationError as e:
            logger.error(f"Failed to evaluate {expression!r}: {e}")
            status = 1

    # 第2部分：算术操作
    if args.operation:
        try:
            result = run_operation(args.operation, args.operand_type, args.operands or [])
            print(f"{args.operation}({', '.join(args.operands or [])}) = {_display(result)}")
        except EvaluationError as e:
            logger.error(f"Operation {args.operation} failed: {e}")
            status = 1

    # 第3部分：批量求值
    if args.input_path:
        try:
            expressions = load_expression_dataset(args.input_path, args.expression_column)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load {args.input_path}: {e}")
            return 1

        results = evaluate_expression_column(expressions)
        summary = summarize_results(results)
        logger.info(f"Evaluated {summary['total']} expressions: "
                    f"{summary['succeeded']} succeeded, {summary['failed']} failed")
        print(f"total={summary['total']} succeeded={summary['succeeded']} failed={summary['failed']}")

        if args.output_path:
            save_results(results, args.output_path)
        if summary['failed']:
            status = 1

    return status


def build_parser():
    parser = argparse.ArgumentParser(description="Arithmetic expression evaluator")
    parser.add_argument(
        "expressions",
        nargs="*",
        help="Infix expressions to evaluate, e.g. \"2+3*4\""
    )
    parser.add_argument(
        "--show_tokens",
        action="store_true",
        help="Print the scanned tokens of each expression"
    )
    parser.add_argument(
        "--operation",
        type=str,
        choices=sorted(OPERATION_ARITY),
        help="Run a single arithmetic operation"
    )
    parser.add_argument(
        "--operand_type",
        type=str,
        choices=sorted(OPERAND_TYPES),
        default="float",
        help="Operand type for --operation (default: float)"
    )
    parser.add_argument(
        "--operands",
        nargs="+",
        help="Operands for --operation"
    )
    parser.add_argument(
        "--input_path",
        type=str,
        help="CSV file or text file (one expression per line) to evaluate"
    )
    parser.add_argument(
        "--expression_column",
        type=str,
        default=DATA_CONFIG["expression_column"],
        help="Name of the expression column in a CSV input"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        help="Path to save the batch results as CSV"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    return parser


def parse_args(parser, argv=None):
    """
    解析命令行参数。
    以 "-" 开头的表达式（如 "-5+3*2"）会被 argparse 当作未知选项，这里把它们放回 expressions。
    """
    args, extras = parser.parse_known_args(argv)
    unknown_options = [arg for arg in extras if arg.startswith("--")]
    if unknown_options:
        parser.error(f"unrecognized arguments: {' '.join(unknown_options)}")
    args.expressions = list(args.expressions) + extras
    return args


if __name__ == "__main__":
    parser = build_parser()
    args = parse_args(parser)

    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG["format"]
    )

    if not (args.expressions or args.operation or args.input_path):
        parser.print_help()
        sys.exit(2)

    sys.exit(main(args))
