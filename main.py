"""主程序入口 - 读取以';'结尾的后缀表达式并输出结果"""
import argparse
import io
import logging
import sys

from config.config import *
from core import (
    RPNEvaluator,
    InvalidLexeme,
    InvalidInput,
    DivisionByZero,
    NumericConversionFailure,
    StreamFailure
)
from utils import format_number, format_stack

logger = logging.getLogger(__name__)


def setup_logging(level=None):
    logging.basicConfig(
        level=(level or LOGGING_CONFIG['level']).upper(),
        format=LOGGING_CONFIG['format'],
        stream=sys.stderr
    )


def describe_error(error):
    """按错误类型生成单行错误信息"""
    if isinstance(error, InvalidLexeme):
        return f"Invalid expression: {error.text}"
    if isinstance(error, InvalidInput):
        if error.context:
            return f"Invalid input: {error.context}"
        return "Invalid input"
    if isinstance(error, DivisionByZero):
        return f"Division by zero: {format_number(error.dividend)} / 0"
    if isinstance(error, NumericConversionFailure):
        return "Could not convert to number"
    if isinstance(error, StreamFailure):
        return "Input stream failure"
    return str(error)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Evaluate a postfix arithmetic expression terminated by "
                    f"'{TOKENIZER_CONFIG['terminator']}'"
    )
    parser.add_argument(
        "-v", "-V", "--verbose",
        action="store_true",
        help="Print tokens, stack contents and each operation"
    )
    parser.add_argument(
        "-e", "--expression",
        type=str,
        default=None,
        help="Evaluate this expression instead of reading standard input"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=None,
        help=f"Logging level (default: {LOGGING_CONFIG['level']})"
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_level)
    validate_config()

    if args.expression is not None:
        stream = io.StringIO(args.expression)
        logger.debug("Reading expression from --expression")
    else:
        stream = sys.stdin
        logger.debug("Reading expression from stdin")

    evaluator = RPNEvaluator(verbose=args.verbose)
    result = evaluator.evaluate(stream)

    if not result.ok:
        sys.stdout.flush()
        print(describe_error(result.error), file=sys.stderr)
        return 1

    if args.verbose:
        sys.stdout.write(OUTPUT_CONFIG['result_prefix'])
    print(format_number(result.value))

    # 弹出结果后栈不为空：表达式不完整，只警告
    if result.leftover:
        message = OUTPUT_CONFIG['leftover_message']
        if args.verbose:
            message += f"\nStack: {format_stack(result.leftover)}"
        print(message, file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
