"""主程序入口 - 命令行计算器"""
import argparse
import logging
import sys

from config.config import LOGGING_CONFIG, BATCH_CONFIG, EVALUATION_CONFIG
from core import Calculator, EvaluationMode, ExpressionError, format_tokens
from data.data_loader import load_expressions, evaluate_expressions, save_results
from utils.numeric import format_result

logger = logging.getLogger(__name__)


def _show_stages(calculator, expression, args):
    """打印中间阶段；阶段失败只提示，不影响后续求值"""
    try:
        if args.show_tokens:
            tokens = calculator.tokenize(expression, keep_ignored=args.show_separators)
            print(f"tokens:  {format_tokens(tokens)}")
        if args.show_postfix:
            print(f"postfix: {format_tokens(calculator.postfix(expression))}")
    except ExpressionError as e:
        print(f"stages:  {e}")


def run_expressions(args, calculator, mode):
    exit_code = 0
    for expression in args.expressions:
        _show_stages(calculator, expression, args)
        result = calculator.run(expression, mode)
        if result.ok:
            print(format_result(result.value))
        else:
            exit_code = 1
            if mode == EvaluationMode.STRICT:
                print(EVALUATION_CONFIG["error_sentinel"])
            else:
                print(result.error_message)
    return exit_code


def run_batch(args, calculator, mode):
    logger.info("=== Batch Evaluation ===")
    df = load_expressions(args.batch_path, args.expression_column)
    evaluated = evaluate_expressions(df, mode, calculator, args.expression_column)

    if args.output_path:
        save_results(evaluated, args.output_path)
    else:
        print(evaluated.to_string(index=False))

    # 有 expected 列时按比对结果决定退出码，否则按失败数
    if BATCH_CONFIG["match_column"] in evaluated.columns:
        return 0 if evaluated[BATCH_CONFIG["match_column"]].all() else 1
    failed = (evaluated[BATCH_CONFIG["error_column"]] != '').sum()
    return 1 if failed else 0


def main(args):
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format=LOGGING_CONFIG["format"]
    )

    mode = EvaluationMode.STRICT if args.strict else EvaluationMode.PRECEDENCE
    calculator = Calculator(substitute_bare_e=args.substitute_bare_e or None)
    logger.debug(f"Evaluation mode: {mode.value}")

    if args.batch_path:
        return run_batch(args, calculator, mode)
    if not args.expressions:
        logger.error("No expressions given; pass expressions or --batch_path")
        return 2
    return run_expressions(args, calculator, mode)


def build_parser():
    parser = argparse.ArgumentParser(description="Calculator expression engine")

    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to evaluate, e.g. '2+3*4'"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Evaluate strictly left to right, ignoring operator precedence"
    )
    parser.add_argument(
        "--show_tokens",
        action="store_true",
        help="Print the token sequence before evaluating"
    )
    parser.add_argument(
        "--show_postfix",
        action="store_true",
        help="Print the postfix (RPN) order before evaluating"
    )
    parser.add_argument(
        "--show_separators",
        action="store_true",
        help="With --show_tokens, also print the ignored comma and space tokens"
    )
    parser.add_argument(
        "--substitute_bare_e",
        action="store_true",
        help="Replace every bare letter 'e' with Euler's number before lexing (legacy behaviour)"
    )
    parser.add_argument(
        "--batch_path",
        type=str,
        default=None,
        help="Path to a CSV (or .txt, one expression per line) of expressions to evaluate"
    )
    parser.add_argument(
        "--expression_column",
        type=str,
        default=BATCH_CONFIG["expression_column"],
        help="Name of the expression column in the batch CSV"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help="Path to save batch results as CSV (prints to stdout when omitted)"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        help="Logging level (default: INFO)"
    )
    return parser


if __name__ == "__main__":
    args = build_parser().parse_args()
    sys.exit(main(args))
