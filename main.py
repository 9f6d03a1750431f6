"""主程序入口 - 解析表达式并输出真值表"""
import argparse
import logging
import sys

from config.config import TABLE_CONFIG, LOG_CONFIG, validate_config
from core.parser import parse, ParseError
from table.generator import TruthTableGenerator, TruthTableLimitError
from utils.formatting import format_heading

logger = logging.getLogger(__name__)

STATUS_IDLE = "idle"
STATUS_INVALID = "invalid"
STATUS_OK = "ok"


class ProcessResult:
    """一次提交的结果：空闲、非法或成功（带真值表）"""

    def __init__(self, status, heading, expression=None, table=None, error=None):
        self.status = status
        self.heading = heading
        self.expression = expression
        self.table = table
        self.error = error

    @property
    def ok(self):
        return self.status == STATUS_OK

    def __repr__(self):
        return f"ProcessResult({self.status!r}, {self.heading!r})"


def process(raw_text, max_variables=None):
    """
    调用方边界：不合法输入作为值返回，不抛异常。
    Args:
        raw_text: 用户输入
        max_variables: 覆盖 TABLE_CONFIG["max_variables"]
    Returns:
        ProcessResult
    """
    try:
        parsed = parse(raw_text)
    except ParseError as e:
        return ProcessResult(STATUS_INVALID, format_heading(invalid=True), error=str(e))

    if parsed is None:
        return ProcessResult(STATUS_IDLE, format_heading())

    generator = TruthTableGenerator(max_variables=max_variables)
    try:
        table = generator.generate(parsed.postfix, parsed.canonical)
    except TruthTableLimitError as e:
        return ProcessResult(STATUS_INVALID, format_heading(invalid=True),
                             expression=parsed.canonical, error=str(e))

    return ProcessResult(STATUS_OK, format_heading(parsed.canonical),
                         expression=parsed.canonical, table=table)


def main(args):
    validate_config()
    result = process(args.expression, max_variables=args.max_variables)

    print(result.heading)
    if result.error and result.error != result.heading:
        # 表过大等附加信息；解析失败时 heading 已经说明
        logger.info(result.error)
    if not result.ok:
        return 1 if result.status == STATUS_INVALID else 0

    frame = result.table.to_frame()
    if args.format == "csv":
        if args.output:
            logger.info(f"Saving truth table to {args.output}")
            frame.to_csv(args.output, index=False)
        else:
            print(frame.to_csv(index=False), end="")
    else:
        text = frame.to_string(index=False)
        if args.output:
            logger.info(f"Saving truth table to {args.output}")
            with open(args.output, 'w', encoding='utf-8') as f:
                f.write(text + "\n")
        else:
            print(text)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Propositional logic truth table")

    parser.add_argument(
        "expression",
        type=str,
        help="Expression using ∼ ∧ ∨ → and parentheses, e.g. \"p ∧ (q → r)\""
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["text", "csv"],
        default="text",
        help="Output format for the truth table"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write the truth table to this file instead of stdout"
    )
    parser.add_argument(
        "--max_variables",
        type=int,
        default=TABLE_CONFIG["max_variables"],
        help="Reject expressions with more free variables than this"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOG_CONFIG["level"],
        help="Logging level (DEBUG, INFO, WARNING, ...)"
    )
    return parser


def cli(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format=LOG_CONFIG["format"]
    )
    return main(args)


if __name__ == "__main__":
    sys.exit(cli())
