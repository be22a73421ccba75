"""主程序入口 - 交互模式和脚本模式"""
import argparse
import logging
import math
import sys

from config.config import CALC_CONFIG, LOGGING_CONFIG, REPL_CONFIG, validate_config
from core import evaluate_line
from utils.trace import SessionTrace

logger = logging.getLogger(__name__)


def format_value(value, precision=None):
    if precision is None:
        precision = CALC_CONFIG['output_precision']
    return f"{value:.{precision}g}"


def iter_script_lines(path):
    """读取脚本文件，去掉行尾换行符，跳过空行"""
    with open(path, 'r', encoding='utf-8') as f:
        for raw in f:
            line = raw.rstrip('\r\n')
            if line.strip():
                yield line


def run_script(path, initial_value, trace, quiet=False, out=None):
    logger.info(f"Running script {path}")
    value = initial_value
    for line in iter_script_lines(path):
        value = trace.evaluate(evaluate_line, value, line)
        if not quiet:
            print(format_value(value), file=out)
    if quiet:
        print(format_value(value), file=out)
    return value


def run_repl(initial_value, trace, stream=None, out=None):
    """交互模式：每行求值后打印累加器，遇到退出词或EOF结束"""
    if stream is None:
        stream = sys.stdin
    value = initial_value
    interactive = stream.isatty()
    while True:
        if interactive:
            print(REPL_CONFIG['prompt'], end='', file=out, flush=True)
        raw = stream.readline()
        if not raw:
            break
        line = raw.rstrip('\r\n')
        if line.strip() in REPL_CONFIG['quit_words']:
            break
        value = trace.evaluate(evaluate_line, value, line)
        print(format_value(value), file=out)
    return value


def main(args):
    validate_config()

    trace = SessionTrace()
    if args.script:
        value = run_script(args.script, args.initial_value, trace, quiet=args.quiet)
    else:
        value = run_repl(args.initial_value, trace)

    summary = trace.summary()
    logger.info(f"Evaluated {summary['lines']} line(s), {summary['rejected']} rejected")

    if args.save_trace:
        trace.save(args.save_trace)
    return value


def build_parser():
    parser = argparse.ArgumentParser(description="Line-oriented accumulator calculator")

    parser.add_argument(
        "--script",
        type=str,
        default=None,
        help="Evaluate lines from this file instead of reading stdin"
    )
    parser.add_argument(
        "--initial_value",
        type=float,
        default=CALC_CONFIG['initial_value'],
        help="Starting value of the accumulator (default: 0)"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="In script mode, print only the final value"
    )
    parser.add_argument(
        "--save_trace",
        type=str,
        default=None,
        help="Save the per-line session trace as CSV"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG['level'],
        help="Logging level for diagnostics (default: INFO)"
    )
    return parser


def cli(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not math.isfinite(args.initial_value):
        parser.error("--initial_value must be a finite number")
    level = logging.getLevelName(args.log_level.upper())
    if not isinstance(level, int):
        parser.error(f"unknown --log_level: {args.log_level}")
    logging.basicConfig(
        level=level,
        format=LOGGING_CONFIG['format']
    )
    # 级别同时作用在根 handler 上，单独放开的 logger 也不会越过它输出
    for handler in logging.getLogger().handlers:
        handler.setLevel(level)
    main(args)
    return 0


if __name__ == "__main__":
    sys.exit(cli())
