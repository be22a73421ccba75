"""逐行求值 - 调用统一的Tokenizer/Scanner/Operators"""
import logging

from core.diagnostics import DiagnosticKind, report
from core.operators import binary, unary
from core.scanner import DIGITS, scan_decimal, skip_ws
from core.token_system import OperatorTokenizer, OpType, arity, is_fold_line

logger = logging.getLogger(__name__)


class LineProcessor:
    """对一行输入求值，累加器由调用方持有"""

    @staticmethod
    def process(current_value, line):
        """
        Args:
            current_value: 本行之前的累加器值
            line: 一行输入（已去掉换行符）
        Returns:
            新的累加器值；本行无效时原样返回 current_value
        """
        snapshot = float(current_value)
        fold = is_fold_line(line)

        op, pos = OperatorTokenizer.parse_op(line)
        n_args = arity(op)

        if n_args == 1:
            if pos < len(line):
                report(DiagnosticKind.UNEXPECTED_SUFFIX,
                       f"Unexpected suffix for a unary operation: '{line[pos:]}'", line[pos:])
                return snapshot
            return unary(snapshot, op)

        if n_args == 2:
            return LineProcessor._apply_binary(op, snapshot, line, pos, fold)

        return snapshot

    @staticmethod
    def _apply_binary(op, snapshot, line, pos, fold):
        """
        非 fold 模式只取一个参数；fold 模式依次对空白分隔的每个参数累计运算。
        任一参数无效时整行作废，返回 snapshot。
        """
        single_char = len(line) == 1 and line[0] not in DIGITS
        if single_char or (len(line) > 1 and pos == len(line)):
            report(DiagnosticKind.MISSING_ARGUMENT, "No argument for a binary operation", line)
            return snapshot

        value = snapshot
        count = 0
        while pos < len(line):
            pos = skip_ws(line, pos)
            if count != 0 and pos >= len(line):
                break

            old_pos = pos
            arg = scan_decimal(line, pos, fold)
            if not arg.ok:
                logger.debug(f"Line discarded after {count} argument(s): {line!r}")
                return snapshot
            if arg.end == old_pos:
                report(DiagnosticKind.MISSING_ARGUMENT, "No argument for a binary operation", line[old_pos:])
                return snapshot
            pos = arg.end
            count += 1

            if fold and op == OpType.REM and arg.value == 0:
                report(DiagnosticKind.REMAINDER_BY_ZERO,
                       f"Bad right argument for remainder: {line[old_pos:pos]}", line[old_pos:pos])
                return snapshot

            value = binary(op, value, arg.value)
            if not fold:
                break

        if fold:
            logger.debug(f"Folded {op.name} over {count} argument(s)")
        return value


def process_line(current_value, line):
    """对外接口：evaluate_line(current_value, line) -> float，从不抛异常"""
    return LineProcessor.process(current_value, line)


evaluate_line = process_line
