"""core/operators.py"""
import numpy as np
import logging

from core.diagnostics import DiagnosticKind, report
from core.token_system import OpType

logger = logging.getLogger(__name__)


def _finite_or(result, fallback, name):
    """结果非有限值时退回 fallback，累加器永远保持有限"""
    if np.isfinite(result):
        return float(result)
    report(DiagnosticKind.NON_FINITE_RESULT,
           f"Non-finite result of {name}: {result}, value left unchanged", str(result))
    return float(fallback)


class Operators:
    """所有操作符的静态方法集合"""

    # 一元操作符====================

    @staticmethod
    def neg(current):
        return -current

    @staticmethod
    def sqrt(current):
        """SQRT 只接受严格正数，否则原值返回"""
        if current > 0:
            return float(np.sqrt(current))
        report(DiagnosticKind.INVALID_SQRT_DOMAIN, f"Bad argument for SQRT: {current}", str(current))
        return current

    # 二元操作符========================================

    @staticmethod
    def set(left, right):
        return right

    @staticmethod
    def add(left, right):
        return left + right

    @staticmethod
    def sub(left, right):
        return left - right

    @staticmethod
    def mul(left, right):
        return left * right

    @staticmethod
    def div(left, right):
        """除零时跳过本次运算"""
        if right == 0:
            report(DiagnosticKind.DIVISION_BY_ZERO, f"Bad right argument for division: {right}", str(right))
            return left
        return left / right

    @staticmethod
    def rem(left, right):
        """与 C 的 fmod 一致：结果符号跟随被除数"""
        if right == 0:
            report(DiagnosticKind.REMAINDER_BY_ZERO, f"Bad right argument for remainder: {right}", str(right))
            return left
        return np.fmod(left, right)

    @staticmethod
    def pow(left, right):
        return np.power(np.float64(left), np.float64(right))


UNARY_OPERATORS = (OpType.NEG, OpType.SQRT)
BINARY_OPERATORS = (OpType.SET, OpType.ADD, OpType.SUB, OpType.MUL,
                    OpType.DIV, OpType.REM, OpType.POW)


def unary(current, op):
    if op not in UNARY_OPERATORS:
        logger.error(f"Unknown unary operator: {op}")
        return current
    op_method = getattr(Operators, op.value)
    return _finite_or(op_method(current), current, op.value)


def binary(op, left, right):
    if op not in BINARY_OPERATORS:
        logger.error(f"Unknown binary operator: {op}")
        return left
    op_method = getattr(Operators, op.value)
    with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
        result = op_method(left, right)
    return _finite_or(result, left, op.value)
