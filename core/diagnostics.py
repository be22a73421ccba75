"""core/diagnostics.py"""
from enum import Enum
import logging

logger = logging.getLogger(__name__)


class DiagnosticKind(Enum):
    UNRECOGNIZED_OPERATOR = "unrecognized_operator"  # 无法识别行首操作符
    MISSING_ARGUMENT = "missing_argument"  # 二元操作缺少参数
    MALFORMED_LITERAL = "malformed_literal"  # 数字字面量格式错误或超长
    UNEXPECTED_SUFFIX = "unexpected_suffix"  # 一元操作后还有多余字符
    DIVISION_BY_ZERO = "division_by_zero"
    REMAINDER_BY_ZERO = "remainder_by_zero"
    INVALID_SQRT_DOMAIN = "invalid_sqrt_domain"  # SQRT 的参数非正
    NON_FINITE_RESULT = "non_finite_result"  # 结果为 nan/inf


def report(kind, message, text=''):
    """
    写出一条诊断日志。
    kind 和 text 通过 extra 挂在日志记录上，调用方（和测试）可以独立于返回值断言。
    """
    logger.error(message, extra={'kind': kind, 'text': text})
