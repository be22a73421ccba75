"""core/scanner.py - 定长十进制字面量扫描"""
from collections import namedtuple
import logging

from config.config import CALC_CONFIG
from core.diagnostics import DiagnosticKind, report

logger = logging.getLogger(__name__)

DIGITS = '0123456789'

ScanResult = namedtuple('ScanResult', ['value', 'end', 'ok'])


def skip_ws(line, pos):
    while pos < len(line) and line[pos].isspace():
        pos += 1
    return pos


def scan_decimal(line, pos, fold, max_digits=None):
    """
    从 pos 开始解析一个十进制数字。
    fold 模式下遇到空白字符正常结束（位置停在空白上）；
    非 fold 模式下空白或其他非数字字符都是错误。
    出错时记录诊断，value 为 0，ok 为 False。
    """
    if max_digits is None:
        max_digits = CALC_CONFIG['max_decimal_digits']

    value = 0.0
    count = 0
    integer = True
    fraction = 1.0
    start = pos

    while pos < len(line):
        char = line[pos]
        if char in DIGITS:
            if count == max_digits:
                report(DiagnosticKind.MALFORMED_LITERAL,
                       f"Argument has more than {max_digits} digits: '{line[start:]}'",
                       line[start:])
                return ScanResult(0.0, pos, False)
            if integer:
                value = value * 10 + (ord(char) - ord('0'))
            else:
                fraction /= 10
                value += (ord(char) - ord('0')) * fraction
            count += 1
            pos += 1
        elif char == '.' and integer:
            integer = False
            pos += 1
        elif fold and char.isspace():
            break
        else:
            report(DiagnosticKind.MALFORMED_LITERAL,
                   f"Argument parsing error at {pos}: '{line[pos:]}'",
                   line[pos:])
            return ScanResult(0.0, pos, False)

    if pos > start and count == 0:
        report(DiagnosticKind.MALFORMED_LITERAL,
               f"Argument has no digits: '{line[start:pos]}'",
               line[start:pos])
        return ScanResult(0.0, pos, False)

    return ScanResult(value, pos, True)
