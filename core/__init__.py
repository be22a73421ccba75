"""核心模块 - 操作符识别、数字扫描、求值器和逐行处理"""
from .diagnostics import DiagnosticKind, report
from .token_system import (
    OpType, Token, TOKEN_DEFINITIONS, OPERATOR_PATTERNS,
    OperatorTokenizer, arity, is_fold_line
)
from .scanner import ScanResult, scan_decimal, skip_ws
from .operators import Operators, unary, binary
from .line_processor import LineProcessor, process_line, evaluate_line

__all__ = [
    'DiagnosticKind', 'report',
    'OpType', 'Token', 'TOKEN_DEFINITIONS', 'OPERATOR_PATTERNS',
    'OperatorTokenizer', 'arity', 'is_fold_line',
    'ScanResult', 'scan_decimal', 'skip_ws',
    'Operators', 'unary', 'binary',
    'LineProcessor', 'process_line', 'evaluate_line'
]
