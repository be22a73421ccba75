"""core/token_system.py"""
from enum import Enum
import logging

from core.diagnostics import DiagnosticKind, report

logger = logging.getLogger(__name__)


class OpType(Enum):
    ERR = "err"  # 无法识别
    SET = "set"
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    REM = "rem"
    POW = "pow"
    NEG = "neg"
    SQRT = "sqrt"


class Token:
    def __init__(self, op, name, symbol=None, arity=0):
        self.op = op
        self.name = name
        self.symbol = symbol  # 行首的书写形式，SET 没有符号（由首位数字触发）
        self.arity = arity

    def __repr__(self):
        return f"Token({self.name!r}, arity={self.arity})"


# Token定义字典
TOKEN_DEFINITIONS = {
    # 错误标记
    'err': Token(OpType.ERR, 'err'),

    # 一元操作符（只作用于当前值）
    'neg': Token(OpType.NEG, 'neg', symbol='_', arity=1),
    'sqrt': Token(OpType.SQRT, 'sqrt', symbol='SQRT', arity=1),

    # 二元操作符（当前值 + 一个参数）
    'set': Token(OpType.SET, 'set', arity=2),
    'add': Token(OpType.ADD, 'add', symbol='+', arity=2),
    'sub': Token(OpType.SUB, 'sub', symbol='-', arity=2),
    'mul': Token(OpType.MUL, 'mul', symbol='*', arity=2),
    'div': Token(OpType.DIV, 'div', symbol='/', arity=2),
    'rem': Token(OpType.REM, 'rem', symbol='%', arity=2),
    'pow': Token(OpType.POW, 'pow', symbol='^', arity=2),
}

OP_TO_TOKEN = {token.op: token for token in TOKEN_DEFINITIONS.values()}

# 可以写成 "(+)" 形式折叠使用的符号
FOLDABLE_SYMBOLS = '+-*/%^'


def _build_patterns():
    """(pattern, op) 表，按长度降序，保证贪婪匹配"""
    patterns = []
    for token in TOKEN_DEFINITIONS.values():
        if token.symbol is None:
            continue
        patterns.append((token.symbol, token.op))
        if token.arity == 2 and token.symbol in FOLDABLE_SYMBOLS:
            patterns.append(('(' + token.symbol + ')', token.op))
    patterns.sort(key=lambda item: len(item[0]), reverse=True)
    return patterns


OPERATOR_PATTERNS = _build_patterns()


def arity(op):
    return OP_TO_TOKEN[op].arity


def is_fold_line(line):
    """只看字面形状：第0位是 '(' 且第2位是 ')'"""
    return len(line) >= 3 and line[0] == '(' and line[2] == ')'


class OperatorTokenizer:
    """识别行首的操作符"""

    @staticmethod
    def parse_op(line, pos=0):
        """
        Args:
            line: 一行输入
            pos: 起始位置
        Returns:
            (OpType, 操作符之后的位置)；无法识别时返回 (OpType.ERR, pos)
        """
        if pos < len(line) and line[pos] in '0123456789':
            # 首位数字属于参数本身，位置不前进
            return OpType.SET, pos

        for pattern, op in OPERATOR_PATTERNS:
            if line.startswith(pattern, pos):
                logger.debug(f"Operator {op.name} matched by {pattern!r}")
                return op, pos + len(pattern)

        report(DiagnosticKind.UNRECOGNIZED_OPERATOR, f"Unknown operation {line}", line)
        return OpType.ERR, pos
