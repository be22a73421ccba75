"""utils/trace.py"""
import logging

import numpy as np
import pandas as pd

from core.diagnostics import logger as diagnostics_logger

logger = logging.getLogger(__name__)

TRACE_COLUMNS = ['line', 'before', 'after', 'changed', 'diagnostics']


class _DiagnosticCounter(logging.Handler):
    """统计诊断日志条数"""

    def __init__(self):
        super().__init__(level=logging.ERROR)
        self.count = 0

    def emit(self, record):
        self.count += 1


class SessionTrace:
    """记录一次会话中每一行的求值过程"""

    def __init__(self):
        self._rows = []

    def __len__(self):
        return len(self._rows)

    def evaluate(self, evaluate_line, current_value, line):
        """
        调用 evaluate_line 并记录本行：输入、前值、后值、是否变化、诊断条数。
        Returns:
            新的累加器值
        """
        counter = _DiagnosticCounter()
        # 计数不受用户日志级别影响；输出由根 handler 的级别过滤
        saved_level = diagnostics_logger.level
        diagnostics_logger.setLevel(logging.ERROR)
        diagnostics_logger.addHandler(counter)
        try:
            new_value = evaluate_line(current_value, line)
        finally:
            diagnostics_logger.removeHandler(counter)
            diagnostics_logger.setLevel(saved_level)
        self.record(line, current_value, new_value, counter.count)
        return new_value

    def record(self, line, before, after, diagnostics=0):
        self._rows.append({
            'line': line,
            'before': float(before),
            'after': float(after),
            'changed': bool(before != after),
            'diagnostics': int(diagnostics),
        })

    def to_frame(self):
        if not self._rows:
            return pd.DataFrame(columns=TRACE_COLUMNS)
        return pd.DataFrame(self._rows, columns=TRACE_COLUMNS)

    def summary(self):
        """行数、被拒绝行数（有诊断且值未变）、最小/最大/最终值"""
        if not self._rows:
            return {'lines': 0, 'rejected': 0, 'min': np.nan, 'max': np.nan, 'final': np.nan}
        df = self.to_frame()
        values = df['after'].to_numpy(dtype=float)
        return {
            'lines': len(df),
            'rejected': int(((df['diagnostics'] > 0) & ~df['changed'].astype(bool)).sum()),
            'min': float(np.min(values)),
            'max': float(np.max(values)),
            'final': float(values[-1]),
        }

    def save(self, path):
        logger.info(f"Saving session trace to {path}")
        self.to_frame().to_csv(path, index=False)
