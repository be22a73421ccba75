"""工具模块"""
from .trace import SessionTrace

__all__ = ['SessionTrace']
