"""工具模块"""
from .numeric import format_result, results_close

__all__ = ['format_result', 'results_close']
