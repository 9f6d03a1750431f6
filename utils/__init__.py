"""工具模块"""
from .formatting import format_bool, format_heading

__all__ = ['format_bool', 'format_heading']
