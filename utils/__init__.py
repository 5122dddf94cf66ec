"""工具模块"""
from .display import format_number, format_stack

__all__ = ['format_number', 'format_stack']
