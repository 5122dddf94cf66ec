"""utils/display.py"""
from config.config import OUTPUT_CONFIG


def format_number(value, precision=None):
    """按有效数字格式化（与C++默认流输出一致：3 -> '3', 0.5 -> '0.5'）"""
    precision = precision or OUTPUT_CONFIG['precision']
    return f"{float(value):.{precision}g}"


def format_stack(values):
    """栈内容从底到顶，每个元素后跟一个空格"""
    return ''.join(f"{format_number(v)} " for v in values)
