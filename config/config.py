"""配置文件"""

# 词法分析参数
TOKENIZER_CONFIG = {
    "terminator": ";",  # 输入结束标记
    "radix_point": ".",
    "unicode_classes": False,  # False: 只认ASCII数字/空白; True: 使用str.isdigit/str.isspace
}

# 输出格式
OUTPUT_CONFIG = {
    "precision": 6,  # 有效数字位数，与原始程序的默认流格式一致
    "result_prefix": "Result: ",  # 仅verbose模式
    "leftover_message": "The input was improper; the stack is not empty.",
}

# 日志配置
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    terminator = TOKENIZER_CONFIG["terminator"]
    assert len(terminator) == 1, "结束标记必须是单个字符"
    assert not terminator.isdigit(), "结束标记不能是数字"
    assert not terminator.isspace(), "结束标记不能是空白"
    assert terminator not in "+-*/", "结束标记不能是操作符"
    assert terminator != TOKENIZER_CONFIG["radix_point"], "结束标记不能是小数点"
    assert OUTPUT_CONFIG["precision"] > 0, "precision必须为正"
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
