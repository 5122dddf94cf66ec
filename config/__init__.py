"""配置模块"""
from .config import TOKENIZER_CONFIG, OUTPUT_CONFIG, LOGGING_CONFIG, validate_config

__all__ = ['TOKENIZER_CONFIG', 'OUTPUT_CONFIG', 'LOGGING_CONFIG', 'validate_config']
