"""配置模块"""
from .config import TABLE_CONFIG, DISPLAY_CONFIG, LOG_CONFIG, validate_config

__all__ = ['TABLE_CONFIG', 'DISPLAY_CONFIG', 'LOG_CONFIG', 'validate_config']
