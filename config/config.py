"""配置文件"""

# 真值表参数
TABLE_CONFIG = {
    "max_variables": 20,  # 2^20 行以上直接拒绝
    "warn_variables": 16,  # 超过后记录 warning
}

# 显示参数
DISPLAY_CONFIG = {
    "true_symbol": "T",
    "false_symbol": "F",
    "idle_heading": "The truth table of: ",
    "invalid_heading": "Invalid expression.",
}

# 日志
LOG_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert 0 <= TABLE_CONFIG["warn_variables"] <= TABLE_CONFIG["max_variables"], \
        "warn_variables must not exceed max_variables"
    assert DISPLAY_CONFIG["true_symbol"] != DISPLAY_CONFIG["false_symbol"], \
        "true/false symbols must differ"
    return True
