"""配置文件"""
import logging
import math

# 计算器参数
CALC_CONFIG = {
    "max_decimal_digits": 10,  # 单个参数最多10位数字（整数+小数部分合计）
    "initial_value": 0.0,  # 累加器初始值
    "output_precision": 12,  # CLI 打印时的有效数字位数
}

# 日志配置
LOGGING_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

# 交互模式
REPL_CONFIG = {
    "prompt": "> ",
    "quit_words": ("q", "quit", "exit"),
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert isinstance(CALC_CONFIG["max_decimal_digits"], int), "max_decimal_digits必须是整数"
    assert CALC_CONFIG["max_decimal_digits"] > 0, "max_decimal_digits必须为正"
    assert math.isfinite(CALC_CONFIG["initial_value"]), "初始值必须是有限数"
    assert CALC_CONFIG["output_precision"] > 0, "output_precision必须为正"
    assert isinstance(logging.getLevelName(LOGGING_CONFIG["level"]), int), \
        f"未知日志级别: {LOGGING_CONFIG['level']}"
    return True
