"""配置文件"""
import math

# 预处理参数
PREPROCESS_CONFIG = {
    "substitute_bare_e": False,  # True 时按旧行为替换所有裸字母 e（会误伤 1e5 之类）
    "pi_expansion": f" {repr(math.pi)} ",
    "e_expansion": f" {repr(math.e)} ",
    # 有序替换表，按顺序全局替换
    "glyph_substitutions": [
        ("÷", "/"),
        ("×", "*"),
    ],
}

# 词法分析参数
LEXER_CONFIG = {
    "separators": ", ",  # 只有逗号和空格可忽略
    "parentheses": "()",
    "operator_chars": "/*+^-",
    "function_names": ["sin", "cos", "tan", "log", "ln", "min", "max"],
    "constant_names": {
        "pi": math.pi,
        "e": math.e,
    },
}

# 求值参数
EVALUATION_CONFIG = {
    "error_sentinel": "ERROR",  # 严格从左到右模式的失败返回值
    "error_prefix": "Error: ",  # 优先级模式的错误消息前缀
    "float_tolerance": 1e-9,
    "display_precision": 12,  # 显示时保留的有效数字
}

# 日志参数
LOGGING_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

# 批量求值参数
BATCH_CONFIG = {
    "expression_column": "expression",
    "result_column": "result",
    "error_column": "error",
    "expected_column": "expected",  # 可选列：存在时在容差内比对结果
    "match_column": "matches",
    "default_output_path": "evaluated_expressions.csv",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert set(LEXER_CONFIG["operator_chars"]) == set("/*+^-"), "操作符集合固定为 / * + ^ -"
    assert LEXER_CONFIG["parentheses"] == "()", "括号只支持圆括号"
    assert "," in LEXER_CONFIG["separators"] and " " in LEXER_CONFIG["separators"], "逗号和空格必须可忽略"
    assert EVALUATION_CONFIG["error_sentinel"] == "ERROR", "严格模式的错误标记固定为 ERROR"
    assert EVALUATION_CONFIG["float_tolerance"] > 0, "容差必须为正数"
    for name in LEXER_CONFIG["constant_names"]:
        assert name not in LEXER_CONFIG["function_names"], f"常量 {name} 与函数名冲突"
    print("Configuration validated successfully!")
