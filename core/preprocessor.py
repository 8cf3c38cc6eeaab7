"""core/preprocessor.py - 把符号常量和替代运算符字形替换成规范ASCII"""
import logging

from config.config import PREPROCESS_CONFIG

logger = logging.getLogger(__name__)


def preprocess(text, substitute_bare_e=None):
    """
    按顺序做全局字面替换：π、pi -> π的十进制展开（两侧加空格），
    e -> 自然常数的十进制展开（仅在 substitute_bare_e 打开时），÷ -> /，× -> *
    Args:
        text: 原始表达式
        substitute_bare_e: 是否替换所有裸字母e，None时读取PREPROCESS_CONFIG
    Returns:
        新字符串
    """
    if substitute_bare_e is None:
        substitute_bare_e = PREPROCESS_CONFIG["substitute_bare_e"]

    result = text.replace('π', PREPROCESS_CONFIG["pi_expansion"])
    result = result.replace('pi', PREPROCESS_CONFIG["pi_expansion"])
    if substitute_bare_e:
        # 旧行为：任何位置的 e 都会被替换，包括 1e5 中的 e
        result = result.replace('e', PREPROCESS_CONFIG["e_expansion"])
    for glyph, replacement in PREPROCESS_CONFIG["glyph_substitutions"]:
        result = result.replace(glyph, replacement)

    if result != text:
        logger.debug(f"Preprocessed {text!r} -> {result!r}")
    return result
