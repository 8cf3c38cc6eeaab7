"""core/lexer.py - 把规范化后的文本转换成Token序列"""
import logging
import re

from config.config import LEXER_CONFIG
from core.errors import ErrorKind, ExpressionSyntaxError
from core.token_system import Token, TokenType

logger = logging.getLogger(__name__)

# 数字主体：整数、小数、可选指数部分（1e-3），只接受ASCII数字
_NUMBER_BODY = r'(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?'
_UNSIGNED_NUMBER = re.compile(_NUMBER_BODY)
# 符号与数字之间允许空格，使预处理后的 "- 3.14159..." 仍能识别为带符号数
_SIGNED_NUMBER = re.compile(r'[+-]? *' + _NUMBER_BODY)
# 后缀文本中符号必须紧贴数字，"- 2.0" 是运算符加数字
_TIGHT_SIGNED_NUMBER = re.compile(r'[+-]?' + _NUMBER_BODY)


def _build_name_pattern(names):
    # 长名字优先，避免前缀抢先匹配
    ordered = sorted(names, key=len, reverse=True)
    return re.compile('|'.join(re.escape(name) for name in ordered))


_FUNCTION_PATTERN = _build_name_pattern(LEXER_CONFIG["function_names"])
# 常量名后面不能紧跟字母
_CONSTANT_NAMES = _build_name_pattern(LEXER_CONFIG["constant_names"]).pattern
_UNSIGNED_CONSTANT = re.compile(r"(?P<name>" + _CONSTANT_NAMES + r")(?![A-Za-z])")
_SIGNED_CONSTANT = re.compile(r"(?P<sign>[+-]?) *(?P<name>" + _CONSTANT_NAMES + r")(?![A-Za-z])")


def _sign_allowed(result):
    """前一个有效Token为空、运算符或左括号时，前导 +/- 视为数字的一部分"""
    for token in reversed(result):
        if token.type == TokenType.IGNORED:
            continue
        return token.type == TokenType.OPERATOR or token.is_open_paren()
    return True


def _parse_number(literal):
    return float(literal.replace(' ', ''))


def tokenize(text, keep_ignored=False, postfix=False):
    """
    词法分析
    匹配优先级：分隔符 > 数字(含常量名) > 括号 > 运算符 > 函数名
    Args:
        text: 预处理后的表达式
        keep_ignored: 为True时保留逗号/空格为IGNORED Token，供 --show_tokens --show_separators 显示
        postfix: 读取 format_tokens 渲染的后缀文本；此时紧贴数字的 +/- 总是符号，
            后面跟空格的 +/- 总是运算符
    Returns:
        Token列表，顺序与输入一致
    Raises:
        ExpressionSyntaxError(UNRECOGNIZED_INPUT): 某次迭代没有消耗任何输入
    """
    result = []
    pos = 0
    length = len(text)
    separators = LEXER_CONFIG["separators"]
    parentheses = LEXER_CONFIG["parentheses"]
    operator_chars = LEXER_CONFIG["operator_chars"]

    while pos < length:
        last_pos = pos
        char = text[pos]

        # 1. 可忽略的分隔符
        if char in separators:
            if keep_ignored:
                result.append(Token(TokenType.IGNORED, char))
            pos += 1
            continue

        signed = _sign_allowed(result)

        # 2. 数字（命名常量也按数字处理，符号规则相同）
        if postfix:
            number_pattern = _TIGHT_SIGNED_NUMBER
        else:
            number_pattern = _SIGNED_NUMBER if signed else _UNSIGNED_NUMBER
        match = number_pattern.match(text, pos)
        if match:
            result.append(Token(TokenType.NUMBER, _parse_number(match.group())))
            pos = match.end()
            continue

        constant_pattern = _SIGNED_CONSTANT if signed and not postfix else _UNSIGNED_CONSTANT
        match = constant_pattern.match(text, pos)
        if match:
            value = LEXER_CONFIG["constant_names"][match.group("name")]
            if match.groupdict().get("sign") == "-":
                value = -value
            result.append(Token(TokenType.NUMBER, float(value)))
            pos = match.end()
            continue

        # 3. 括号
        if char in parentheses:
            result.append(Token(TokenType.PARENTHESIS, char))
            pos += 1
            continue

        # 4. 运算符
        if char in operator_chars:
            result.append(Token(TokenType.OPERATOR, char))
            pos += 1
            continue

        # 5. 函数名
        match = _FUNCTION_PATTERN.match(text, pos)
        if match:
            result.append(Token(TokenType.FUNCTION, match.group()))
            pos = match.end()
            continue

        # 本轮没有消耗任何输入
        if pos == last_pos:
            remaining = text[pos:]
            logger.debug(f"Unrecognized input at {pos}: {remaining!r}")
            raise ExpressionSyntaxError(
                ErrorKind.UNRECOGNIZED_INPUT,
                f"Unrecognized input {remaining!r}",
                position=pos,
                remaining=remaining,
            )

    return result
