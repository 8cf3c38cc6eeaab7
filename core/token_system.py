"""core/token_system.py"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import NamedTuple, Union


class TokenType(Enum):
    NUMBER = "number"            # 数值
    OPERATOR = "operator"        # 二元运算符 + - * / ^
    FUNCTION = "function"        # sin cos tan log ln min max
    PARENTHESIS = "parenthesis"  # ( )
    IGNORED = "ignored"          # 逗号、空格


@dataclass(frozen=True)
class Token:
    """
    不可变Token
    NUMBER 的 value 为 float（允许 inf/nan），其余类型的 value 为原始符号或函数名
    """
    type: TokenType
    value: Union[float, str]

    def is_open_paren(self):
        return self.type == TokenType.PARENTHESIS and self.value == '('

    def is_close_paren(self):
        return self.type == TokenType.PARENTHESIS and self.value == ')'

    def __str__(self):
        if self.type in (TokenType.NUMBER, TokenType.IGNORED):
            return repr(self.value)
        return str(self.value)


class OperatorSpec(NamedTuple):
    precedence: int
    left_associative: bool


# 运算符优先级与结合性，进程内常量
OPERATOR_DEFINITIONS = MappingProxyType({
    '^': OperatorSpec(4, False),
    '*': OperatorSpec(3, True),
    '/': OperatorSpec(3, True),
    '+': OperatorSpec(2, True),
    '-': OperatorSpec(2, True),
})


def number_token(value):
    return Token(TokenType.NUMBER, float(value))


def format_tokens(token_sequence):
    """
    把Token序列渲染成空格分隔的文本，例如后缀式 '2.0 3.0 -2.0 * +'
    负数的符号紧贴数字，运算符两侧总有空格，tokenize(text, postfix=True) 可无歧义地读回
    """
    return ' '.join(str(token) for token in token_sequence)
