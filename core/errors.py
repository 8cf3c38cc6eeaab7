"""core/errors.py - 表达式求值的错误类型"""
from enum import Enum


class ErrorKind(Enum):
    UNRECOGNIZED_INPUT = "unrecognized_input"        # 词法分析无法匹配
    UNMATCHED_PARENTHESIS = "unmatched_parenthesis"  # 括号不匹配
    MALFORMED_OPERATION = "malformed_operation"      # 严格模式下三元组不是 (数, 运算符, 数)
    WRONG_ARITY = "wrong_arity"                      # 操作数不足
    RESULT_COUNT = "result_count"                    # 求值结束后栈中不是恰好一个值
    UNKNOWN_OPERATION = "unknown_operation"          # 操作表中没有该符号


class ExpressionError(Exception):
    """所有表达式错误的基类"""


class ExpressionSyntaxError(ExpressionError):
    """
    各阶段抛出的语法错误
    Args:
        kind: ErrorKind
        message: 可读的错误描述
        position: 出错位置（输入字符串中的下标），未知时为None
        remaining: 出错位置之后剩余的文本，用于诊断
    """

    def __init__(self, kind, message, position=None, remaining=None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.position = position
        self.remaining = remaining

    def __str__(self):
        if self.position is None:
            return self.message
        return f"{self.message} at position {self.position}"
