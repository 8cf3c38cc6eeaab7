"""core/shunting_yard.py - 调度场算法：中缀Token序列 -> 后缀（逆波兰）序列"""
import logging

from core.errors import ErrorKind, ExpressionSyntaxError
from core.token_system import TokenType, OPERATOR_DEFINITIONS

logger = logging.getLogger(__name__)


def _should_pop(top, op, operator_table):
    """栈顶运算符优先级更高，或优先级相同且当前运算符左结合时出栈"""
    if top.type != TokenType.OPERATOR:
        return False
    top_spec = operator_table[top.value]
    op_spec = operator_table[op.value]
    if top_spec.precedence > op_spec.precedence:
        return True
    return top_spec.precedence == op_spec.precedence and op_spec.left_associative


def to_postfix(token_sequence, operator_table=OPERATOR_DEFINITIONS):
    """
    把Token序列重排为后缀顺序
    Args:
        token_sequence: tokenize 的输出（不会被修改）
        operator_table: 运算符 -> OperatorSpec(precedence, left_associative)
    Returns:
        后缀顺序的Token列表
    Raises:
        ExpressionSyntaxError(UNMATCHED_PARENTHESIS): 多余的 ')' 或未闭合的 '('
    """
    output = []
    stack = []

    for token in token_sequence:
        if token.type == TokenType.IGNORED:
            continue

        if token.type == TokenType.NUMBER:
            output.append(token)

        elif token.type == TokenType.FUNCTION:
            # 函数不参与优先级比较，在栈中充当屏障
            stack.append(token)

        elif token.type == TokenType.OPERATOR:
            while stack and _should_pop(stack[-1], token, operator_table):
                output.append(stack.pop())
            stack.append(token)

        elif token.is_open_paren():
            stack.append(token)

        elif token.is_close_paren():
            while stack and not stack[-1].is_open_paren():
                output.append(stack.pop())
            if not stack:
                logger.debug("Closing parenthesis without a matching '('")
                raise ExpressionSyntaxError(
                    ErrorKind.UNMATCHED_PARENTHESIS, "Unmatched closing parenthesis"
                )
            stack.pop()
            # 刚闭合的参数组属于栈顶的函数
            if stack and stack[-1].type == TokenType.FUNCTION:
                output.append(stack.pop())

    while stack:
        top = stack.pop()
        if top.is_open_paren():
            logger.debug("Unclosed '(' left on the operator stack")
            raise ExpressionSyntaxError(
                ErrorKind.UNMATCHED_PARENTHESIS, "Unclosed opening parenthesis"
            )
        output.append(top)

    return output
