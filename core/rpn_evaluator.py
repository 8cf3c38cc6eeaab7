"""RPN表达式求值器 - 调用统一的操作表"""
import logging

from core.errors import ErrorKind, ExpressionSyntaxError
from core.operators import OPERATION_DEFINITIONS
from core.token_system import TokenType

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估后缀表达式的值"""

    @staticmethod
    def evaluate(token_sequence, operation_table=OPERATION_DEFINITIONS):
        """
        评估后缀表达式
        Args:
            token_sequence: to_postfix 的输出
            operation_table: 符号 -> OperationSpec(arity, evaluate)
        Returns:
            求值结束时的数值栈（列表），合法表达式恰好剩一个值
        Raises:
            ExpressionSyntaxError: 操作数不足(WRONG_ARITY)或未知操作(UNKNOWN_OPERATION)
        """
        stack = []

        for token in token_sequence:
            if token.type == TokenType.NUMBER:
                stack.append(token.value)
                continue

            spec = operation_table.get(token.value)
            if spec is None:
                logger.debug(f"Unknown operation: {token.value}")
                raise ExpressionSyntaxError(
                    ErrorKind.UNKNOWN_OPERATION, f"Unknown operation {token.value!r}"
                )

            if len(stack) < spec.arity:
                logger.debug(f"Insufficient operands for {token.value}: "
                             f"need {spec.arity}, have {len(stack)}")
                raise ExpressionSyntaxError(
                    ErrorKind.WRONG_ARITY,
                    f"Operation {token.value!r} expects {spec.arity} operand(s), got {len(stack)}"
                )

            # 第一个出栈的是右操作数
            operands = [stack.pop() for _ in range(spec.arity)][::-1]
            stack.append(float(spec.evaluate(*operands)))

        return stack
