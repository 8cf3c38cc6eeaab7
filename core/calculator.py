"""core/calculator.py - 求值门面：文本输入，数值或错误输出"""
import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from config.config import EVALUATION_CONFIG
from core.errors import ErrorKind, ExpressionError, ExpressionSyntaxError
from core.lexer import tokenize
from core.operators import OPERATION_DEFINITIONS
from core.preprocessor import preprocess
from core.rpn_evaluator import RPNEvaluator
from core.shunting_yard import to_postfix
from core.token_system import TokenType, number_token

logger = logging.getLogger(__name__)


class EvaluationMode(Enum):
    PRECEDENCE = "precedence"  # 调度场 + 后缀求值
    STRICT = "strict"          # 严格从左到右，无优先级


@dataclass(frozen=True)
class EvaluationResult:
    """单次求值的结果：成功时 value 有值，失败时 error 有值"""
    expression: str
    mode: EvaluationMode
    value: Optional[float] = None
    error: Optional[Exception] = None

    @property
    def ok(self):
        return self.error is None

    @property
    def error_message(self):
        if self.error is None:
            return None
        return f"{EVALUATION_CONFIG['error_prefix']}{self.error}"


class Calculator:
    """组合预处理、词法分析、重排和求值；所有阶段的异常在这里转换成结果值"""

    def __init__(self, substitute_bare_e=None, operation_table=OPERATION_DEFINITIONS):
        self.substitute_bare_e = substitute_bare_e
        self.operation_table = operation_table

    def tokenize(self, expression, keep_ignored=False):
        return tokenize(preprocess(expression, self.substitute_bare_e), keep_ignored=keep_ignored)

    def postfix(self, expression):
        return to_postfix(self.tokenize(expression))

    def run(self, expression, mode=EvaluationMode.PRECEDENCE):
        """
        Args:
            expression: 表达式文本
            mode: EvaluationMode
        Returns:
            EvaluationResult，不抛异常
        """
        try:
            if mode == EvaluationMode.STRICT:
                value = self._evaluate_strict(expression)
            else:
                value = self._evaluate_precedence(expression)
            return EvaluationResult(expression, mode, value=value)
        except ExpressionError as e:
            if mode == EvaluationMode.STRICT:
                logger.debug(f"Strict evaluation of {expression!r} failed: {e}")
            else:
                logger.warning(f"Error evaluating expression {expression!r}: {e}")
            return EvaluationResult(expression, mode, error=e)
        except Exception as e:
            logger.error(f"Unexpected failure evaluating {expression!r}: {str(e)}")
            return EvaluationResult(expression, mode, error=e)

    def _evaluate_precedence(self, expression):
        stack = RPNEvaluator.evaluate(self.postfix(expression), self.operation_table)
        if len(stack) != 1:
            raise ExpressionSyntaxError(
                ErrorKind.RESULT_COUNT,
                f"Expression produced {len(stack)} values, expected 1"
            )
        return stack[0]

    def _evaluate_strict(self, expression):
        # 工作区是调用方序列的副本，消耗它不影响原序列
        workspace = deque(self.tokenize(expression))

        while len(workspace) != 1:
            if len(workspace) < 3:
                raise ExpressionSyntaxError(
                    ErrorKind.MALFORMED_OPERATION,
                    f"Expected operand, operator, operand but only {len(workspace)} token(s) remain"
                )
            left = workspace.popleft()
            op = workspace.popleft()
            right = workspace.popleft()
            if (left.type != TokenType.NUMBER or op.type != TokenType.OPERATOR
                    or right.type != TokenType.NUMBER):
                raise ExpressionSyntaxError(
                    ErrorKind.MALFORMED_OPERATION,
                    f"Cannot apply {left} {op} {right}"
                )
            result = self.operation_table[op.value].evaluate(left.value, right.value)
            workspace.appendleft(number_token(result))

        last = workspace[0]
        if last.type != TokenType.NUMBER:
            raise ExpressionSyntaxError(
                ErrorKind.MALFORMED_OPERATION, f"Expression reduces to {last}, not a number"
            )
        return last.value


_DEFAULT_CALCULATOR = Calculator()


def evaluate_with_precedence(expression) -> Union[float, str]:
    """按运算符优先级求值；失败时返回以 'Error: ' 开头的描述"""
    result = _DEFAULT_CALCULATOR.run(expression, EvaluationMode.PRECEDENCE)
    return result.value if result.ok else result.error_message


def evaluate_strict_left_to_right(expression) -> Union[float, str]:
    """忽略优先级严格从左到右求值；失败时返回 'ERROR'"""
    result = _DEFAULT_CALCULATOR.run(expression, EvaluationMode.STRICT)
    return result.value if result.ok else EVALUATION_CONFIG["error_sentinel"]
