"""核心模块 - 预处理、词法分析、调度场重排、RPN求值和求值门面"""
from .errors import ErrorKind, ExpressionError, ExpressionSyntaxError
from .token_system import (
    TokenType, Token, OperatorSpec, OPERATOR_DEFINITIONS, number_token, format_tokens
)
from .operators import Operators, OperationSpec, OPERATION_DEFINITIONS
from .preprocessor import preprocess
from .lexer import tokenize
from .shunting_yard import to_postfix
from .rpn_evaluator import RPNEvaluator
from .calculator import (
    Calculator, EvaluationMode, EvaluationResult,
    evaluate_with_precedence, evaluate_strict_left_to_right
)

__all__ = [
    'ErrorKind', 'ExpressionError', 'ExpressionSyntaxError',
    'TokenType', 'Token', 'OperatorSpec', 'OPERATOR_DEFINITIONS', 'number_token', 'format_tokens',
    'Operators', 'OperationSpec', 'OPERATION_DEFINITIONS',
    'preprocess', 'tokenize', 'to_postfix', 'RPNEvaluator',
    'Calculator', 'EvaluationMode', 'EvaluationResult',
    'evaluate_with_precedence', 'evaluate_strict_left_to_right'
]
