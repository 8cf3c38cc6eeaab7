"""core/operators.py"""
from types import MappingProxyType
from typing import Callable, NamedTuple

import numpy as np


class Operators:
    """所有运算的静态方法集合，输入输出均为64位浮点数，遵循IEEE-754（除零得inf，定义域外得nan）"""

    # 二元运算符========================================
    @staticmethod
    def add(operand1, operand2):
        """加法"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.add(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def sub(operand1, operand2):
        """减法"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.subtract(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def mul(operand1, operand2):
        """乘法"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.multiply(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def div(operand1, operand2):
        """除法：不做除零保护，1/0 得到 inf，0/0 得到 nan"""
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            return np.divide(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def pow(operand1, operand2):
        """乘方"""
        with np.errstate(over='ignore', invalid='ignore', divide='ignore'):
            return np.power(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def min(operand1, operand2):
        with np.errstate(invalid='ignore'):
            return np.minimum(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def max(operand1, operand2):
        with np.errstate(invalid='ignore'):
            return np.maximum(np.float64(operand1), np.float64(operand2))

    # 一元函数====================
    @staticmethod
    def sin(operand):
        """正弦（弧度）"""
        with np.errstate(invalid='ignore'):
            return np.sin(np.float64(operand))

    @staticmethod
    def cos(operand):
        """余弦（弧度）"""
        with np.errstate(invalid='ignore'):
            return np.cos(np.float64(operand))

    @staticmethod
    def tan(operand):
        """正切（弧度）"""
        with np.errstate(invalid='ignore'):
            return np.tan(np.float64(operand))

    @staticmethod
    def log(operand):
        """常用对数 log10；0 得 -inf，负数得 nan"""
        with np.errstate(divide='ignore', invalid='ignore'):
            return np.log10(np.float64(operand))

    @staticmethod
    def ln(operand):
        """自然对数"""
        with np.errstate(divide='ignore', invalid='ignore'):
            return np.log(np.float64(operand))


class OperationSpec(NamedTuple):
    arity: int
    evaluate: Callable


# 运算符/函数 -> 元数与求值函数，进程内常量
# 元数目前只有1和2；如需可变元数（如N个参数的max），改这里的arity并调整RPNEvaluator的出栈数量
OPERATION_DEFINITIONS = MappingProxyType({
    '+': OperationSpec(2, Operators.add),
    '-': OperationSpec(2, Operators.sub),
    '*': OperationSpec(2, Operators.mul),
    '/': OperationSpec(2, Operators.div),
    '^': OperationSpec(2, Operators.pow),
    'sin': OperationSpec(1, Operators.sin),
    'cos': OperationSpec(1, Operators.cos),
    'tan': OperationSpec(1, Operators.tan),
    'log': OperationSpec(1, Operators.log),
    'ln': OperationSpec(1, Operators.ln),
    'min': OperationSpec(2, Operators.min),
    'max': OperationSpec(2, Operators.max),
})
