"""utils/numeric.py"""
import numpy as np

from config.config import EVALUATION_CONFIG


def format_result(value, precision=None):
    """把结果格式化成计算器显示用的文本；整数值去掉小数点，inf/nan 用可读名称"""
    if isinstance(value, str):
        return value
    precision = precision or EVALUATION_CONFIG["display_precision"]
    value = float(value)
    if np.isnan(value):
        return "NaN"
    if np.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"  # 同时处理 -0.0
    return np.format_float_positional(value, precision=precision, unique=True,
                                      fractional=False, trim='-')


def results_close(actual, expected, tolerance=None):
    """
    在容差内比较两个结果
    两者都是nan时视为相等，符号相同的inf视为相等
    """
    tolerance = tolerance or EVALUATION_CONFIG["float_tolerance"]
    if isinstance(actual, str) or isinstance(expected, str):
        return actual == expected
    a = float(actual)
    b = float(expected)
    if np.isnan(a) or np.isnan(b):
        return bool(np.isnan(a) and np.isnan(b))
    return bool(np.isclose(a, b, rtol=tolerance, atol=tolerance))
