"""批量表达式加载和求值模块"""
import logging

import numpy as np
import pandas as pd

from config.config import BATCH_CONFIG
from core.calculator import Calculator, EvaluationMode
from utils.numeric import results_close

logger = logging.getLogger(__name__)


def load_expressions(file_path, expression_column=None):
    """
    加载表达式数据集

    Parameters:
    - file_path: CSV文件路径，或每行一个表达式的纯文本文件(.txt)
    - expression_column: 表达式所在列名, 默认为 BATCH_CONFIG['expression_column']

    Returns:
    - DataFrame，至少包含表达式列
    """
    expression_column = expression_column or BATCH_CONFIG["expression_column"]
    logger.info(f"Loading expressions from {file_path}")

    if file_path.endswith('.txt'):
        with open(file_path, 'r', encoding='utf-8') as f:
            lines = [line.rstrip('\n') for line in f]
        df = pd.DataFrame({expression_column: [line for line in lines if line.strip()]})
    else:
        # 全部按字符串读取，避免 "2" 被解析成整数
        df = pd.read_csv(file_path, dtype=str, keep_default_na=False)

    # 确保表达式列存在
    if expression_column not in df.columns:
        raise ValueError(f"Expression column '{expression_column}' not found in dataset.")

    logger.info(f"Loaded {len(df)} expressions")
    return df


def evaluate_expressions(df, mode=EvaluationMode.PRECEDENCE, calculator=None,
                         expression_column=None):
    """
    对每个表达式求值，追加结果列和错误列

    Parameters:
    - df: load_expressions 返回的DataFrame
    - mode: EvaluationMode
    - calculator: Calculator实例，默认新建
    - expression_column: 表达式列名

    Returns:
    - 新的DataFrame，result列失败时为NaN，error列成功时为空字符串；
      存在 expected 列时追加 matches 列（expected 不是数字表示预期失败）
    """
    expression_column = expression_column or BATCH_CONFIG["expression_column"]
    calculator = calculator or Calculator()

    results = [calculator.run(expr, mode) for expr in df[expression_column]]

    evaluated = df.copy()
    evaluated[BATCH_CONFIG["result_column"]] = np.array(
        [r.value if r.ok else np.nan for r in results], dtype=float
    )
    evaluated[BATCH_CONFIG["error_column"]] = [
        '' if r.ok else r.error_message for r in results
    ]

    expected_column = BATCH_CONFIG["expected_column"]
    if expected_column in df.columns:
        expected = pd.to_numeric(df[expected_column], errors='coerce')
        evaluated[BATCH_CONFIG["match_column"]] = [
            _matches_expected(r, value) for r, value in zip(results, expected)
        ]
        mismatched = (~evaluated[BATCH_CONFIG["match_column"]]).sum()
        if mismatched:
            logger.warning(f"{mismatched} results differ from the expected column")

    failed = sum(1 for r in results if not r.ok)
    logger.info(f"Evaluated {len(results)} expressions ({mode.value}), {failed} failed")
    return evaluated


def save_results(df, output_path=None):
    output_path = output_path or BATCH_CONFIG["default_output_path"]
    logger.info(f"Saving results to {output_path}")
    df.to_csv(output_path, index=False)
    return output_path


def _matches_expected(result, expected):
    if np.isnan(expected):
        return not result.ok
    return result.ok and results_close(result.value, expected)
