import logging
from enum import Enum
from typing import NamedTuple

import numpy as np

from expsmooth._utils import as_series

logger = logging.getLogger(__name__)

ERROR_SENTINEL = -1.0


class ErrorKind(Enum):
    """误差计算的失败原因"""
    NONE = "none"
    EMPTY = "empty"
    LENGTH_MISMATCH = "length_mismatch"


class ErrorResult(NamedTuple):
    """Sum of squared error tagged with how validation went."""
    value: float
    error: ErrorKind
    n: int = 0

    @property
    def ok(self) -> bool:
        return self.error is ErrorKind.NONE


def error_result(predictions, actual) -> ErrorResult:
    """
    误差计算的唯一验证入口

    Args:
        predictions: 预测序列
        actual: 真实序列

    Returns:
        ErrorResult；序列缺失、为空或长度不一致时 ok 为 False，value 为 -1
    """
    p = as_series(predictions)
    a = as_series(actual)
    if p is None or a is None or len(p) == 0 or len(a) == 0:
        logger.debug("error_result: predictions or actual absent or empty")
        return ErrorResult(ERROR_SENTINEL, ErrorKind.EMPTY)
    if len(p) != len(a):
        logger.debug(f"error_result: length mismatch {len(p)} != {len(a)}")
        return ErrorResult(ERROR_SENTINEL, ErrorKind.LENGTH_MISMATCH)

    diff = p - a
    return ErrorResult(float(np.dot(diff, diff)), ErrorKind.NONE, len(p))


def sum_sq_error(predictions, actual) -> float:
    """
    误差平方和

    Returns:
        sum((predictions[i] - actual[i]) ** 2)；输入无效时返回 -1
    """
    return error_result(predictions, actual).value


def mse(predictions, actual) -> float:
    """
    均方误差，sum_sq_error / n

    Returns:
        均方误差；输入无效时返回 -1
    """
    result = error_result(predictions, actual)
    if not result.ok:
        return ERROR_SENTINEL
    return result.value / result.n
