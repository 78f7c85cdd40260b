"""
误差指标模块

为外部参数优化提供评分函数：误差平方和与均方误差。
输入无效时返回 -1，不抛出异常。
"""

from expsmooth.metrics._errors import (
    ERROR_SENTINEL,
    ErrorKind,
    ErrorResult,
    error_result,
    sum_sq_error,
    mse,
)

__all__ = [
    "ERROR_SENTINEL",
    "ErrorKind",
    "ErrorResult",
    "error_result",
    "sum_sq_error",
    "mse",
]
