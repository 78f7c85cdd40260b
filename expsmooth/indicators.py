"""
vectorbt 指标封装

把平滑内核注册为 IndicatorFactory 指标，可按列作用于 pandas 数据并支持参数网格。
指标输出必须与输入同形，因此无效参数抛出 ValidationError，而不是返回空序列。
"""

import numpy as np
from vectorbt import _typing as tp
from vectorbt.indicators.factory import IndicatorFactory

from expsmooth._utils import ValidationError, check_count, check_unit_interval
from expsmooth.smoothing import exp_smooth_nb, double_exp_smooth_nb, holt_winters_nb

__all__ = [
    "EXPS",
    "DEXPS",
    "HW",
    "HWD",
]


def _check_rows(close: tp.Array2d, minimum: int) -> None:
    if close.shape[0] < minimum:
        raise ValidationError(f"close must have at least {minimum} rows, got {close.shape[0]}",
                              field="close", value=close.shape[0])


def exps_apply_func(close: tp.Array2d, alpha: float) -> tp.Array2d:
    """Apply function for single exponential smoothing indicators."""
    _check_rows(close, 2)
    alpha = check_unit_interval("alpha", alpha, inclusive=False)
    return exp_smooth_nb(np.asarray(close, dtype=np.float64), alpha)


def dexps_apply_func(close: tp.Array2d, alpha: float, trend_gamma: float) -> tp.Array2d:
    """Apply function for double exponential smoothing indicators."""
    _check_rows(close, 2)
    alpha = check_unit_interval("alpha", alpha)
    trend_gamma = check_unit_interval("trend_gamma", trend_gamma)
    return double_exp_smooth_nb(np.asarray(close, dtype=np.float64), alpha, trend_gamma)


def hw_apply_func(close: tp.Array2d, alpha: float, beta: float, gamma: float, m: int) -> tp.Array2d:
    """Apply function for Holt-Winters indicators (in-sample only)."""
    _check_rows(close, 3)
    alpha = check_unit_interval("alpha", alpha)
    beta = check_unit_interval("beta", beta)
    gamma = check_unit_interval("gamma", gamma)
    m = check_count("m", m, minimum=1)
    return holt_winters_nb(np.asarray(close, dtype=np.float64), alpha, beta, gamma, m)


def hw_delta_apply_func(close: tp.Array2d, alpha: float, beta: float, gamma: float, m: int) -> tp.Array2d:
    """Apply function for Holt-Winters Delta: input values minus HW output."""
    return close - hw_apply_func(close, alpha, beta, gamma, m)


EXPS = IndicatorFactory(
    class_name='EXPS',
    module_name=__name__,
    short_name='exps',
    input_names=['close'],
    param_names=['alpha'],
    output_names=['exps']
).from_apply_func(
    exps_apply_func,
    alpha=0.5
)

DEXPS = IndicatorFactory(
    class_name='DEXPS',
    module_name=__name__,
    short_name='dexps',
    input_names=['close'],
    param_names=['alpha', 'trend_gamma'],
    output_names=['dexps']
).from_apply_func(
    dexps_apply_func,
    param_product=True,
    alpha=0.5,
    trend_gamma=0.1
)

HW = IndicatorFactory(
    class_name='HW',
    module_name=__name__,
    short_name='hw',
    input_names=['close'],
    param_names=['alpha', 'beta', 'gamma', 'm'],
    output_names=['hw']
).from_apply_func(
    hw_apply_func,
    param_product=True,
    m=12
)

HWD = IndicatorFactory(
    class_name='HWD',
    module_name=__name__,
    short_name='hwd',
    input_names=['close'],
    param_names=['alpha', 'beta', 'gamma', 'm'],
    output_names=['hwd']
).from_apply_func(
    hw_delta_apply_func,
    m=12
)
