import logging

import numpy as np
from numba import njit
from vectorbt import _typing as tp

from expsmooth._utils import as_series, empty_series, in_unit_interval

logger = logging.getLogger(__name__)


@njit(cache=True)
def exp_smooth_1d_nb(a: tp.Array1d, alpha: float) -> tp.Array1d:
    """
    Single exponential smoothing, zero-padded at the front.

    Parameters
    ----------
    a : 1d array
        输入时间序列（float），长度至少为 2。
    alpha : float in (0, 1)
        水平平滑参数。

    Returns
    -------
    smoothed : 1d array
        与 a 等长。smoothed[0] 为占位 0，smoothed[1] = a[0]，
        之后 smoothed[i] 是截至 i-1 的一步先验估计。
    """
    n = len(a)
    smoothed = np.empty(n, dtype=np.float64)
    smoothed[0] = 0.0
    smoothed[1] = a[0]

    for i in range(2, n):
        smoothed[i] = alpha * a[i-1] + (1 - alpha) * smoothed[i-1]

    return smoothed


@njit(cache=True)
def double_exp_smooth_1d_nb(a: tp.Array1d, alpha: float, trend_gamma: float) -> tp.Array1d:
    """
    Double (level + trend) exponential smoothing, zero-padded at the front.

    Parameters
    ----------
    a : 1d array
        输入时间序列（float），长度至少为 2。
    alpha : float in [0, 1]
        水平平滑参数。
    trend_gamma : float in [0, 1]
        趋势平滑参数（与 Holt-Winters 的季节参数 gamma 无关）。

    Returns
    -------
    smoothed : 1d array
        与 a 等长的水平估计；趋势序列只在内部使用。
    """
    n = len(a)
    smoothed = np.empty(n, dtype=np.float64)
    b = np.empty(n, dtype=np.float64)

    smoothed[0] = 0.0
    b[0] = 0.0
    smoothed[1] = a[0]
    b[1] = a[1] - a[0]

    for i in range(2, n):
        smoothed[i] = alpha * a[i] + (1 - alpha) * (smoothed[i-1] + b[i-1])
        b[i] = trend_gamma * (smoothed[i] - smoothed[i-1]) + (1 - trend_gamma) * b[i-1]

    return smoothed


@njit(cache=True)
def exp_smooth_nb(a: tp.Array2d, alpha: float) -> tp.Array2d:
    """2-dim version of `exp_smooth_1d_nb`."""
    out = np.empty_like(a, dtype=np.float64)
    for col in range(a.shape[1]):
        out[:, col] = exp_smooth_1d_nb(a[:, col], alpha)
    return out


@njit(cache=True)
def double_exp_smooth_nb(a: tp.Array2d, alpha: float, trend_gamma: float) -> tp.Array2d:
    """2-dim version of `double_exp_smooth_1d_nb`."""
    out = np.empty_like(a, dtype=np.float64)
    for col in range(a.shape[1]):
        out[:, col] = double_exp_smooth_1d_nb(a[:, col], alpha, trend_gamma)
    return out


def exp_smooth(data, alpha) -> np.ndarray:
    """
    单次指数平滑

    Args:
        data: 输入序列，至少 2 个元素
        alpha: 平滑参数，0 < alpha < 1（开区间）

    Returns:
        与输入等长的平滑序列；输入无效时返回空数组
    """
    a = as_series(data)
    if a is None or len(a) < 2:
        logger.debug("exp_smooth: data absent or shorter than 2")
        return empty_series()
    if not in_unit_interval(alpha, inclusive=False):
        logger.debug(f"exp_smooth: alpha {alpha!r} not in (0, 1)")
        return empty_series()

    return exp_smooth_1d_nb(a, float(alpha))


def double_exp_smooth(data, alpha, trend_gamma) -> np.ndarray:
    """
    二次指数平滑（水平 + 趋势）

    Args:
        data: 输入序列，至少 2 个元素
        alpha: 水平平滑参数，[0, 1]（闭区间）
        trend_gamma: 趋势平滑参数，[0, 1]（闭区间）

    Returns:
        与输入等长的平滑序列；输入无效时返回空数组
    """
    a = as_series(data)
    if a is None or len(a) < 2:
        logger.debug("double_exp_smooth: data absent or shorter than 2")
        return empty_series()
    if not in_unit_interval(alpha) or not in_unit_interval(trend_gamma):
        logger.debug(f"double_exp_smooth: alpha {alpha!r} or trend_gamma {trend_gamma!r} not in [0, 1]")
        return empty_series()

    return double_exp_smooth_1d_nb(a, float(alpha), float(trend_gamma))
