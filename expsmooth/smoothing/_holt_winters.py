import logging
from typing import NamedTuple

import numpy as np
from numba import njit
from vectorbt import _typing as tp

from expsmooth._utils import as_series, empty_series, in_unit_interval, is_count

logger = logging.getLogger(__name__)


class HWPartition(NamedTuple):
    """Holt-Winters output split into in-sample values and forecasts."""
    smoothed: np.ndarray
    predictions: np.ndarray

    def combined(self) -> np.ndarray:
        """Interleaved form, as returned by `holt_winters`."""
        return np.concatenate((self.smoothed, self.predictions))


def empty_partition() -> HWPartition:
    """Fresh empty partition; never shared between calls."""
    return HWPartition(smoothed=empty_series(), predictions=empty_series())


def split_partition(combined: np.ndarray, n: int) -> HWPartition:
    """Split an interleaved output of length n + num_predictions at n."""
    combined = np.asarray(combined, dtype=np.float64)
    return HWPartition(smoothed=combined[:n].copy(), predictions=combined[n:].copy())


@njit(cache=True)
def _value_at_nb(a: tp.Array1d, i: int) -> float:
    """Read a[i], NaN past the end of the series."""
    if i < len(a):
        return a[i]
    return np.nan


@njit(cache=True)
def initial_trend_1d_nb(a: tp.Array1d, m: int) -> float:
    """
    Average per-step drift across one season of lookahead.

    Reads a[i] and a[i + m] for i < m, so a series shorter than 2 * m gives NaN.
    """
    total = 0.0
    for i in range(m):
        total += (_value_at_nb(a, i + m) - _value_at_nb(a, i)) / m
    return total / m


@njit(cache=True)
def initial_seasonals_1d_nb(a: tp.Array1d, m: int) -> tp.Array1d:
    """
    Additive seasonal indices from complete seasons only.

    Each season is centred on its own mean; the index for offset i is the
    mean deviation at i over all complete seasons. A trailing partial
    season is ignored, and with no complete season every index is NaN.
    """
    n = len(a)
    num_seasons = n // m
    season_averages = np.empty(num_seasons, dtype=np.float64)
    for j in range(num_seasons):
        total = 0.0
        for i in range(m * j, m * j + m):
            total += a[i]
        season_averages[j] = total / m

    seasonals = np.empty(m, dtype=np.float64)
    for i in range(m):
        if num_seasons == 0:
            seasonals[i] = np.nan
            continue
        total = 0.0
        for j in range(num_seasons):
            total += a[m * j + i] - season_averages[j]
        seasonals[i] = total / num_seasons

    return seasonals


@njit(cache=True)
def holt_winters_1d_nb(a: tp.Array1d,
                       alpha: float,
                       beta: float,
                       gamma: float,
                       m: int,
                       num_predictions: int) -> tp.Array1d:
    """
    Additive Holt-Winters (triple exponential smoothing) with out-of-sample forecast.

    Parameters
    ----------
    a : 1d array
        输入时间序列（float），长度至少为 3。
    alpha, beta, gamma : float in [0, 1]
        水平/趋势/季节 平滑参数。
    m : int
        季节长度（>= 1）。
    num_predictions : int
        样本外预测步数（>= 0）。

    Returns
    -------
    out : 1d array
        长度 n + num_predictions。前 n 个为更新后的 水平+趋势+季节，
        out[0] = a[0]；其后为预测值，水平与趋势固定在最后一次样本内更新，
        季节分量按 i % m 循环复用。
    """
    n = len(a)
    trend = initial_trend_1d_nb(a, m)
    seasonals = initial_seasonals_1d_nb(a, m)

    out = np.empty(n + num_predictions, dtype=np.float64)
    smooth = a[0]
    out[0] = a[0]

    for i in range(1, n + num_predictions):
        s = i % m
        if i >= n:
            h = i - n + 1
            out[i] = (smooth + h * trend) + seasonals[s]
        else:
            last_smooth = smooth
            val = a[i]

            smooth = alpha * (val - seasonals[s]) + (1 - alpha) * (smooth + trend)
            trend = beta * (smooth - last_smooth) + (1 - beta) * trend
            seasonals[s] = gamma * (val - smooth) + (1 - gamma) * seasonals[s]

            out[i] = smooth + trend + seasonals[s]

    return out


@njit(cache=True)
def holt_winters_nb(a: tp.Array2d,
                    alpha: float,
                    beta: float,
                    gamma: float,
                    m: int) -> tp.Array2d:
    """
    2-dim version of `holt_winters_1d_nb` without forecasts.

    Applies the in-sample recurrence to each column of the input array.
    """
    out = np.empty_like(a, dtype=np.float64)
    for col in range(a.shape[1]):
        out[:, col] = holt_winters_1d_nb(a[:, col], alpha, beta, gamma, m, 0)
    return out


def _prepare(data, alpha, beta, gamma, season_length, num_predictions):
    """Coerce and validate Holt-Winters input, None when the call must be rejected."""
    a = as_series(data)
    if a is None or len(a) < 3:
        logger.debug("holt_winters: data absent or shorter than 3")
        return None
    for name, value in (("alpha", alpha), ("beta", beta), ("gamma", gamma)):
        if not in_unit_interval(value):
            logger.debug(f"holt_winters: {name} {value!r} not in [0, 1]")
            return None
    if not is_count(season_length, 1):
        logger.debug(f"holt_winters: season_length {season_length!r} is not a positive integer")
        return None
    if not is_count(num_predictions, 0):
        logger.debug(f"holt_winters: num_predictions {num_predictions!r} is not a non-negative integer")
        return None
    if 2 * season_length > len(a):
        logger.warning(
            f"holt_winters: {len(a)} samples cover less than two seasons of length {season_length}, "
            f"initial trend is NaN"
        )
    return a


def holt_winters(data, alpha, beta, gamma, season_length, num_predictions) -> np.ndarray:
    """
    Holt-Winters 三次指数平滑与预测

    Args:
        data: 输入序列，至少 3 个元素
        alpha: 水平平滑参数，[0, 1]
        beta: 趋势平滑参数，[0, 1]
        gamma: 季节平滑参数，[0, 1]
        season_length: 季节长度（正整数）
        num_predictions: 预测步数（非负整数）

    Returns:
        长度 n + num_predictions 的序列（样本内平滑值在前，预测值在后）；
        输入无效时返回空数组
    """
    a = _prepare(data, alpha, beta, gamma, season_length, num_predictions)
    if a is None:
        return empty_series()
    return holt_winters_1d_nb(a, float(alpha), float(beta), float(gamma),
                              int(season_length), int(num_predictions))


def holt_winters_partitioned(data, alpha, beta, gamma, season_length, num_predictions) -> HWPartition:
    """
    与 `holt_winters` 相同的计算，结果拆分为 smoothed（前 n 个）和 predictions（后 num_predictions 个）

    Returns:
        HWPartition；输入无效时返回新的空 HWPartition
    """
    a = _prepare(data, alpha, beta, gamma, season_length, num_predictions)
    if a is None:
        return empty_partition()
    out = holt_winters_1d_nb(a, float(alpha), float(beta), float(gamma),
                             int(season_length), int(num_predictions))
    return split_partition(out, len(a))
