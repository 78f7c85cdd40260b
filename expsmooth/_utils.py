import math
import numbers
from typing import Any, Optional

import numpy as np


def is_real(value: Any) -> bool:
    """
    判断是否为非NaN的实数

    Args:
        value: 待检查的值

    Returns:
        True 表示 value 是实数（排除 bool）且不是 NaN
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return not math.isnan(value)


def in_unit_interval(value: Any, inclusive: bool = True) -> bool:
    """
    验证平滑参数是否落在 [0, 1]（inclusive=True）或 (0, 1) 内

    Args:
        value: 平滑参数
        inclusive: 是否包含端点

    Returns:
        参数是否有效
    """
    if not is_real(value):
        return False
    if inclusive:
        return 0.0 <= value <= 1.0
    return 0.0 < value < 1.0


def is_count(value: Any, minimum: int = 0) -> bool:
    """验证整数参数（季节长度、预测步数），bool 不算整数"""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        return False
    return value >= minimum


def as_series(data: Any) -> Optional[np.ndarray]:
    """
    将输入序列转换为新的一维 float64 数组

    Args:
        data: list、tuple、numpy 数组或 pandas Series

    Returns:
        连续的 float64 副本；含字符串或对象、无法转换或不是一维时返回 None
    """
    if data is None:
        return None
    try:
        raw = np.asarray(data)
        if raw.dtype.kind in "USO":
            return None
        arr = np.array(raw, dtype=np.float64)
    except (TypeError, ValueError):
        return None
    if arr.ndim != 1:
        return None
    return np.ascontiguousarray(arr)


def empty_series() -> np.ndarray:
    """每次调用返回新的空序列，调用方之间不共享"""
    return np.empty(0, dtype=np.float64)


class ValidationError(ValueError):
    """参数验证异常"""
    def __init__(self, message: str, field: str = None, value=None):
        super().__init__(message)
        self.field = field
        self.value = value


def check_unit_interval(field: str, value: Any, inclusive: bool = True) -> float:
    """
    验证平滑参数，失败时抛出 ValidationError

    Raises:
        ValidationError: 参数不在有效区间内
    """
    if not in_unit_interval(value, inclusive):
        bounds = "[0, 1]" if inclusive else "(0, 1)"
        raise ValidationError(f"{field} must be in {bounds}, got {value!r}", field=field, value=value)
    return float(value)


def check_count(field: str, value: Any, minimum: int = 0) -> int:
    """
    验证整数参数，失败时抛出 ValidationError

    Raises:
        ValidationError: 不是整数或小于 minimum
    """
    if not is_count(value, minimum):
        raise ValidationError(f"{field} must be an integer >= {minimum}, got {value!r}", field=field, value=value)
    return int(value)
