"""
平滑参数配置

参数由调用方给定（本库不做参数估计），这里只负责保存与验证。
"""

from dataclasses import dataclass

import numpy as np

from expsmooth._utils import in_unit_interval, is_count
from expsmooth.smoothing import (
    HWPartition,
    exp_smooth,
    double_exp_smooth,
    holt_winters_partitioned,
)


@dataclass(frozen=True)
class SmoothingConfig:
    """单次/二次指数平滑配置"""
    alpha: float = 0.5
    trend_gamma: float = 0.1

    def exp_smooth(self, data) -> np.ndarray:
        return exp_smooth(data, self.alpha)

    def double_exp_smooth(self, data) -> np.ndarray:
        return double_exp_smooth(data, self.alpha, self.trend_gamma)


@dataclass(frozen=True)
class HoltWintersConfig:
    """Holt-Winters 配置"""
    alpha: float = 0.5            # 水平平滑参数
    beta: float = 0.1             # 趋势平滑参数
    gamma: float = 0.1            # 季节平滑参数
    season_length: int = 12       # 每个季节的样本数
    num_predictions: int = 0      # 样本外预测步数

    def is_valid(self) -> bool:
        """参数是否能通过 holt_winters 的验证（不检查数据）"""
        return (
            in_unit_interval(self.alpha)
            and in_unit_interval(self.beta)
            and in_unit_interval(self.gamma)
            and is_count(self.season_length, 1)
            and is_count(self.num_predictions, 0)
        )

    def forecast(self, data) -> HWPartition:
        return holt_winters_partitioned(
            data, self.alpha, self.beta, self.gamma, self.season_length, self.num_predictions
        )
