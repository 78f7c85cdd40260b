"""
指数平滑模块

提供单次、二次以及 Holt-Winters 三次指数平滑的实现

模块结构:
- _smoothing: 单次/二次指数平滑
- _holt_winters: Holt-Winters 三次指数平滑与样本外预测

主要功能:
- exp_smooth: 单次指数平滑（首位补零）
- double_exp_smooth: 二次指数平滑（水平 + 趋势）
- holt_winters: 平滑值与预测值连成一个序列
- holt_winters_partitioned: 平滑值与预测值分开返回
"""

from expsmooth.smoothing._smoothing import (
    exp_smooth,
    double_exp_smooth,
    exp_smooth_1d_nb,
    exp_smooth_nb,
    double_exp_smooth_1d_nb,
    double_exp_smooth_nb,
)

from expsmooth.smoothing._holt_winters import (
    HWPartition,
    empty_partition,
    split_partition,
    holt_winters,
    holt_winters_partitioned,
    holt_winters_1d_nb,
    holt_winters_nb,
)

__all__ = [
    # 平滑函数
    "exp_smooth",
    "double_exp_smooth",
    "holt_winters",
    "holt_winters_partitioned",

    # 结果类型
    "HWPartition",
    "empty_partition",
    "split_partition",

    # Numba 内核
    "exp_smooth_1d_nb",
    "exp_smooth_nb",
    "double_exp_smooth_1d_nb",
    "double_exp_smooth_nb",
    "holt_winters_1d_nb",
    "holt_winters_nb",
]

# 模块元信息
__module_name__ = "smoothing"
__module_description__ = "指数平滑与Holt-Winters预测模块"
__algorithms__ = [
    "单次指数平滑",
    "二次指数平滑",
    "Holt-Winters加法模型",
]
