"""
expsmooth 指数平滑预测模块

提供单次、二次、Holt-Winters 三次指数平滑和误差指标，
并把平滑内核注册为 vectorbt 指标

模块结构:
- smoothing: 指数平滑与 Holt-Winters 预测
- metrics: 误差平方和与均方误差
- indicators: vectorbt 指标封装
- _config: 参数配置
"""

# 版本信息
__version__ = "0.1.0"
__description__ = "Exponential smoothing and Holt-Winters forecasting - 指数平滑预测"
__license__ = "MIT"

# 导入平滑函数
from expsmooth.smoothing import *

# 导入误差指标
from expsmooth.metrics import *

# 导入vectorbt指标
from expsmooth.indicators import *

# 导入配置
from expsmooth._config import SmoothingConfig, HoltWintersConfig

# 导入工具
from expsmooth._utils import ValidationError

# 定义公开API
__all__ = [
    # 版本信息
    "__version__",
    "__description__",
    "__license__",

    # 平滑函数
    "exp_smooth",
    "double_exp_smooth",
    "holt_winters",
    "holt_winters_partitioned",
    "HWPartition",
    "empty_partition",
    "split_partition",

    # 误差指标
    "ErrorKind",
    "ErrorResult",
    "error_result",
    "sum_sq_error",
    "mse",

    # vectorbt指标
    "EXPS",
    "DEXPS",
    "HW",
    "HWD",

    # 配置
    "SmoothingConfig",
    "HoltWintersConfig",
    "ValidationError",
]
