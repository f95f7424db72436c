"""
stroke_spline - 增量式自然三次样条插值库

给定逐点增长的三维锚点序列，生成精确经过每个锚点、一阶与二阶导数连续的
分段三次曲线，以 (锚点, 入切向偏移, 出切向偏移) 的形式交给外部几何后端。

控制点由带状三对角矩阵的闭式逆求得，读取时才惰性重算。
"""

from .algorithm import StrokeCurve
from .config import SplineSettings
from .core.curve import CurvePoint, CurveRepresentation

__version__ = "0.1.0"
__all__ = ["StrokeCurve", "SplineSettings", "CurvePoint", "CurveRepresentation"]
