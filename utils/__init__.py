"""
utils - 工具函数模块

包含:
- geometry: 向量校验与距离计算
"""

from .geometry import as_points, as_vector, distance

__all__ = [
    "as_vector",
    "as_points",
    "distance",
]
