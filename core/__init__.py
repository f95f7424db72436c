"""
core - 核心算法模块

包含:
- banded_inverse: 带状矩阵闭式逆
- spline_solver: 控制点求解
- tangents: 切向偏移计算
- curve: 曲线表示
"""

from .banded_inverse import BandedInverse, cached_tridiagonal_inverse, tridiagonal_inverse
from .curve import CurvePoint, CurveRepresentation
from .spline_solver import build_rhs, solve_control_points
from .tangents import compute_tangents

__all__ = [
    "BandedInverse",
    "tridiagonal_inverse",
    "cached_tridiagonal_inverse",
    "build_rhs",
    "solve_control_points",
    "compute_tangents",
    "CurvePoint",
    "CurveRepresentation",
]
