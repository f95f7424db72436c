"""
spline_solver - 自然三次样条控制点求解

锚点 A[i] 与控制点 B[i] 满足 (1/6)B[i-1] + (2/3)B[i] + (1/6)B[i+1] = A[i]，
两端固定 B[0]=A[0], B[n-1]=A[n-1]。

实现:
1. n <= 2: 不求控制点（直线段无需曲率控制）
2. n == 3: 闭式解 B[1] = 1.5·(A[1] - (A[0]+A[2])/6)
3. n >= 4: 构造右端项 S*，乘以带状矩阵的闭式逆
"""

from typing import Callable

import numpy as np

from .banded_inverse import BandedInverse, tridiagonal_inverse


def build_rhs(anchors: np.ndarray) -> np.ndarray:
    """
    构造内部控制点方程组的右端项 S*。

    S*[k] = 6·A[k+1]，首项减去 A[0]、末项减去 A[n-1]（折入固定端点）。

    Args:
        anchors: (n, dim) 锚点，n >= 3

    Returns:
        (n-2, dim) 右端项
    """
    anchors = np.asarray(anchors, dtype=np.float64)
    rhs = 6.0 * anchors[1:-1]
    rhs[0] -= anchors[0]
    rhs[-1] -= anchors[-1]
    return rhs


def solve_control_points(
    anchors: np.ndarray,
    inverse_provider: Callable[[int], BandedInverse] = tridiagonal_inverse,
) -> np.ndarray | None:
    """
    求解控制点序列 B[0..n-1]。

    Args:
        anchors: (n, dim) 锚点
        inverse_provider: 按阶数返回 BandedInverse 的函数（可替换为带缓存版本）

    Returns:
        (n, dim) 控制点；n <= 2 时返回 None
    """
    anchors = np.asarray(anchors, dtype=np.float64)
    n = len(anchors)
    if n <= 2:
        return None

    control_points = anchors.copy()
    if n == 3:
        control_points[1] = 1.5 * (anchors[1] - (anchors[0] + anchors[2]) / 6.0)
        return control_points

    inverse = inverse_provider(n - 2)
    control_points[1:-1] = inverse.apply(build_rhs(anchors))
    return control_points
