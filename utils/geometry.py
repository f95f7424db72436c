"""
geometry - 几何计算工具函数

提供向量校验、点集转换和欧氏距离等基础几何操作。
"""

import numpy as np


def as_vector(p, dim: int = 3) -> np.ndarray:
    """
    将输入转换为 float64 向量并校验。

    Args:
        p: 长度为 dim 的序列或数组
        dim: 向量维数，默认 3

    Returns:
        (dim,) float64 向量（新的副本）

    Raises:
        ValueError: 形状不符或包含 NaN/inf
    """
    v = np.array(p, dtype=np.float64)
    if v.shape != (dim,):
        raise ValueError(f"Expected a vector of shape ({dim},), got {v.shape}")
    if not np.all(np.isfinite(v)):
        raise ValueError(f"Vector components must be finite, got {v}")
    return v


def as_points(points, dim: int = 3) -> np.ndarray:
    """
    将输入转换为 (N, dim) 点集。

    Args:
        points: 点序列，允许为空

    Returns:
        (N, dim) float64 数组
    """
    arr = np.array(points, dtype=np.float64)
    if arr.size == 0:
        return np.zeros((0, dim))
    if arr.ndim != 2 or arr.shape[1] != dim:
        raise ValueError(f"Expected points of shape (N, {dim}), got {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise ValueError("Point coordinates must be finite")
    return arr


def distance(a: np.ndarray, b: np.ndarray) -> float:
    """两点间欧氏距离。"""
    return float(np.linalg.norm(np.asarray(a) - np.asarray(b)))
