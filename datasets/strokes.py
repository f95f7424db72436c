"""
strokes - 示例笔画数据

提供确定性的锚点序列，用于测试和演示。
"""

import numpy as np


def helix_stroke(num_points: int = 24, radius: float = 5.0, pitch: float = 2.0) -> np.ndarray:
    """
    螺旋线采样点。

    Args:
        num_points: 采样点数
        radius: 螺旋半径
        pitch: 每圈上升高度

    Returns:
        (num_points, 3) 锚点
    """
    t = np.linspace(0, 4 * np.pi, num_points)
    return np.column_stack([radius * np.cos(t), radius * np.sin(t), pitch * t / (2 * np.pi)])


def zigzag_stroke(num_points: int = 9, amplitude: float = 2.0) -> np.ndarray:
    """xy 平面内的锯齿折线顶点。"""
    x = np.arange(num_points, dtype=np.float64)
    y = amplitude * (np.arange(num_points) % 2)
    return np.column_stack([x, y, np.zeros(num_points)])


def three_point_arch() -> np.ndarray:
    """三锚点拱形: (0,0,0), (1,2,0), (2,0,0)"""
    return np.array([[0.0, 0.0, 0.0], [1.0, 2.0, 0.0], [2.0, 0.0, 0.0]])
