"""
tangents - 锚点切向偏移计算

由控制点 B 得到每个锚点的入/出切向偏移（Bézier 手柄相对锚点的位移）。
首锚点入偏移、末锚点出偏移恒为零（开曲线边界条件）。
"""

import numpy as np

EXACT_WEIGHTS = (1.0 / 3.0, 2.0 / 3.0)


def compute_tangents(
    anchors: np.ndarray,
    control_points: np.ndarray | None,
    weights: tuple[float, float] = EXACT_WEIGHTS,
) -> tuple[np.ndarray, np.ndarray]:
    """
    计算每个锚点的入/出切向偏移。

        incoming[i] = w_far·B[i-1] + w_near·B[i] - A[i]   (i > 0)
        outgoing[i] = w_near·B[i] + w_far·B[i+1] - A[i]   (i < n-1)

    Args:
        anchors: (n, dim) 锚点
        control_points: (n, dim) 控制点，n <= 2 时为 None
        weights: (w_far, w_near)，默认 (1/3, 2/3)

    Returns:
        incoming: (n, dim) 入切向偏移
        outgoing: (n, dim) 出切向偏移
    """
    anchors = np.asarray(anchors, dtype=np.float64)
    incoming = np.zeros_like(anchors)
    outgoing = np.zeros_like(anchors)

    if len(anchors) <= 2 or control_points is None:
        return incoming, outgoing

    w_far, w_near = weights
    B = np.asarray(control_points, dtype=np.float64)

    incoming[1:] = w_far * B[:-1] + w_near * B[1:] - anchors[1:]
    outgoing[:-1] = w_near * B[:-1] + w_far * B[1:] - anchors[:-1]

    return incoming, outgoing
