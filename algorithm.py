"""
algorithm - 增量式自然三次样条曲线

该模块实现 StrokeCurve 类：维护有序锚点序列，支持逐点追加与拖拽修改末锚点，
并在读取曲线时才惰性地重新求解控制点与切向偏移。

每批连续修改最多触发一次 O(n²) 的完整重算，适用于交互规模（数十到数百个锚点）。
"""

import logging

import numpy as np

from .config import SplineSettings
from .core.banded_inverse import cached_tridiagonal_inverse, tridiagonal_inverse
from .core.curve import CurveRepresentation
from .core.spline_solver import solve_control_points
from .core.tangents import compute_tangents
from .utils.geometry import as_points, as_vector, distance

logger = logging.getLogger(__name__)


class StrokeCurve:
    """
    惰性重算的插值曲线。

    曲线精确经过每个锚点，并在锚点处 C² 连续。任何修改操作都会置脏，
    curve() 在脏时完整重算一次并缓存结果。

    Attributes:
        settings: 样条参数
        dim: 向量维数
        recompute_count: 已执行的完整重算次数
    """

    def __init__(self, points=None, settings: SplineSettings | None = None, dim: int = 3):
        """
        Args:
            points: 可选，(N, dim) 初始锚点
            settings: 样条参数，默认 SplineSettings()
            dim: 向量维数
        """
        self.settings = settings if settings is not None else SplineSettings()
        self.dim = dim
        self.recompute_count = 0

        self._points: list[np.ndarray] = []
        self._dirty = False
        self._curve = CurveRepresentation.empty(dim)

        if points is not None:
            for p in as_points(points, dim):
                self.append_point(p)

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def points(self) -> np.ndarray:
        """(n, dim) 锚点副本"""
        if not self._points:
            return np.zeros((0, self.dim))
        return np.array(self._points)

    def invalidate(self):
        """标记缓存失效，下次读取 curve() 时重算。"""
        self._dirty = True

    def reset(self):
        """清空锚点并清除脏标记。"""
        self._points = []
        self._curve = CurveRepresentation.empty(self.dim)
        self._dirty = False

    def append_point(self, p):
        """追加一个锚点。"""
        self._points.append(as_vector(p, self.dim))
        self.invalidate()

    def update_last_point(self, p):
        """
        覆盖最后一个锚点的位置；无锚点时不做任何事。

        拖拽预览的常见用法：首次落点时追加两次同一点，第一个作为已提交锚点，
        第二个作为可移动的预览点，随后通过本方法持续移动预览点（见 track_point）。
        """
        if not self._points:
            return
        self._points[-1] = as_vector(p, self.dim)
        self.invalidate()

    def point_count(self) -> int:
        return len(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def point_distance(self, idx: int, p) -> float:
        """
        锚点 idx 到 p 的欧氏距离。

        Returns:
            距离；idx 不在 [0, count) 内时返回 NaN（负索引不回绕）
        """
        if idx < 0 or idx >= len(self._points):
            return float("nan")
        return distance(self._points[idx], as_vector(p, self.dim))

    def track_point(self, p) -> bool:
        """
        拖拽输入的去抖追踪。

        首次调用追加两个相同锚点（已提交点 + 预览点）。之后若 p 与最后一个已提交
        锚点的距离大于零且不小于 settings.min_spacing，则把预览点移到 p 作为新的
        已提交锚点，并在 p 处追加新的预览点；否则仅移动预览点。

        已提交锚点（除最后一个预览点外的所有锚点）两两相邻间距均不小于 min_spacing。

        Returns:
            是否追加了新锚点
        """
        if not self._points:
            self.append_point(p)
            self.append_point(p)
            return True

        # 只有一个锚点时还没有预览点
        if len(self._points) == 1:
            self.append_point(p)
            return True

        gap = self.point_distance(len(self._points) - 2, p)
        if gap > 0 and gap >= self.settings.min_spacing:
            # 预览点在 p 处提交，再追加新的预览点
            self.update_last_point(p)
            self.append_point(p)
            return True

        logger.debug("Point within min_spacing, moving preview anchor")
        self.update_last_point(p)
        return False

    def curve(self) -> CurveRepresentation:
        """
        返回当前曲线表示；脏时先完整重算。

        Returns:
            CurveRepresentation，未修改时重复调用返回同一对象
        """
        if self._dirty:
            self._recompute()
        return self._curve

    def _recompute(self):
        """求解控制点并计算切向偏移（完整重算，不做局部修补）。"""
        anchors = self.points
        inverse_provider = (
            cached_tridiagonal_inverse if self.settings.cache_inverse else tridiagonal_inverse
        )

        control_points = solve_control_points(anchors, inverse_provider)
        incoming, outgoing = compute_tangents(
            anchors, control_points, self.settings.tangent_weights
        )

        self._curve = CurveRepresentation(anchors, incoming, outgoing)
        self._dirty = False
        self.recompute_count += 1
        logger.debug(f"Recomputed curve with {len(anchors)} anchors")

    def __repr__(self) -> str:
        status = "dirty" if self._dirty else "clean"
        return f"StrokeCurve(N={len(self._points)}, {status})"
