"""
curve - 曲线表示

有序的 (锚点, 入切向偏移, 出切向偏移) 三元组序列，供外部几何后端采样或渲染。

实现:
1. CurvePoint / CurveRepresentation 只读容器
2. 分段三次 Bézier 控制多边形导出
3. 导出为 scipy BPoly（均匀断点 0..n-1）
"""

from dataclasses import dataclass
from typing import Iterator, NamedTuple

import numpy as np
from scipy.interpolate import BPoly


class CurvePoint(NamedTuple):
    """单个锚点及其切向偏移"""

    anchor: np.ndarray
    incoming: np.ndarray
    outgoing: np.ndarray


@dataclass(frozen=True, eq=False)
class CurveRepresentation:
    """
    曲线的锚点 + 切向偏移表示。

    内部保存输入数组的只读视图，缓存的表示不会通过属性被意外修改。

    Attributes:
        anchors: (n, dim) 锚点
        incoming: (n, dim) 入切向偏移
        outgoing: (n, dim) 出切向偏移
    """

    anchors: np.ndarray
    incoming: np.ndarray
    outgoing: np.ndarray

    def __post_init__(self):
        if not (self.anchors.shape == self.incoming.shape == self.outgoing.shape):
            raise ValueError(
                f"Shape mismatch: anchors {self.anchors.shape}, "
                f"incoming {self.incoming.shape}, outgoing {self.outgoing.shape}"
            )
        # 保存只读视图，调用方传入的数组保持可写
        for name in ("anchors", "incoming", "outgoing"):
            view = np.asarray(getattr(self, name)).view()
            view.setflags(write=False)
            object.__setattr__(self, name, view)

    @classmethod
    def empty(cls, dim: int = 3) -> "CurveRepresentation":
        """无锚点的空表示"""
        return cls(np.zeros((0, dim)), np.zeros((0, dim)), np.zeros((0, dim)))

    @property
    def dim(self) -> int:
        return self.anchors.shape[1]

    def __len__(self) -> int:
        return len(self.anchors)

    def __getitem__(self, idx: int) -> CurvePoint:
        return CurvePoint(self.anchors[idx], self.incoming[idx], self.outgoing[idx])

    def __iter__(self) -> Iterator[CurvePoint]:
        for i in range(len(self)):
            yield self[i]

    def bezier_control_points(self) -> np.ndarray:
        """
        每段三次 Bézier 的控制多边形。

        第 i 段: [A[i], A[i]+out[i], A[i+1]+in[i+1], A[i+1]]

        Returns:
            (n-1, 4, dim) 控制点数组；n < 2 时为空
        """
        n = len(self)
        if n < 2:
            return np.zeros((0, 4, self.dim))

        segments = np.empty((n - 1, 4, self.dim))
        segments[:, 0] = self.anchors[:-1]
        segments[:, 1] = self.anchors[:-1] + self.outgoing[:-1]
        segments[:, 2] = self.anchors[1:] + self.incoming[1:]
        segments[:, 3] = self.anchors[1:]
        return segments

    def to_bpoly(self) -> BPoly:
        """
        导出为 Bernstein 基分段多项式，第 i 段定义在 [i, i+1] 上。

        Returns:
            scipy.interpolate.BPoly 对象，取值为 (dim,) 向量

        Raises:
            ValueError: 锚点数少于 2
        """
        if len(self) < 2:
            raise ValueError(f"BPoly export needs at least 2 anchors, got {len(self)}")

        # BPoly 系数形状为 (k+1, m, dim)
        coeffs = self.bezier_control_points().transpose(1, 0, 2)
        breakpoints = np.arange(len(self), dtype=np.float64)
        return BPoly(coeffs, breakpoints)
