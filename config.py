"""
config - 样条参数配置

集中管理可调参数：切向混合权重、逆矩阵缓存开关、拖拽去抖间距。
"""

from dataclasses import dataclass

from .core.tangents import EXACT_WEIGHTS

# 参考实现使用的小数近似权重 (≈1/3, ≈2/3)
LEGACY_TANGENT_WEIGHTS = (0.333, 0.667)


@dataclass
class SplineSettings:
    """样条计算参数"""

    tangent_weights: tuple = EXACT_WEIGHTS  # (w_far, w_near) 切向混合权重
    cache_inverse: bool = False  # 是否按阶数缓存带状矩阵的逆
    min_spacing: float = 0.0  # track_point 提交新锚点的最小间距

    def __post_init__(self):
        if len(self.tangent_weights) != 2:
            raise ValueError(f"tangent_weights needs 2 entries, got {self.tangent_weights}")
        w_far, w_near = self.tangent_weights
        if w_far <= 0 or w_near <= 0:
            raise ValueError(f"tangent_weights must be positive, got {self.tangent_weights}")
        if abs(w_far + w_near - 1.0) > 1e-9:
            raise ValueError(f"tangent_weights must sum to 1, got {self.tangent_weights}")
        if self.min_spacing < 0:
            raise ValueError(f"min_spacing must be non-negative, got {self.min_spacing}")
        self.tangent_weights = (float(w_far), float(w_near))
