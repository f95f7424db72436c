"""
datasets - 示例数据集

包含:
- strokes: 螺旋、锯齿、三点拱形等示例笔画
"""

from .strokes import helix_stroke, three_point_arch, zigzag_stroke

__all__ = [
    "helix_stroke",
    "zigzag_stroke",
    "three_point_arch",
]
