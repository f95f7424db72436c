"""
banded_inverse - 三对角带状矩阵的闭式逆

对角线为 4、次对角线为 1 的 order×order 对称三对角矩阵 A，
其逆矩阵可由连分式 (continuant) 递推直接写出，无需消元。

实现:
1. 连分式序列 θ: θ[0]=1, θ[1]=4, θ[k]=4θ[k-1]-θ[k-2]
2. 整数分子矩阵 + 公共整数分母 θ[order]
3. 将逆矩阵作用于右端项（可精确表示时先整数乘再统一除分母）
"""

import logging
from dataclasses import dataclass
from functools import lru_cache

import numpy as np

logger = logging.getLogger(__name__)

DIAGONAL = 4
OFF_DIAGONAL = 1

# float64 可精确表示的最大整数位数
_EXACT_FLOAT_BITS = 53


def continuant_sequence(order: int) -> list[int]:
    """
    计算连分式序列 θ[0..order+1]。

    θ 按约 3.73^k 增长，order≈33 时即超出 int64，因此使用 Python 整数。

    Args:
        order: 矩阵阶数

    Returns:
        长度为 order+2 的整数列表
    """
    theta = [1, DIAGONAL]
    for _ in range(2, order + 2):
        theta.append(DIAGONAL * theta[-1] - theta[-2])
    return theta[: order + 2]


def band_matrix(order: int) -> np.ndarray:
    """构造稠密的 (order, order) 带状矩阵，对角 4，次对角 1。"""
    return (
        DIAGONAL * np.eye(order)
        + OFF_DIAGONAL * np.eye(order, k=1)
        + OFF_DIAGONAL * np.eye(order, k=-1)
    )


@dataclass(frozen=True, eq=False)
class BandedInverse:
    """
    带状矩阵逆的有理表示。

    Attributes:
        order: 矩阵阶数
        numerators: (order, order) Python 整数分子矩阵 (dtype=object)
        denominator: 公共分母 θ[order]
    """

    order: int
    numerators: np.ndarray
    denominator: int

    def to_float(self) -> np.ndarray:
        """逐元素精确相除 (int/int 正确舍入) 得到 float64 逆矩阵。"""
        return (self.numerators / self.denominator).astype(np.float64)

    def apply(self, rhs: np.ndarray) -> np.ndarray:
        """
        求解 A·x = rhs。

        Args:
            rhs: (order,) 或 (order, dim) 右端项

        Returns:
            与 rhs 形状相同的解
        """
        rhs = np.asarray(rhs, dtype=np.float64)
        if rhs.shape[0] != self.order:
            raise ValueError(f"rhs has {rhs.shape[0]} rows, expected {self.order}")

        if self.denominator.bit_length() <= _EXACT_FLOAT_BITS:
            # 分子与分母均可精确表示，最后统一除一次分母
            return (self.numerators.astype(np.float64) @ rhs) / self.denominator
        return self.to_float() @ rhs


def tridiagonal_inverse(order: int) -> BandedInverse:
    """
    闭式求带状矩阵 (对角 4, 次对角 1) 的逆。

    对 1-based 的行 i、列 j:
        i == j: θ[i-1]·φ[j+1]
        i <  j: (-1)^(i+j)·θ[i-1]·φ[j+1]
        i >  j: (-1)^(i+j)·θ[j-1]·φ[i+1]
    其中 φ[k] = θ[order+1-k]，公共分母为 θ[order]。

    Args:
        order: 矩阵阶数，必须 >= 2

    Returns:
        BandedInverse 对象

    Raises:
        ValueError: order < 2
    """
    if order < 2:
        raise ValueError(f"Banded inverse requires order >= 2, got {order}")

    theta = continuant_sequence(order)
    phi = theta[::-1]

    numerators = np.empty((order, order), dtype=object)
    for i in range(1, order + 1):
        for j in range(1, order + 1):
            if i <= j:
                value = theta[i - 1] * phi[j + 1]
            else:
                value = theta[j - 1] * phi[i + 1]
            # 次对角为 +1，符号按 i+j 的奇偶交替
            if (i + j) % 2:
                value = -value
            numerators[i - 1, j - 1] = value

    return BandedInverse(order, numerators, theta[order])


@lru_cache(maxsize=256)
def cached_tridiagonal_inverse(order: int) -> BandedInverse:
    """带缓存的 tridiagonal_inverse，返回的数组为只读。"""
    logger.debug(f"Building banded inverse of order {order}")
    inverse = tridiagonal_inverse(order)
    inverse.numerators.setflags(write=False)
    return inverse
