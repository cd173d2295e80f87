"""
Tolerance tiers for numerical agreement between kernel variants.

Naive, blocked and parallel kernels sum in different orders, so results
agree only up to rounding:
- FP64: relative agreement at 1e-9 (the library's contract)
- FP64 factorizations: Cholesky/inverse accumulate more rounding
- FP32: relaxed for single-precision storage

Used by the test suite and the benchmark driver's agreement checks.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-12,
    name='fp64',
    description='Double precision, products and transposes',
)

FP64_FACTORIZATION = ToleranceTier(
    rtol=1e-8,
    atol=1e-10,
    name='fp64_factorization',
    description='Double precision, Cholesky factors and inverses',
)

FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision',
)


def select_tolerance(dtype, factorization: bool = False) -> ToleranceTier:
    """Select the tolerance tier for a dtype."""
    if np.dtype(dtype) == np.float32:
        return FP32
    if factorization:
        return FP64_FACTORIZATION
    return FP64


def agrees(a: np.ndarray, b: np.ndarray, tier: ToleranceTier) -> bool:
    """True if a and b agree elementwise within tier."""
    return bool(np.allclose(a, b, rtol=tier.rtol, atol=tier.atol))
