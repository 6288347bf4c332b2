"""Word to float conversions shared by every generator output."""

import numpy as np

MASK64 = (1 << 64) - 1
UINT32_MAX = (1 << 32) - 1

_FLOAT24_SCALE = np.float32(16777216.0)  # 2**24
_FLOAT_UINT32_MAX = np.float32(UINT32_MAX)  # rounds up to 2**32 in single precision
_DOUBLE53_SCALE = 9007199254740992.0  # 2**53
_DOUBLE_UINT64_MAX = float(MASK64)


def float_co(word: int) -> float:
    """Top 24 bits of ``word`` as a single-precision value in [0, 1)."""
    return float(np.float32(word >> 40) / _FLOAT24_SCALE)


def float_cc(word: int) -> float:
    """Top 32 bits of ``word`` as a single-precision value in [0, 1].

    Both operands are rounded to float32 before the division, so the
    largest inputs land exactly on 1.0.
    """
    return float(np.float32(word >> 32) / _FLOAT_UINT32_MAX)


def double_co(word: int) -> float:
    """Top 53 bits of ``word`` as a double in [0, 1)."""
    return float(word >> 11) / _DOUBLE53_SCALE


def double_cc(word: int) -> float:
    """Full ``word`` divided by 2**64 - 1, double in [0, 1]."""
    # float(word) rounds first; int / int would be correctly rounded instead
    return float(word) / _DOUBLE_UINT64_MAX
