# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Fixed-width unsigned arithmetic helpers.

Allowance quantities live in the uint256 domain and timestamps in the
uint64 domain. Additions and multiplications saturate at the domain maximum
instead of wrapping; recovered allowance is capped by ``max_amount`` anyway,
so saturation never changes an observable result.
"""

from __future__ import annotations

from typing import Final

UINT256_MAX: Final[int] = (1 << 256) - 1
UINT64_MAX: Final[int] = (1 << 64) - 1


def require_uint(value: int, maximum: int = UINT256_MAX, name: str = "value") -> int:
    """Return ``value`` unchanged if it is an int in ``[0, maximum]``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0 or value > maximum:
        raise ValueError(f"{name} must be in [0, {maximum}], got {value}")
    return value


def saturating_add(a: int, b: int, maximum: int = UINT256_MAX) -> int:
    return min(a + b, maximum)


def saturating_mul(a: int, b: int, maximum: int = UINT256_MAX) -> int:
    return min(a * b, maximum)
