"""
Place-value decomposition, shared by every grammar engine.

    1_234_567 -> [(567, 0), (234, 1), (1, 2)]
"""

from __future__ import annotations

from .models import MagnitudeGroup


def decompose(magnitude: int) -> list[MagnitudeGroup]:
    """Split a non-negative integer into 3-digit groups, least-significant first.

    Zero yields the single group ``(0, 0)``.
    """
    if magnitude < 0:
        raise ValueError(f"decompose() expects a non-negative magnitude, got {magnitude}")

    groups = [MagnitudeGroup(magnitude % 1000, 0)]
    magnitude //= 1000
    index = 1
    while magnitude:
        magnitude, digits = divmod(magnitude, 1000)
        groups.append(MagnitudeGroup(digits, index))
        index += 1
    return groups


def recompose(groups: list[MagnitudeGroup]) -> int:
    """Inverse of ``decompose``: sum of digits x 1000^index."""
    return sum(g.digits * 1000**g.magnitude_index for g in groups)
