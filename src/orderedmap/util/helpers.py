from __future__ import annotations

import enum


class NotSet(enum.Enum):
    """Sentinel for "no default given", distinct from a default of `None`."""

    Value = 1


def clamp(value: int, lower: int, upper: int) -> int:
    """Clamp *value* into the closed interval `[lower, upper]`. If *upper* is less than *lower*, *lower* wins."""

    return max(lower, min(value, upper))
