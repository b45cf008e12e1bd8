"""Preferred-size resolution against host layout constraints."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_SIZE_DP = 240


class MeasureMode(str, Enum):
    EXACTLY = "exactly"
    AT_MOST = "at_most"
    UNSPECIFIED = "unspecified"


@dataclass(frozen=True)
class MeasureSpec:
    mode: MeasureMode = MeasureMode.UNSPECIFIED
    size: int = 0


def resolve_size(desired: int, spec: MeasureSpec) -> int:
    if spec.mode == MeasureMode.EXACTLY:
        return spec.size
    if spec.mode == MeasureMode.AT_MOST:
        return min(desired, spec.size)
    return desired


def default_size(density: float = 1.0) -> int:
    return int(DEFAULT_SIZE_DP * density)
