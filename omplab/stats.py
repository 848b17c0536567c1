"""Sum, minimum, maximum and average of a sequence of numbers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Summary:
    """Aggregate figures for a non-empty collection of numbers."""

    total: int | float
    minimum: int | float
    maximum: int | float
    average: float


def summarize(values: Iterable[int | float]) -> Summary:
    """Compute the sum, minimum, maximum and average of ``values``."""
    items = list(values)
    if not items:
        raise ValueError("cannot summarize an empty collection")
    total = sum(items)
    return Summary(
        total=total,
        minimum=min(items),
        maximum=max(items),
        average=total / len(items),
    )