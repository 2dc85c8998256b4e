"""Aggregates over sequences of measurements.

Every helper requires all items to belong to one family and returns a
measurement of that family. Empty input gives ``None``, except ``total``
when the family is named explicitly, which gives the family's zero.

Example:
    >>> legs = [Length(3, LengthUnit.KILOMETERS), Length(500, LengthUnit.METERS)]
    >>> total(legs)
    <Length: 3500 m>
    >>> spread(legs)
    <Length: 2500 m>
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

import numpy as np

from physunits.core.measurement import Measurement

M = TypeVar("M", bound=Measurement)


def _same_family(items: Iterable[M]) -> list[M]:
    values = list(items)
    if values:
        first = values[0]
        for value in values[1:]:
            first._check_operand(value)
    return values


def _base_values(values: list[M]) -> np.ndarray:
    return np.fromiter((float(v) for v in values), dtype=np.float64, count=len(values))


def total(items: Iterable[M], family: type[M] | None = None) -> M | None:
    """Sum of the items.

    Args:
        items: Measurements of a single family.
        family: Family of the result, used when ``items`` is empty.

    Returns:
        The sum, ``family.zero`` for empty input with a family, else ``None``.
    """
    values = _same_family(items)
    if not values:
        return family.zero if family is not None else None
    if family is not None:
        family._check_same_root(type(values[0]))
    return type(values[0]).from_base(float(np.sum(_base_values(values))))


def average(items: Iterable[M]) -> M | None:
    """Arithmetic mean of the items, or ``None`` when empty."""
    values = _same_family(items)
    if not values:
        return None
    return type(values[0]).from_base(float(np.mean(_base_values(values))))


def minimum(items: Iterable[M]) -> M | None:
    values = _same_family(items)
    return min(values) if values else None


def maximum(items: Iterable[M]) -> M | None:
    values = _same_family(items)
    return max(values) if values else None


def spread(items: Iterable[M]) -> M | None:
    """Difference between the largest and the smallest item."""
    values = _same_family(items)
    if not values:
        return None
    return max(values) - min(values)
