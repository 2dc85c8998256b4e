"""Registry of cross-family relations.

A relation is a plain function taking two measurements of specific families
and returning a measurement of a third family (``force = mass * acceleration``).
Relations belong to neither operand, so they are kept here, keyed by
``(operator, left family, right family)``, and looked up by the arithmetic
operators of ``Measurement``.

Example:
    >>> @relation(operator.mul, Mass, Acceleration, commutative=True)
    ... def force_from_mass_acceleration(mass, acceleration):
    ...     return Force.from_base(mass.base_value / 1000.0 * acceleration.base_value)
    >>> resolve(operator.mul, Acceleration, Mass)
    <function ...>
"""

from __future__ import annotations

import operator
from typing import Callable

from physunits.logger import logger

Relation = Callable[..., object]

_SYMBOLS = {operator.mul: "*", operator.truediv: "/"}
_RELATIONS: dict[tuple[Callable, type, type], Relation] = {}


def register(op: Callable, left: type, right: type, func: Relation) -> None:
    """Register ``func`` as the implementation of ``left <op> right``.

    Args:
        op: ``operator.mul`` or ``operator.truediv``.
        left: Family of the left operand.
        right: Family of the right operand.
        func: Function called as ``func(left_value, right_value)``.

    Raises:
        ValueError: If the operator is not supported or a different function
            is already registered for the same key.
    """
    if op not in _SYMBOLS:
        raise ValueError(f"unsupported relation operator: {op!r}")
    key = (op, left, right)
    existing = _RELATIONS.get(key)
    if existing is not None and existing is not func:
        raise ValueError(
            f"relation {left.__name__} {_SYMBOLS[op]} {right.__name__} "
            f"already registered by {existing.__name__}"
        )
    _RELATIONS[key] = func
    logger.debug(
        "registered relation %s %s %s -> %s",
        left.__name__, _SYMBOLS[op], right.__name__, func.__name__,
    )


def relation(op: Callable, left: type, right: type, *, commutative: bool = False):
    """Decorator registering a relation function.

    With ``commutative=True`` the swapped argument order is registered too,
    so ``a * b`` and ``b * a`` reach the same function.
    """

    def decorator(func: Relation) -> Relation:
        register(op, left, right, func)
        if commutative:
            def swapped(b, a):
                return func(a, b)

            swapped.__name__ = f"{func.__name__}_swapped"
            swapped.__doc__ = func.__doc__
            register(op, right, left, swapped)
        return func

    return decorator


def resolve(op: Callable, left: type, right: type) -> Relation | None:
    """Find the relation for ``left <op> right``, honouring subclasses."""
    for left_base in left.__mro__:
        for right_base in right.__mro__:
            func = _RELATIONS.get((op, left_base, right_base))
            if func is not None:
                return func
    return None


def registered() -> list[tuple[str, type, type]]:
    """Return ``(symbol, left, right)`` for every registered relation."""
    return [(_SYMBOLS[op], left, right) for op, left, right in _RELATIONS]
