"""Capability contracts for (semi)lattices.

A type opts into these contracts structurally: anything that provides the
right methods satisfies the corresponding ``Protocol``, there is no base
class to inherit from. The contracts exist so that domain types can be
checked against the universal lattice laws.

Laws
----
For a meet-semilattice with operation ``meet``:

- Commutative: ``a.meet(b) == b.meet(a)``
- Associative: ``a.meet(b).meet(c) == a.meet(b.meet(c))``
- Idempotent: ``a.meet(a) == a``

``join`` is the dual. ``top()`` is the identity for meet, ``bottom()`` the
identity for join (and the absorbing element for meet).
"""

from __future__ import annotations

from functools import reduce
from typing import Iterable, Protocol, TypeVar, runtime_checkable

_T = TypeVar("_T")
_M = TypeVar("_M", bound="MeetSemiLattice")


@runtime_checkable
class JoinSemiLattice(Protocol):
    """A set with a least upper bound for every pair of elements."""

    def join(self: _T, other: _T) -> _T:
        """Return the least element greater or equal to ``self`` and ``other``."""
        ...


@runtime_checkable
class MeetSemiLattice(Protocol):
    """A set with a greatest lower bound for every pair of elements."""

    def meet(self: _T, other: _T) -> _T:
        """Return the greatest element less or equal to ``self`` and ``other``."""
        ...


@runtime_checkable
class HasTop(Protocol):
    """A set with an element greater or equal to all other elements."""

    @classmethod
    def top(cls: type[_T]) -> _T:
        ...


@runtime_checkable
class HasBottom(Protocol):
    """A set with an element less or equal to all other elements."""

    @classmethod
    def bottom(cls: type[_T]) -> _T:
        ...


def meet_all(items: Iterable[_M], top: _M) -> _M:
    """Fold ``items`` with ``meet``, starting from ``top``.

    ``top`` must be the identity for meet, so an empty ``items`` yields
    ``top`` itself.

    Args:
        items: Elements to combine.
        top: The identity element of the meet operation.

    Returns:
        The greatest lower bound of all items.
    """
    return reduce(lambda acc, item: acc.meet(item), items, top)
