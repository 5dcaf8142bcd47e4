"""Sentinel values returned where an operation has no data to give back.

Each sentinel is a frozen, field-less msgspec struct with a module-level
singleton. They are values, not errors: callers compare against them with
``is`` rather than catching an exception.
"""

from __future__ import annotations

import msgspec

__all__ = [
    'Empty',
    'EmptyType',
    'NoInitial',
    'NoInitialType',
    'NotFound',
    'NotFoundType',
    'is_sentinel',
]


class NotFoundType(msgspec.Struct, frozen=True, gc=False):
    """Result of ``search`` when no value satisfies the predicate.

    This is a singleton - use the `NotFound` constant instead of
    instantiating directly.

    Examples:
        >>> from arfluent import search
        >>> search([1, 3], lambda v, k: v % 2 == 0) is NotFound
        True
    """

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return 'NotFound'


class EmptyType(msgspec.Struct, frozen=True, gc=False):
    """Result of ``first``/``last`` on a collection with no entries.

    This is a singleton - use the `Empty` constant instead of
    instantiating directly.
    """

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return 'Empty'


class NoInitialType(msgspec.Struct, frozen=True, gc=False):
    """Marker for a ``reduce`` call made without an initial carry.

    The marker is the starting carry itself: the first callback call
    receives it, and reducing an empty collection returns it.
    """

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return 'NoInitial'


NotFound: NotFoundType = NotFoundType()
"""Singleton returned by ``search`` when nothing matches."""

Empty: EmptyType = EmptyType()
"""Singleton returned by ``first``/``last`` for an empty collection."""

NoInitial: NoInitialType = NoInitialType()
"""Singleton used as ``reduce``'s default initial carry."""


def is_sentinel(value: object) -> bool:
    """Return True if value is one of the library's sentinels."""
    return isinstance(value, NotFoundType | EmptyType | NoInitialType)
