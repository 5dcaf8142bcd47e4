"""Operations that reduce a collection to a single value."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from arfluent.ops._materialize import Key, Source, collection_op, is_list_shaped
from arfluent.types.sentinels import Empty, EmptyType, NoInitial, NoInitialType, NotFound, NotFoundType

__all__ = [
    'count',
    'first',
    'implode',
    'is_list',
    'last',
    'reduce',
    'search',
]


@collection_op
def count(coll: Source[Any], /) -> int:
    """Return the number of entries."""
    return len(coll)


@collection_op
def search[V](coll: Source[V], /, predicate: Callable[[V, Key], bool]) -> V | NotFoundType:
    """Return the first value for which predicate returns exactly ``True``.

    Returns:
        The matching value, or ``NotFound`` when nothing matches.

    Examples:
        >>> search([{'a': 1}, {'a': 3}], lambda value, key: value['a'] == 3)
        {'a': 3}
    """
    for key, value in coll.items():
        if predicate(value, key) is True:
            return value
    return NotFound


@collection_op
def reduce[V, A](
    coll: Source[V],
    /,
    fn: Callable[[A, V, Key], A],
    initial: A | NoInitialType = NoInitial,
) -> A | NoInitialType:
    """Fold the collection from the left with ``fn(carry, value, key)``.

    The fold starts from exactly ``initial``. Without one, the ``NoInitial``
    marker is the starting carry: the first call receives it, and an empty
    collection returns it. ``None`` is an ordinary initial value.

    Examples:
        >>> reduce([1, 2, 4], lambda carry, value, key: carry + value, 0)
        7
        >>> reduce([], lambda carry, value, key: carry + value)
        NoInitial
    """
    carry = initial
    for key, value in coll.items():
        carry = fn(carry, value, key)
    return carry


@collection_op
def first[V](coll: Source[V], /) -> V | EmptyType:
    """Return the first value, or ``Empty`` when there are no entries."""
    return next(iter(coll.values()), Empty)


@collection_op
def last[V](coll: Source[V], /) -> V | EmptyType:
    """Return the last value, or ``Empty`` when there are no entries."""
    return next(reversed(coll.values()), Empty)


def _to_string(value: object) -> str:
    if value is None or value is False:
        return ''
    if value is True:
        return '1'
    return str(value)


@collection_op
def implode(coll: Source[Any], /, separator: str = '') -> str:
    """Join the values' string forms with separator.

    ``None`` and ``False`` render as ``''`` and ``True`` as ``'1'``.

    Examples:
        >>> implode(['a', 'b', 'c'], ',')
        'a,b,c'
    """
    return separator.join(_to_string(value) for value in coll.values())


@collection_op
def is_list(coll: Source[Any], /) -> bool:
    """Return True if the keys are exactly ``0..n-1`` in order.

    Plain sequences and iterables are always list-shaped once materialized;
    the question is only interesting for mappings.

    Examples:
        >>> is_list({0: 'a', 1: 'b'})
        True
        >>> is_list({1: 'b', 0: 'a'})
        False
    """
    return is_list_shaped(coll)
