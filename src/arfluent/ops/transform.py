"""Value and key transformations: map, filter, sort, unique, flat, keys, values.

Which operations keep keys:

- ``map``, ``filter`` and ``for_each`` keep every surviving key.
- ``unique`` keeps keys only for map-shaped input.
- ``map_keys`` replaces keys with the callback's result.
- ``filter_values``, ``unique_values``, ``sort``, ``flat``, ``keys`` and
  ``values`` always return a dense ``0..n-1`` collection.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

from arfluent.ops._materialize import (
    Collection,
    Key,
    Source,
    collection_op,
    dense,
    is_iterable,
    is_list_shaped,
    make_array,
)

__all__ = [
    'filter',
    'filter_values',
    'flat',
    'for_each',
    'keys',
    'map',
    'map_keys',
    'sort',
    'unique',
    'unique_values',
    'values',
]


@collection_op
def map[V, U](coll: Source[V], /, fn: Callable[[V, Key], U]) -> Collection[U]:  # noqa: A001
    """Transform values; keys are preserved.

    Examples:
        >>> map([1, 2, 3], lambda value, key: value * 2)
        {0: 2, 1: 4, 2: 6}
    """
    return {key: fn(value, key) for key, value in coll.items()}


@collection_op
def map_keys[V](coll: Source[V], /, fn: Callable[[V, Key], Key]) -> Collection[V]:
    """Transform keys; values are unchanged.

    When two entries map to the same key the later value wins, in the
    position of the first.

    Examples:
        >>> map_keys([1, 2, 3], lambda value, key: key * 2)
        {0: 1, 2: 2, 4: 3}
    """
    result: Collection[V] = {}
    for key, value in coll.items():
        result[fn(value, key)] = value
    return result


@collection_op
def filter[V](coll: Source[V], /, predicate: Callable[[V, Key], bool]) -> Collection[V]:  # noqa: A001
    """Keep entries for which predicate returns exactly ``True``.

    Keys are preserved, so the result can have gaps. Use ``filter_values``
    for a dense result.

    Examples:
        >>> filter([1, 2, 3, 12], lambda value, key: value % 2 == 0)
        {1: 2, 3: 12}
    """
    return {key: value for key, value in coll.items() if predicate(value, key) is True}


@collection_op
def filter_values[V](coll: Source[V], /, predicate: Callable[[V, Key], bool]) -> Collection[V]:
    """Keep values for which predicate returns exactly ``True``, reindexed densely.

    Examples:
        >>> filter_values([1, 2, 3, 12], lambda value, key: value % 2 == 0)
        {0: 2, 1: 12}
    """
    return dense(value for key, value in coll.items() if predicate(value, key) is True)


@collection_op
def sort[V](coll: Source[V], /, compare: Callable[[V, V], int]) -> Collection[V]:
    """Sort values with a comparison function; keys are discarded.

    ``compare(a, b)`` returns a negative, zero or positive int. The sort is
    stable: values comparing equal keep their relative order.

    Examples:
        >>> sort({'x': 4, 'y': 1, 'z': 3}, lambda a, b: a - b)
        {0: 1, 1: 3, 2: 4}
    """
    return dense(sorted(coll.values(), key=functools.cmp_to_key(compare)))


def _first_occurrences(coll: Collection[Any]) -> list[Key]:
    """Keys of the entries whose value has not been seen earlier."""
    seen_hashable: set[Any] = set()
    seen_other: list[Any] = []
    kept: list[Key] = []
    for key, value in coll.items():
        try:
            hash(value)
        except TypeError:
            # unhashable values, including tuples holding lists
            if any(value == other for other in (*seen_hashable, *seen_other)):
                continue
            seen_other.append(value)
        else:
            if value in seen_hashable or any(value == other for other in seen_other):
                continue
            seen_hashable.add(value)
        kept.append(key)
    return kept


@collection_op
def unique[V](coll: Source[V], /) -> Collection[V]:
    """Remove later duplicate values, comparing with ``==``.

    List-shaped input is reindexed densely; map-shaped input keeps the keys
    of the surviving entries.

    Examples:
        >>> unique(['a', 'a', 'b'])
        {0: 'a', 1: 'b'}
        >>> unique({3: 'a', 4: 'a', 6: 'c'})
        {3: 'a', 6: 'c'}
    """
    kept = _first_occurrences(coll)
    if is_list_shaped(coll):
        return dense(coll[key] for key in kept)
    return {key: coll[key] for key in kept}


@collection_op
def unique_values[V](coll: Source[V], /) -> Collection[V]:
    """Remove later duplicate values; the result is always dense."""
    return dense(coll[key] for key in _first_occurrences(coll))


def _flatten_into(result: list[Any], values: Any, depth: int) -> None:
    for value in values:
        if depth > 0 and is_iterable(value):
            _flatten_into(result, make_array(value).values(), depth - 1)
        else:
            result.append(value)


@collection_op
def flat(coll: Source[Any], /, depth: int = 1) -> Collection[Any]:
    """Concatenate nested collections into one dense collection.

    Nested values are flattened up to ``depth`` levels; anything else (and
    nested collections below that depth) is kept as a single value.

    Examples:
        >>> flat([['a', 'b'], ['c', ['d']]])
        {0: 'a', 1: 'b', 2: 'c', 3: ['d']}
    """
    result: list[Any] = []
    _flatten_into(result, coll.values(), depth)
    return dense(result)


@collection_op
def keys(coll: Source[Any], /) -> Collection[Key]:
    """Return the keys as a dense collection.

    Examples:
        >>> keys({3: 'a', 'foo': 'b', 1: 'c'})
        {0: 3, 1: 'foo', 2: 1}
    """
    return dense(coll.keys())


@collection_op
def values[V](coll: Source[V], /) -> Collection[V]:
    """Return the values as a dense collection."""
    return dense(coll.values())


@collection_op
def for_each[V](coll: Source[V], /, fn: Callable[[V, Key], object]) -> Collection[V]:
    """Call ``fn(value, key)`` for every entry; return the collection unchanged."""
    for key, value in coll.items():
        fn(value, key)
    return coll
