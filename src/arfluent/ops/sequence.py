"""Positional operations: slice, splice, merge, push, unshift."""

from __future__ import annotations

from typing import Any

from arfluent.ops._materialize import (
    Collection,
    Source,
    collection_op,
    dense,
    is_iterable,
    is_list_shaped,
    make_array,
    materialize,
    next_index,
    renumber,
)

__all__ = [
    'merge',
    'push',
    'slice',
    'splice',
    'unshift',
]


def _bounds(size: int, offset: int, length: int | None) -> tuple[int, int]:
    """Resolve offset/length into a ``start:end`` position range.

    A negative offset counts from the end. A negative length stops that many
    entries before the end; ``None`` runs to the end. Both clamp to the
    collection, and an inverted range is empty.
    """
    start = max(size + offset, 0) if offset < 0 else min(offset, size)
    if length is None:
        end = size
    elif length < 0:
        end = max(size + length, start)
    else:
        end = min(start + length, size)
    return start, end


@collection_op
def slice[V](coll: Source[V], /, offset: int, length: int | None = None) -> Collection[V]:  # noqa: A001
    """Extract ``length`` entries starting at ``offset``.

    List-shaped input is reindexed densely; map-shaped input keeps its keys.

    Args:
        offset: Start position; negative counts from the end.
        length: Number of entries; negative stops that many entries from the
            end; None takes everything up to the end.

    Examples:
        >>> slice(['a', 'b', 'c', 'd'], 1, 2)
        {0: 'b', 1: 'c'}
        >>> slice(['a', 'b', 'c', 'd'], -1)
        {0: 'd'}
        >>> slice({5: 'a', 6: 'b', 8: 'c'}, 1, 2)
        {6: 'b', 8: 'c'}
    """
    start, end = _bounds(len(coll), offset, length)
    selected = list(coll.items())[start:end]
    if is_list_shaped(coll):
        return dense(value for _, value in selected)
    return dict(selected)


def _replacement_values(replacement: Any) -> list[Any]:
    if replacement is None:
        return []
    if is_iterable(replacement):
        return list(make_array(replacement).values())
    return [replacement]


@collection_op
def splice[V](
    coll: Source[V],
    /,
    offset: int,
    length: int | None = None,
    replacement: Any = None,
) -> Collection[V]:
    """Remove a range of entries and insert replacement values in its place.

    Unlike a conventional splice this returns the whole resulting
    collection, not the removed entries. List-shaped input is reindexed
    densely. Map-shaped input keeps the keys of the surviving entries, and
    inserted values take fresh int keys after the largest existing one.
    Replacement keys are never reused.

    Args:
        offset: Start of the removed range; negative counts from the end.
        length: Number of entries to remove; negative stops that many entries
            from the end; None removes through the end; 0 removes nothing.
        replacement: Values to insert. A string or other non-iterable value
            is inserted as a single value. None inserts nothing.

    Examples:
        >>> splice(['a', 'b', 'c', 'd'], 1, 2, ['q', 'x'])
        {0: 'a', 1: 'q', 2: 'x', 3: 'd'}
        >>> splice(['a', 'b', 'c', 'd'], 1, 0, 'q')
        {0: 'a', 1: 'q', 2: 'b', 3: 'c', 4: 'd'}
        >>> splice({5: 'a', 6: 'b', 'k': 'c'}, 1, 1, ['q'])
        {5: 'a', 7: 'q', 'k': 'c'}
    """
    start, end = _bounds(len(coll), offset, length)
    inserted = _replacement_values(replacement)
    if is_list_shaped(coll):
        kept = list(coll.values())
        return dense([*kept[:start], *inserted, *kept[end:]])
    entries = list(coll.items())
    fresh = enumerate(inserted, next_index(coll))
    return dict([*entries[:start], *fresh, *entries[end:]])


def merge(*colls: Source[Any]) -> Collection[Any]:
    """Concatenate collections left to right.

    A string key seen again overwrites the earlier value in place. Int keys
    never collide: their values are appended and renumbered densely.

    Examples:
        >>> merge(['a', 'b'], ['c', 'd'])
        {0: 'a', 1: 'b', 2: 'c', 3: 'd'}
        >>> merge({0: 'a', 'k1': 'v1'}, {0: 'c', 'k1': 'v2'})
        {0: 'a', 'k1': 'v2', 1: 'c'}
    """
    return renumber(
        (key, value) for coll in colls for key, value in materialize(coll, 'merge').items()
    )


@collection_op
def push[V](coll: Source[V], /, *values: V) -> Collection[V]:
    """Append values after the largest non-negative int key.

    Existing keys are untouched.

    Examples:
        >>> push([1, 2], 3, 4)
        {0: 1, 1: 2, 2: 3, 3: 4}
        >>> push({'a': 'foo'}, 3)
        {'a': 'foo', 0: 3}
    """
    result = dict(coll)
    index = next_index(result)
    for value in values:
        result[index] = value
        index += 1
    return result


@collection_op
def unshift[V](coll: Source[V], /, *values: V) -> Collection[V]:
    """Prepend values; int keys are renumbered densely, string keys kept.

    Examples:
        >>> unshift([3, 4], 1, 2)
        {0: 1, 1: 2, 2: 3, 3: 4}
    """
    return renumber([*((None, value) for value in values), *coll.items()])
