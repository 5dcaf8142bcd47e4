"""ArFluent: a chainable wrapper around a collection.

Each chainable method forwards to the matching operation in
``arfluent.ops`` and wraps the result in a new ``ArFluent``; the wrapper it
was called on is left as it was.
"""

from __future__ import annotations

import warnings
from collections.abc import Callable, Iterator
from typing import Any

import msgspec

from arfluent.ops import query, sequence, transform
from arfluent.ops._materialize import Collection, Key, Source, is_list_shaped, make_array, next_index
from arfluent.types.sentinels import EmptyType, NoInitial, NoInitialType, NotFoundType

__all__ = ['ArFluent', 'ar', 'new', 'wrap']


class ArFluent[V]:
    """A collection with fluent, non-mutating operations.

    Examples:
        >>> numbers = (
        ...     ArFluent([1, 2, 3])
        ...     .map(lambda value, key: value * 2)
        ...     .filter(lambda value, key: value != 4)
        ...     .unwrap()
        ... )
        >>> numbers
        {0: 2, 2: 6}

    The wrapper also behaves like a small dict: ``w[key]``, ``w[key] = v``,
    ``del w[key]``, ``key in w`` and ``len(w)`` act on the owned collection,
    and iterating yields ``(key, value)`` pairs.
    """

    __slots__ = ('_data',)

    def __init__(self, data: Source[V] | None = None) -> None:
        self._data: Collection[V] = {} if data is None else make_array(data)

    @classmethod
    def _adopt[U](cls, data: Collection[U]) -> ArFluent[U]:
        """Wrap a collection no one else holds, without copying it."""
        instance = cls.__new__(cls)
        instance._data = data
        return instance

    # --- Chainable ---

    def map[U](self, fn: Callable[[V, Key], U]) -> ArFluent[U]:
        """Transform values; keys are preserved."""
        return self._adopt(transform.map(self._data, fn))

    def map_keys(self, fn: Callable[[V, Key], Key]) -> ArFluent[V]:
        """Transform keys; on collisions the later value wins."""
        return self._adopt(transform.map_keys(self._data, fn))

    def filter(self, predicate: Callable[[V, Key], bool]) -> ArFluent[V]:
        """Keep entries for which predicate returns exactly True; keys preserved."""
        return self._adopt(transform.filter(self._data, predicate))

    def filter_values(self, predicate: Callable[[V, Key], bool]) -> ArFluent[V]:
        """Keep values for which predicate returns exactly True; reindexed."""
        return self._adopt(transform.filter_values(self._data, predicate))

    def sort(self, compare: Callable[[V, V], int]) -> ArFluent[V]:
        return self._adopt(transform.sort(self._data, compare))

    def unique(self) -> ArFluent[V]:
        """Remove duplicate values; keys kept only for map-shaped data."""
        return self._adopt(transform.unique(self._data))

    def unique_values(self) -> ArFluent[V]:
        return self._adopt(transform.unique_values(self._data))

    def flat(self, depth: int = 1) -> ArFluent[Any]:
        return self._adopt(transform.flat(self._data, depth))

    def keys(self) -> ArFluent[Key]:
        return self._adopt(transform.keys(self._data))

    def values(self) -> ArFluent[V]:
        return self._adopt(transform.values(self._data))

    def slice(self, offset: int, length: int | None = None) -> ArFluent[V]:
        """Extract a range; see ``arfluent.ops.slice``."""
        return self._adopt(sequence.slice(self._data, offset, length))

    def splice(
        self,
        offset: int,
        length: int | None = None,
        replacement: Any = None,
    ) -> ArFluent[V]:
        """Replace a range and return the whole resulting collection.

        This returns the changed collection, not the removed entries.
        """
        return self._adopt(sequence.splice(self._data, offset, length, replacement))

    def merge(self, *others: Source[Any]) -> ArFluent[Any]:
        return self._adopt(sequence.merge(self._data, *others))

    def push(self, *values: V) -> ArFluent[V]:
        return self._adopt(sequence.push(self._data, *values))

    def unshift(self, *values: V) -> ArFluent[V]:
        return self._adopt(sequence.unshift(self._data, *values))

    def for_each(self, fn: Callable[[V, Key], object]) -> ArFluent[V]:
        """Call ``fn(value, key)`` for every entry.

        Returns:
            This wrapper, unchanged.
        """
        transform.for_each(self._data, fn)
        return self

    # --- Terminal ---

    def count(self) -> int:
        return query.count(self._data)

    def search(self, predicate: Callable[[V, Key], bool]) -> V | NotFoundType:
        """Return the first matching value, or ``NotFound``."""
        return query.search(self._data, predicate)

    def reduce[A](
        self,
        fn: Callable[[A, V, Key], A],
        initial: A | NoInitialType = NoInitial,
    ) -> A | NoInitialType:
        """Fold from the left; see ``arfluent.ops.reduce`` for the initial carry."""
        return query.reduce(self._data, fn, initial)

    def implode(self, separator: str = '') -> str:
        return query.implode(self._data, separator)

    def first(self) -> V | EmptyType:
        return query.first(self._data)

    def last(self) -> V | EmptyType:
        return query.last(self._data)

    def is_list(self) -> bool:
        return is_list_shaped(self._data)

    # --- Unwrapping ---

    def unwrap(self) -> Collection[V]:
        """Return a copy of the underlying collection."""
        return dict(self._data)

    def to_array(self) -> Collection[V]:
        """Alias for ``unwrap``.

        .. deprecated:: 0.11.0
            Use ``unwrap`` instead.
        """
        warnings.warn(
            'ArFluent.to_array() is deprecated, use unwrap() instead',
            DeprecationWarning,
            stacklevel=2,
        )
        return self.unwrap()

    def to_list(self) -> list[V]:
        """Return the values as a list, in order."""
        return list(self._data.values())

    def to_json(self) -> str:
        """Encode as JSON.

        List-shaped collections become arrays and others become objects, at
        every depth: nested wrappers and nested ``dict`` collections follow
        the same rule.
        """
        return msgspec.json.encode(_jsonable(self._data)).decode()

    # --- Item access ---

    def __getitem__(self, key: Key) -> V:
        return self._data[key]

    def get[D](self, key: Key, default: D | None = None) -> V | D | None:
        return self._data.get(key, default)

    def __setitem__(self, key: Key, value: V) -> None:
        self._data[key] = value

    def append(self, value: V) -> None:
        """Store value at the next int index, like ``push`` but in place."""
        self._data[next_index(self._data)] = value

    def __delitem__(self, key: Key) -> None:
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[tuple[Key, V]]:
        # Iterate a snapshot so writes during iteration do not disturb it.
        yield from tuple(self._data.items())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ArFluent):
            return self._data == other._data
        if isinstance(other, dict):
            return self._data == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f'ArFluent({self._data!r})'


def _jsonable(value: Any) -> Any:
    """Turn collections into plain lists and dicts msgspec encodes by shape."""
    if isinstance(value, ArFluent):
        value = value._data  # noqa: SLF001
    if isinstance(value, dict):
        if is_list_shaped(value):
            return [_jsonable(item) for item in value.values()]
        return {key: _jsonable(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [_jsonable(item) for item in value]
    return value


def wrap[V](data: Source[V] | None = None) -> ArFluent[V]:
    """Wrap a collection or iterable for fluent chaining.

    Use ``.unwrap()`` at the end to get a plain ``dict`` back.

    Example:
        ```python
        from arfluent import wrap

        numbers = (
            wrap([1, 2, 3])
            .map(lambda value, key: value * 2)
            .filter(lambda value, key: value != 6)
            .unwrap()
        )
        # {0: 2, 1: 4}
        ```
    """
    return ArFluent(data)


def new[V](data: Source[V] | None = None) -> ArFluent[V]:
    """Alias for ``wrap``.

    .. deprecated:: 0.11.0
        Use ``wrap`` instead.
    """
    warnings.warn('arfluent.new() is deprecated, use wrap() instead', DeprecationWarning, stacklevel=2)
    return ArFluent(data)


def ar[V](data: Source[V] | None = None) -> ArFluent[V]:
    """Short helper for ``wrap``."""
    return ArFluent(data)
