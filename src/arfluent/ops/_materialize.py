"""Materialization of inputs into concrete collections, plus shape helpers.

Every operation works on a collection: a ``dict`` whose insertion order is
the iteration order and whose keys are ints or strings. Inputs are turned
into a fresh collection at the operation boundary, so no operation ever
holds on to (or writes through to) the caller's object.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

import wrapt

from arfluent._logging import get_logger
from arfluent.types.errors import InvalidInputError

__all__ = [
    'Collection',
    'Key',
    'Source',
    'collection_op',
    'dense',
    'is_iterable',
    'is_list_shaped',
    'make_array',
    'materialize',
    'next_index',
    'renumber',
]

type Key = int | str
type Collection[V] = dict[Key, V]
type Source[V] = Mapping[Key, V] | Iterable[V]

_log = get_logger(__name__)

# Iterable in Python, scalar as far as collections are concerned.
_SCALAR_ITERABLES = (str, bytes, bytearray)


def is_iterable(value: object) -> bool:
    """Return True if ``make_array`` accepts value.

    Mappings, ``ArFluent`` wrappers and any other iterable qualify; ``None``
    and strings do not.
    """
    if value is None or isinstance(value, _SCALAR_ITERABLES):
        return False
    return isinstance(value, Iterable)


def make_array[V](value: Source[V]) -> Collection[V]:
    """Materialize value into a new collection.

    Mappings keep their keys and order. Wrappers contribute a copy of the
    collection they own. Any other finite iterable is keyed ``0..n-1`` in
    iteration order.

    Raises:
        InvalidInputError: If value is None, a string, or not iterable.
    """
    from arfluent.fluent import ArFluent

    if isinstance(value, ArFluent):
        return value.unwrap()
    if isinstance(value, Mapping):
        return dict(value.items())
    if not is_iterable(value):
        raise InvalidInputError.for_value(value)
    return dict(enumerate(value))


def materialize[V](value: Source[V], operation: str) -> Collection[V]:
    """``make_array`` for a named operation, logging rejected inputs."""
    try:
        return make_array(value)
    except InvalidInputError as exc:
        _log.debug('input_rejected', operation=operation, type_name=exc.type_name)
        raise


def is_list_shaped(coll: Collection[Any]) -> bool:
    """Return True if the keys of coll are exactly ``0..n-1`` in order."""
    return all(isinstance(key, int) and key == index for index, key in enumerate(coll))


def dense[V](values: Iterable[V]) -> Collection[V]:
    """Key values ``0..n-1`` in order."""
    return dict(enumerate(values))


def next_index(coll: Collection[Any]) -> int:
    """Index an appended value receives: one past the largest non-negative int key."""
    return max((key for key in coll if isinstance(key, int) and key >= 0), default=-1) + 1


def renumber[V](pairs: Iterable[tuple[Key | None, V]]) -> Collection[V]:
    """Build a collection, renumbering int keys (and ``None``) densely.

    String keys are kept as-is; a ``None`` key marks a value with no key of
    its own, which is numbered like an int key.
    """
    result: Collection[V] = {}
    index = 0
    for key, value in pairs:
        if key is None or isinstance(key, int):
            result[index] = value
            index += 1
        else:
            result[key] = value
    return result


def collection_op[**P, T](func: Callable[P, T]) -> Callable[P, T]:
    """Decorator that materializes an operation's first argument.

    The wrapped function always receives a fresh collection it may read or
    copy freely; the caller's input is left untouched.

    Example:
        ```python
        @collection_op
        def count(coll):
            return len(coll)
        count(x for x in 'abc')
        # 3
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> T:
        if not args:
            return wrapped(*args, **kwargs)
        coll = materialize(args[0], wrapped.__name__)
        return wrapped(coll, *args[1:], **kwargs)

    return wrapper(func)  # type: ignore[return-value]
