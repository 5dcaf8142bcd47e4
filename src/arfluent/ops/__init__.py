"""Pure collection operations.

Every operation takes a collection-or-iterable first and returns a new
collection (or a single value); inputs are never modified.
"""

from arfluent.ops._materialize import (
    Collection,
    Key,
    Source,
    collection_op,
    is_iterable,
    make_array,
)
from arfluent.ops.query import count, first, implode, is_list, last, reduce, search
from arfluent.ops.sequence import merge, push, slice, splice, unshift
from arfluent.ops.transform import (
    filter,
    filter_values,
    flat,
    for_each,
    keys,
    map,
    map_keys,
    sort,
    unique,
    unique_values,
    values,
)

__all__ = [
    'Collection',
    'Key',
    'Source',
    'collection_op',
    'count',
    'filter',
    'filter_values',
    'first',
    'flat',
    'for_each',
    'implode',
    'is_iterable',
    'is_list',
    'keys',
    'last',
    'make_array',
    'map',
    'map_keys',
    'merge',
    'push',
    'reduce',
    'search',
    'slice',
    'sort',
    'splice',
    'unique',
    'unique_values',
    'unshift',
    'values',
]
