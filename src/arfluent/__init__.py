"""arfluent: fluent, non-mutating operations on ordered key-value collections.

A collection is a ``dict`` whose insertion order is its iteration order.
Operations never modify their input; each returns a new collection (or a
single value), and documents whether it keeps keys or renumbers them.

Flat imports (preferred):
    from arfluent import wrap, ArFluent, NotFound, Empty, NoInitial
    from arfluent import filter, map, merge, slice, splice, unique

Submodule imports (for organization):
    from arfluent.ops import transform, sequence, query
    from arfluent.types import InvalidInputError
"""

# Configuration
from arfluent._config import ArConfig, get_config, init

# Logging
from arfluent._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)

# Fluent wrapper
from arfluent.fluent import ArFluent, ar, new, wrap

# Operations
from arfluent.ops import (
    Collection,
    Key,
    Source,
    count,
    filter,
    filter_values,
    first,
    flat,
    for_each,
    implode,
    is_iterable,
    is_list,
    keys,
    last,
    make_array,
    map,
    map_keys,
    merge,
    push,
    reduce,
    search,
    slice,
    sort,
    splice,
    unique,
    unique_values,
    unshift,
    values,
)

# Types
from arfluent.types import (
    Empty,
    EmptyType,
    InvalidInput,
    InvalidInputError,
    NoInitial,
    NoInitialType,
    NotFound,
    NotFoundType,
    is_sentinel,
)

__all__ = [
    # Fluent
    'ArFluent',
    'ar',
    'new',
    'wrap',
    # Operations
    'Collection',
    'Key',
    'Source',
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
    # Types
    'Empty',
    'EmptyType',
    'InvalidInput',
    'InvalidInputError',
    'NoInitial',
    'NoInitialType',
    'NotFound',
    'NotFoundType',
    'is_sentinel',
    # Configuration
    'ArConfig',
    'get_config',
    'init',
    # Logging
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

__version__ = '0.11.0'
