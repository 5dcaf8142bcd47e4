"""Core types: sentinels and error types."""

from arfluent.types.errors import InvalidInput, InvalidInputError, describe_type
from arfluent.types.sentinels import (
    Empty,
    EmptyType,
    NoInitial,
    NoInitialType,
    NotFound,
    NotFoundType,
    is_sentinel,
)

__all__ = [
    'Empty',
    'EmptyType',
    'InvalidInput',
    'InvalidInputError',
    'NoInitial',
    'NoInitialType',
    'NotFound',
    'NotFoundType',
    'describe_type',
    'is_sentinel',
]
