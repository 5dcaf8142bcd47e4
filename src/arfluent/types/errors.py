"""Error types: dual struct+exception for value-based and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'InvalidInput',
    'InvalidInputError',
    'describe_type',
]


def describe_type(value: object) -> str:
    """Name the type of value the way error messages report it."""
    if value is None:
        return 'None'
    return type(value).__qualname__


class InvalidInput(msgspec.Struct, frozen=True, gc=False):
    """Input is neither a collection nor a finite iterable - struct variant."""

    type_name: str

    def to_exception(self) -> InvalidInputError:
        """Convert to exception for raise-based code."""
        return InvalidInputError(self.type_name)


class InvalidInputError(TypeError):
    """Input is neither a collection nor a finite iterable - exception variant."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f'You must pass a collection or iterable. You passed: {type_name}')

    @classmethod
    def for_value(cls, value: object) -> InvalidInputError:
        """Build the error for a rejected value."""
        return cls(describe_type(value))

    def to_struct(self) -> InvalidInput:
        """Convert to struct for value-based code."""
        return InvalidInput(self.type_name)
