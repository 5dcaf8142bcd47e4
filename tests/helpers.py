"""Non-builtin iterables used to check that operations accept any source."""

from collections.abc import Iterator, Mapping


class MyIterable:
    """A plain iterable over values (no keys, no len)."""

    def __init__(self, values):
        self._values = list(values)

    def __iter__(self) -> Iterator:
        return iter(self._values)


class MyMapping(Mapping):
    """A read-only mapping that is not a dict."""

    def __init__(self, data):
        self._data = dict(data)

    def __getitem__(self, key):
        return self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)


def as_foreign(data):
    """Rebuild data as a non-builtin iterable of the same shape."""
    if isinstance(data, dict):
        return MyMapping(data)
    return MyIterable(data)
