from collections.abc import Iterator
from collections.abc import MutableMapping
from typing import Any
from typing import TypeVar

T = TypeVar("T")


class TypeMap(MutableMapping):
    """
    A mapping keyed by type, used as the extension bag of a request.

    Middleware and framework code stash per-request state here without
    agreeing on string keys up front:

    >>> tm = TypeMap()
    >>> tm.insert(Session(user="alice"))
    >>> tm[Session].user
    "alice"

    A key can also be a marker class whose values are of some other type:

    >>> class RequestId: pass
    >>> tm[RequestId] = "5c6b"
    """

    def __init__(self, *values: Any):
        self._data: dict[type, Any] = {}
        for v in values:
            self.insert(v)

    @staticmethod
    def _check_key(key) -> type:
        if not isinstance(key, type):
            raise TypeError(
                f"TypeMap keys must be types, not {type(key).__name__}."
            )
        return key

    def __getitem__(self, key: type[T]) -> T:
        return self._data[self._check_key(key)]

    def __setitem__(self, key: type, value: Any) -> None:
        self._data[self._check_key(key)] = value

    def __delitem__(self, key: type) -> None:
        del self._data[self._check_key(key)]

    def __iter__(self) -> Iterator[type]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key) -> bool:
        return isinstance(key, type) and key in self._data

    def __repr__(self):
        return "TypeMap[{}]".format(", ".join(k.__name__ for k in self._data))

    def insert(self, value: Any) -> Any | None:
        """
        Store value under its own type.

        Returns:
            The value previously stored under that type, or None.
        """
        key = type(value)
        previous = self._data.get(key)
        self._data[key] = value
        return previous
