import re
from collections.abc import Iterable
from collections.abc import Iterator
from collections.abc import MutableMapping

# RFC 7230 token
_name_re = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


class Headers(MutableMapping):
    """
    Case-insensitive HTTP headers.

    Names keep the spelling they were first added with. A name may be present
    more than once; reading it folds all values into one, as per RFC 7230:

    >>> h = Headers(host="127.0.0.1:3000", user_agent="netmock")
    >>> h.add("Accept", "text/html")
    >>> h.add("accept", "application/xml")
    >>> h["ACCEPT"]
    'text/html, application/xml'

    Setting a header replaces all of its values, keeping its position.
    """

    def __init__(self, fields: Iterable[tuple[str, str]] = (), **headers: str):
        """
        *Args:*
         - *fields:* (optional) ``(name, value)`` pairs, added in order.
         - *\\*\\*headers:* Additional headers to set. Underscores in the names are
           turned into dashes and each word is capitalized, so ``user_agent``
           becomes ``User-Agent``.
        """
        self._fields: list[tuple[str, str]] = []
        for name, value in fields:
            self.add(name, value)
        for name, value in headers.items():
            self[name.replace("_", "-").title()] = value

    @staticmethod
    def _validate(name, value) -> None:
        if not isinstance(name, str) or not isinstance(value, str):
            raise TypeError(
                f"Header names and values must be str, "
                f"not {type(name).__name__} and {type(value).__name__}."
            )
        if not _name_re.fullmatch(name):
            raise ValueError(f"Invalid header name: {name!r}")
        if "\r" in value or "\n" in value:
            raise ValueError(f"Header values must not contain line breaks: {value!r}")

    def add(self, name: str, value: str) -> None:
        """
        Add a value for name, keeping the existing ones.
        """
        self._validate(name, value)
        self._fields.append((name, value))

    def get_all(self, name: str) -> list[str]:
        """
        Like `Headers.get`, but does not fold multiple values into a single one.
        This is useful for Set-Cookie and Cookie headers, which do not support folding.
        """
        name = name.lower()
        return [v for k, v in self._fields if k.lower() == name]

    def __getitem__(self, name: str) -> str:
        values = self.get_all(name)
        if not values:
            raise KeyError(name)
        return ", ".join(values)

    def __setitem__(self, name: str, value: str) -> None:
        self._validate(name, value)
        lower = name.lower()
        for i, (k, _) in enumerate(self._fields):
            if k.lower() == lower:
                rest = [f for f in self._fields[i + 1:] if f[0].lower() != lower]
                self._fields[i:] = [(k, value), *rest]
                return
        self._fields.append((name, value))

    def __delitem__(self, name: str) -> None:
        if name not in self:
            raise KeyError(name)
        lower = name.lower()
        self._fields = [f for f in self._fields if f[0].lower() != lower]

    def __contains__(self, name) -> bool:
        return isinstance(name, str) and bool(self.get_all(name))

    def __iter__(self) -> Iterator[str]:
        seen = set()
        for name, _ in self._fields:
            if name.lower() not in seen:
                seen.add(name.lower())
                yield name

    def __len__(self) -> int:
        return len({name.lower() for name, _ in self._fields})

    def __repr__(self):
        return f"Headers({self._fields!r})"
