import enum


class Method(str, enum.Enum):
    """
    An HTTP request method.

    Lookup by value is case-insensitive and accepts bytes, so that
    ``Method("get")`` and ``Method(b"GET")`` both give ``Method.GET``.
    Anything that is not a known method raises a ValueError.
    """

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    CONNECT = "CONNECT"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    PATCH = "PATCH"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, bytes):
            try:
                value = value.decode("ascii")
            except UnicodeDecodeError:
                return None
        if isinstance(value, str):
            return cls.__members__.get(value.upper())
        return None

    def __str__(self) -> str:
        return self.value
