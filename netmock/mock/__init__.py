"""
Test doubles for the network layer.

`MockStream` stands in for a live connection: its input is a fixed byte
string, everything written to it is discarded, and it reports a fixed peer
address. Wrap it in a `netmock.net.tcp.Reader` and hand it to
`netmock.mock.request.new` to get a request without opening a socket:

>>> stream = MockStream(b"Hello Google!")
>>> from netmock.mock import request
>>> req = request.new("GET", "http://localhost:3000", tcp.Reader(stream))
>>> req.body.read_to_end()
b'Hello Google!'
"""

from netmock.net import tcp
from netmock.utils import human


class MockStream(tcp.NetworkStream):
    """A network stream over an in-memory buffer."""

    PEERNAME: tcp.Address = ("::1", 2468)
    """The synthetic peer every MockStream reports."""

    def __init__(self, data: bytes | bytearray | memoryview = b""):
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"MockStream data must be bytes, not {type(data).__name__}."
            )
        self._data = bytes(data)
        self._position = 0

    def clone(self) -> "MockStream":
        """
        Returns an independent stream over the same data.
        The clone starts reading from the beginning, regardless of how much of
        this stream has been consumed.
        """
        return type(self)(self._data)

    __copy__ = clone

    @property
    def position(self) -> int:
        return self._position

    @property
    def remaining(self) -> int:
        """The number of bytes left to read."""
        return len(self._data) - self._position

    @property
    def closed(self) -> bool:
        return False

    def read(self, size: int | None = -1) -> bytes:
        if size is None or size < 0:
            end = len(self._data)
        else:
            end = min(self._position + size, len(self._data))
        data = self._data[self._position:end]
        self._position = end
        return data

    def readinto(self, b) -> int:
        data = self.read(len(b))
        b[: len(data)] = data
        return len(data)

    def write(self, data: bytes) -> int:
        # Writes go to a peer nobody can inspect.
        return len(data)

    def flush(self) -> None:
        pass

    def getpeername(self) -> tcp.Address:
        return self.PEERNAME

    def __repr__(self):
        preview = repr(self._data[self._position:self._position + 32])
        if self.remaining > 32:
            preview += "..."
        return "<MockStream {peer} {preview} ({remaining}/{total} bytes left)>".format(
            peer=human.format_address(self.PEERNAME),
            preview=preview,
            remaining=self.remaining,
            total=len(self._data),
        )
