from collections.abc import Iterator

from netmock.exceptions import HttpException


class Body:
    """
    The body of a request, read lazily from the underlying stream.

    A body can be read exactly once. After it has been drained, all further
    reads return b"".

    Args:
        rfile: The input stream, usually a `netmock.net.tcp.Reader`.
            Its `read(n)` must only return fewer than n bytes at the end of the stream.
        expected_size: The expected body size:
            - -1, if all data should be read until the end of the stream.
            - a non-negative integer, if the size is known in advance.
        max_chunk_size: Maximum size of the chunks yielded when iterating over the body.
    """

    def __init__(
        self,
        rfile,
        expected_size: int = -1,
        max_chunk_size: int = 4096,
    ):
        if expected_size < -1:
            raise ValueError(f"Invalid expected body size: {expected_size}")
        self.rfile = rfile
        self.expected_size = expected_size
        self.max_chunk_size = max_chunk_size
        self.bytes_read = 0
        self._eof = expected_size == 0

    @property
    def eof_delimited(self) -> bool:
        """True if the body runs until the end of the stream."""
        return self.expected_size == -1

    @property
    def consumed(self) -> bool:
        """True once the body has been read to its end."""
        return self._eof

    def read(self, size: int = -1) -> bytes:
        """
        Read up to size bytes of the body, or everything that is left if size is negative.

        Raises:
            HttpException, if the stream ends before a sized body is complete.
        """
        if self._eof or size == 0:
            return b""

        if self.eof_delimited:
            data = self.rfile.read(size if size > 0 else -1)
            if size < 0 or len(data) < size:
                self._eof = True
        else:
            bytes_left = self.expected_size - self.bytes_read
            want = bytes_left if size < 0 else min(size, bytes_left)
            data = self.rfile.read(want)
            if len(data) < want:
                self._eof = True
                raise HttpException(
                    f"Unexpected EOF: expected {self.expected_size} bytes, "
                    f"got {self.bytes_read + len(data)}"
                )
            if self.bytes_read + len(data) == self.expected_size:
                self._eof = True

        self.bytes_read += len(data)
        return data

    def read_to_end(self) -> bytes:
        return self.read(-1)

    def __iter__(self) -> Iterator[bytes]:
        while True:
            chunk = self.read(self.max_chunk_size)
            if chunk:
                yield chunk
            if self._eof:
                return

    def __repr__(self):
        if self.eof_delimited:
            framing = "until EOF"
        else:
            framing = f"{self.expected_size} bytes"
        state = "consumed" if self._eof else f"{self.bytes_read} bytes read"
        return f"<Body ({framing}, {state})>"
