import logging
import socket
import time
from abc import ABCMeta
from abc import abstractmethod

from netmock import exceptions

logger = logging.getLogger(__name__)

# practically speaking we may have IPv6 addresses with flowinfo and scope_id,
# but type checking isn't good enough to properly handle tuple unions.
# this version at least provides useful type checking messages.
Address = tuple[str, int]


class NetworkStream(metaclass=ABCMeta):
    """
    The capabilities of a connection: it can be read from, written to,
    flushed, and asked for its peer's address.

    `netmock.mock.MockStream` and `SocketStream` both implement this,
    so request handling code can be written against either.
    """

    @abstractmethod
    def read(self, size: int = -1) -> bytes:
        """
        Read up to size bytes. Returns b"" once the stream is exhausted.
        """

    @abstractmethod
    def write(self, data: bytes) -> int:
        """
        Write data and return the number of bytes written.
        """

    @abstractmethod
    def flush(self) -> None:
        pass

    @abstractmethod
    def getpeername(self) -> Address:
        """
        The remote's `(ip, port)` tuple.
        """


class SocketStream(NetworkStream):
    """
    A NetworkStream over a connected socket.
    """

    def __init__(self, sock: socket.socket):
        self.sock = sock

    def read(self, size: int = -1) -> bytes:
        if size < 0:
            size = _FileLike.BLOCKSIZE
        try:
            return self.sock.recv(size)
        except OSError as e:
            logger.debug(f"Error reading from {self.sock!r}: {e}")
            raise exceptions.TcpDisconnect(str(e)) from e

    def write(self, data: bytes) -> int:
        try:
            self.sock.sendall(data)
        except OSError as e:
            logger.debug(f"Error writing to {self.sock!r}: {e}")
            raise exceptions.TcpDisconnect(str(e)) from e
        return len(data)

    def flush(self) -> None:
        pass

    def getpeername(self) -> Address:
        return self.sock.getpeername()[:2]


class _FileLike:
    BLOCKSIZE = 1024 * 32

    def __init__(self, o: NetworkStream):
        self.o = o
        self._log: list[bytes] | None = None
        self.first_byte_timestamp: float | None = None

    def __getattr__(self, attr):
        return getattr(self.o, attr)

    def start_log(self):
        """
            Starts or resets the log.

            This will store all bytes read or written.
        """
        self._log = []

    def stop_log(self):
        """
            Stops the log.
        """
        self._log = None

    def is_logging(self):
        return self._log is not None

    def get_log(self) -> bytes:
        """
            Returns the log as bytes.
        """
        if self._log is None:
            raise ValueError("Not logging!")
        return b"".join(self._log)

    def add_log(self, v: bytes):
        if self._log is not None:
            self._log.append(v)


class Writer(_FileLike):

    def flush(self):
        """
            May raise exceptions.TcpDisconnect
        """
        try:
            self.o.flush()
        except OSError as v:
            raise exceptions.TcpDisconnect(str(v)) from v

    def write(self, v: bytes) -> int:
        """
            May raise exceptions.TcpDisconnect
        """
        if not v:
            return 0
        self.first_byte_timestamp = self.first_byte_timestamp or time.time()
        try:
            r = self.o.write(v)
        except OSError as e:
            raise exceptions.TcpDisconnect(str(e)) from e
        self.add_log(v[:r])
        return r


class Reader(_FileLike):
    """
    A buffered reader over a NetworkStream.

    Data pulled from the stream by `peek` or `readline` is kept in a buffer
    and handed out by subsequent reads before the stream is asked again.
    """

    def __init__(self, o: NetworkStream):
        super().__init__(o)
        self._buffer = b""

    def _recv(self, rlen: int) -> bytes:
        try:
            data = self.o.read(rlen)
        except OSError as e:
            raise exceptions.TcpDisconnect(str(e)) from e
        if data:
            self.first_byte_timestamp = self.first_byte_timestamp or time.time()
        return data

    def _fill(self) -> bool:
        data = self._recv(self.BLOCKSIZE)
        self._buffer += data
        return bool(data)

    def _take(self, n: int) -> bytes:
        result, self._buffer = self._buffer[:n], self._buffer[n:]
        return result

    def read(self, length: int = -1) -> bytes:
        """
            If length is negative, we read until the stream is exhausted.
        """
        if length < 0:
            length = -1
        if length == -1:
            result = [self._take(len(self._buffer))]
        else:
            result = [self._take(length)]
            length -= len(result[0])
        while length == -1 or length > 0:
            if length == -1 or length > self.BLOCKSIZE:
                rlen = self.BLOCKSIZE
            else:
                rlen = length
            data = self._recv(rlen)
            if not data:
                break
            result.append(data)
            if length != -1:
                length -= len(data)
        ret = b"".join(result)
        self.add_log(ret)
        return ret

    def readline(self, size: int | None = None) -> bytes:
        """
            Read up to and including the next b"\\n", or at most size bytes.
        """
        while b"\n" not in self._buffer:
            if size is not None and len(self._buffer) >= size:
                break
            if not self._fill():
                break
        end = self._buffer.find(b"\n") + 1 or len(self._buffer)
        if size is not None:
            end = min(end, size)
        line = self._take(end)
        self.add_log(line)
        return line

    def peek(self, length: int) -> bytes:
        """
            Return up to length bytes without consuming them.
        """
        while len(self._buffer) < length:
            if not self._fill():
                break
        return self._buffer[:length]

    def safe_read(self, length: int) -> bytes:
        """
            Like .read, but is guaranteed to either return length bytes, or
            raise an exception.
        """
        result = self.read(length)
        if length >= 0 and len(result) != length:
            if not result:
                raise exceptions.TcpDisconnect()
            else:
                raise exceptions.TcpReadIncomplete(
                    "Expected {} bytes, got {}".format(length, len(result))
                )
        return result
