"""
Exceptions raised by netmock.

Caller mistakes (wrong argument types, malformed URLs, unknown methods) are
reported with builtin exceptions. The classes below cover the cases where a
test double behaves like the transport or message it stands in for, plus
misconfigured fixtures.
"""


class NetmockException(Exception):
    """
    Base class for all exceptions thrown by netmock.
    """

    def __init__(self, message=None):
        super().__init__(message)


class TcpException(NetmockException):
    pass


class TcpDisconnect(TcpException):
    pass


class TcpReadIncomplete(TcpException):
    pass


class HttpException(NetmockException):
    pass


class FixtureError(NetmockException):
    """
    A fixture default is unusable, e.g. the base URL used for the Host header
    does not parse. This is a bug in the fixture configuration and is never
    raised for legitimate test input.
    """
