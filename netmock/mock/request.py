"""
Constructors for mock requests.

The defaults below are part of the fixture's contract: tests may assert on
them, and a request built without overrides always carries them.
"""
import logging
from collections.abc import Mapping

from netmock import exceptions
from netmock.http import Request
from netmock.mock import MockStream
from netmock.net import check
from netmock.net import tcp
from netmock.net.http import url as nurl
from netmock.net.http.body import Body
from netmock.net.http.headers import Headers
from netmock.net.http.method import Method
from netmock.net.http.url import Url
from netmock.types.typemap import TypeMap

logger = logging.getLogger(__name__)

LOCAL_ADDRESS: tcp.Address = ("127.0.0.1", 3000)
"""Used as both local and remote address of every mock request."""

BASE_URL = "http://127.0.0.1:3000"
"""The Host header is derived from this URL's host and port."""

USER_AGENT = "netmock"


def _loopback_address(name: str, addr) -> tcp.Address:
    try:
        host, port = addr
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a (host, port) tuple, not {addr!r}") from None
    if not isinstance(port, int) or not check.is_valid_port(port):
        raise ValueError(f"Invalid port in {name}: {addr!r}")
    if not isinstance(host, str) or not check.is_loopback(host):
        raise ValueError(f"{name} must be a loopback address, not {addr!r}")
    return host, port


def _host_header(base_url: str, local_addr: tcp.Address) -> str:
    try:
        u = Url.parse(base_url)
    except ValueError as e:
        raise exceptions.FixtureError(f"Invalid base URL {base_url!r}: {e}") from e
    host, port = local_addr
    if (u.host, u.port) != (host.lower(), port):
        raise exceptions.FixtureError(
            f"Base URL {base_url!r} does not match local address {local_addr!r}"
        )
    return u.authority


def new(
    method: Method | str,
    url: Url | str,
    reader,
    *,
    local_addr: tcp.Address = LOCAL_ADDRESS,
    remote_addr: tcp.Address = LOCAL_ADDRESS,
    base_url: str | None = None,
    user_agent: str = USER_AGENT,
    body_size: int = -1,
) -> Request:
    """
    Create a new mock request with the given method, url, and body reader.

    The body runs until the reader's stream is exhausted, unless body_size is given,
    in which case exactly that many bytes are read. A reader whose stream is already
    exhausted gives an empty body.

    Both addresses must be loopback addresses. The Host header names the local
    address: it is taken from base_url, which defaults to `BASE_URL` for the
    default local address and to ``http://<local_addr>`` otherwise.

    Only Host and User-Agent headers are set. Tests that need more can modify
    `request.headers` afterwards.

    Raises:
        ValueError, if method, url or one of the addresses are invalid.
        netmock.exceptions.FixtureError, if base_url is unusable or does not
        match local_addr.
    """
    local_addr = _loopback_address("local_addr", local_addr)
    remote_addr = _loopback_address("remote_addr", remote_addr)
    if base_url is None:
        if local_addr == LOCAL_ADDRESS:
            base_url = BASE_URL
        else:
            base_url = "http://" + nurl.hostport("http", *local_addr)

    headers = Headers(
        host=_host_header(base_url, local_addr),
        user_agent=user_agent,
    )
    req = Request(
        method=method,
        url=url,
        headers=headers,
        body=Body(reader, expected_size=body_size),
        local_addr=local_addr,
        remote_addr=remote_addr,
        extensions=TypeMap(),
    )
    logger.debug(f"Built mock request: {req!r}")
    return req


def build(
    method: Method | str,
    url: Url | str,
    content: bytes = b"",
    *,
    headers: Mapping[str, str] | None = None,
    **kwargs,
) -> Request:
    """
    Like `new`, but creates the stream and reader for the given content.

    Headers passed here are set after the defaults, so they can replace Host or User-Agent.
    Further keyword arguments are passed on to `new`.
    """
    reader = tcp.Reader(MockStream(content))
    req = new(method, url, reader, **kwargs)
    if headers:
        for name, value in headers.items():
            req.headers[name] = value
    return req
