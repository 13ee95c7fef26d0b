from __future__ import annotations

import urllib.parse
from dataclasses import dataclass

from netmock.net.check import is_valid_host

_default_ports = {
    "http": 80,
    "https": 443,
}


def parse(url: str | bytes) -> tuple[str, str, int, str]:
    """
    URL-parsing function that checks that
        - port is an integer 0-65535, or the scheme has a default port
        - host is a valid hostname or IP address
        - path is valid ASCII

    An empty path is normalized to "/".

    Returns:
        A (scheme, host, port, path) tuple

    Raises:
        ValueError, if the URL is not properly formatted.
    """
    if isinstance(url, bytes):
        url = url.decode("ascii")

    parsed = urllib.parse.urlsplit(url)
    if not parsed.hostname:
        raise ValueError(f"No hostname given: {url!r}")
    if not is_valid_host(parsed.hostname):
        raise ValueError(f"Invalid host: {parsed.hostname!r}")

    # .port raises a ValueError for non-numeric or out-of-range ports.
    port = parsed.port
    if port is None:
        port = default_port(parsed.scheme)
    if port is None:
        raise ValueError(f"No port given and no default port for {parsed.scheme!r}")

    path = urllib.parse.urlunsplit(("", "", parsed.path, parsed.query, parsed.fragment))
    if not path.isascii():
        raise ValueError(f"Non-ASCII path: {path!r}")
    if not path.startswith("/"):
        path = "/" + path

    return parsed.scheme, parsed.hostname, port, path


def hostport(scheme: str, host: str, port: int) -> str:
    """
    Returns the host component, with a port specification if needed.
    IPv6 literals are wrapped in brackets.
    """
    if ":" in host and not host.startswith("["):
        host = f"[{host}]"
    if default_port(scheme) == port:
        return host
    return f"{host}:{port}"


def default_port(scheme: str) -> int | None:
    return _default_ports.get(scheme)


@dataclass(frozen=True)
class Url:
    """
    A parsed absolute URL.

    `str(url)` renders the URL back, omitting the port if it is the scheme's default:

    >>> str(Url.parse("http://localhost:3000"))
    'http://localhost:3000/'
    """

    scheme: str
    host: str
    port: int
    path: str = "/"

    @classmethod
    def parse(cls, url: str | bytes) -> Url:
        """
        Raises:
            ValueError, if the URL is not properly formatted.
        """
        return cls(*parse(url))

    @property
    def authority(self) -> str:
        """The host, with a port specification if needed."""
        return hostport(self.scheme, self.host, self.port)

    def __str__(self) -> str:
        return f"{self.scheme}://{self.authority}{self.path}"
