from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field

from netmock.net.http.body import Body
from netmock.net.http.headers import Headers
from netmock.net.http.method import Method
from netmock.net.http.url import Url
from netmock.net.tcp import Address
from netmock.types.typemap import TypeMap

__all__ = [
    "Request",
    "Headers",
    "Method",
    "Url",
    "Body",
    "TypeMap",
]


@dataclass
class Request:
    """
    An HTTP request as a server framework sees it after accepting a connection
    and parsing the request head: the body is still unread.
    """

    method: Method
    """HTTP request method, e.g. `Method.GET`."""
    url: Url
    """The target URL."""
    headers: Headers
    """The HTTP headers."""
    body: Body
    """A once-only reader for the request body."""
    local_addr: Address
    """Our local `(ip, port)` tuple for this connection."""
    remote_addr: Address
    """The client's `(ip, port)` tuple for this connection."""
    extensions: TypeMap = field(default_factory=TypeMap)
    """Per-request state of the framework and its middleware, keyed by type."""

    def __post_init__(self):
        if not isinstance(self.method, Method):
            self.method = Method(self.method)
        if not isinstance(self.url, Url):
            self.url = Url.parse(self.url)
        if not isinstance(self.headers, Headers):
            if isinstance(self.headers, Mapping):
                self.headers = Headers(self.headers.items())
            else:
                self.headers = Headers(self.headers)

    def __repr__(self):
        return f"Request({self.method} {self.url.authority}{self.url.path})"

    @property
    def scheme(self) -> str:
        return self.url.scheme

    @property
    def host(self) -> str:
        return self.url.host

    @property
    def port(self) -> int:
        return self.url.port

    @property
    def path(self) -> str:
        """
        HTTP request path, e.g. "/index.html".
        Always starts with a slash.
        """
        return self.url.path

    @property
    def host_header(self) -> str | None:
        """
        The request's host, as given in the Host header.
        """
        return self.headers.get("Host")
