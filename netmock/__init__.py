from netmock.http import Request
from netmock.mock import MockStream
from netmock.project import ProjectBuilder
from netmock.version import VERSION

__all__ = [
    "MockStream",
    "ProjectBuilder",
    "Request",
    "VERSION",
]
