import pytest

from netmock.mock import MockStream
from netmock.net import tcp


@pytest.fixture
def stream():
    return MockStream(b"Hello Google!")


@pytest.fixture
def reader(stream):
    return tcp.Reader(stream)


@pytest.fixture
def projects_tmpdir(tmp_path, monkeypatch):
    monkeypatch.setenv("NETMOCK_TMPDIR", str(tmp_path))
    return tmp_path
