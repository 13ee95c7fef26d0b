import pytest

from netmock.net import check


@pytest.mark.parametrize(
    "host,valid",
    [
        ("example.com", True),
        ("foo_bar.example.com.", True),
        ("127.0.0.1", True),
        ("::1", True),
        ("2001:db8::1", True),
        ("例え.テスト", True),
        ("", False),
        (".", False),
        ("foo\0bar", False),
        ("-foo.com", False),
        ("a" * 64, False),
        (".".join(["a" * 60] * 5), False),
        ("foo..bar", False),
    ],
)
def test_is_valid_host(host, valid):
    assert check.is_valid_host(host) is valid


def test_is_valid_port():
    assert check.is_valid_port(0)
    assert check.is_valid_port(65535)
    assert not check.is_valid_port(65536)
    assert not check.is_valid_port(-1)


@pytest.mark.parametrize(
    "host,loopback",
    [
        ("localhost", True),
        ("LOCALHOST", True),
        ("127.0.0.1", True),
        ("127.1.2.3", True),
        ("::1", True),
        ("10.0.0.1", False),
        ("example.com", False),
    ],
)
def test_is_loopback(host, loopback):
    assert check.is_loopback(host) is loopback
