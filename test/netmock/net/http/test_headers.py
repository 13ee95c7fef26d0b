import pytest

from netmock.net.http.headers import Headers


class TestHeaders:
    def _2host(self):
        return Headers([("Host", "example.com"), ("host", "example.org")])

    def test_init(self):
        headers = Headers()
        assert len(headers) == 0

        headers = Headers([("Host", "example.com")])
        assert len(headers) == 1
        assert headers["Host"] == "example.com"

        headers = Headers(Host="example.com")
        assert len(headers) == 1
        assert headers["Host"] == "example.com"

        headers = Headers([("Host", "invalid")], Host="example.com")
        assert len(headers) == 1
        assert headers["Host"] == "example.com"

    def test_init_kwargs_names(self):
        headers = Headers(host="127.0.0.1:3000", user_agent="netmock")
        assert list(headers.items()) == [
            ("Host", "127.0.0.1:3000"),
            ("User-Agent", "netmock"),
        ]

    def test_case_insensitive(self):
        headers = Headers(user_agent="netmock")
        assert headers["user-agent"] == "netmock"
        assert headers["USER-AGENT"] == "netmock"
        assert "uSeR-aGeNt" in headers
        assert "Host" not in headers
        assert b"User-Agent" not in headers
        assert headers.get("host") is None

    def test_validation(self):
        headers = Headers()
        with pytest.raises(TypeError):
            headers["foo"] = 42
        with pytest.raises(TypeError):
            headers[b"foo"] = "bar"
        with pytest.raises(TypeError):
            Headers([("Host", b"example.com")])
        with pytest.raises(ValueError):
            headers["Bad Name"] = "x"
        with pytest.raises(ValueError):
            headers["Foo:"] = "x"
        with pytest.raises(ValueError):
            headers.add("", "x")
        with pytest.raises(ValueError):
            headers["X-Injected"] = "a\r\nHost: evil"
        assert len(headers) == 0

    def test_fold(self):
        headers = self._2host()
        assert headers["Host"] == "example.com, example.org"
        assert headers.get_all("host") == ["example.com", "example.org"]
        assert headers.get_all("accept") == []
        assert len(headers) == 1

    def test_add(self):
        headers = Headers(accept="text/html")
        headers.add("ACCEPT", "application/xml")
        assert headers["Accept"] == "text/html, application/xml"
        assert list(headers) == ["Accept"]

    def test_set_replaces_all(self):
        headers = Headers([("Host", "a"), ("Accept", "*/*"), ("host", "b")])
        headers["HOST"] = "example.net"
        assert headers.get_all("Host") == ["example.net"]
        assert list(headers.items()) == [("Host", "example.net"), ("Accept", "*/*")]

    def test_set_new(self):
        headers = Headers(Host="example.com")
        headers["Content-Type"] = "text/plain"
        assert list(headers) == ["Host", "Content-Type"]

    def test_del(self):
        headers = self._2host()
        del headers["host"]
        assert len(headers) == 0
        with pytest.raises(KeyError):
            del headers["host"]
        with pytest.raises(KeyError):
            headers["host"]

    def test_iter(self):
        headers = Headers([("Set-Cookie", "foo"), ("set-cookie", "bar"), ("Host", "x")])
        assert list(headers) == ["Set-Cookie", "Host"]
        assert list(headers.items()) == [("Set-Cookie", "foo, bar"), ("Host", "x")]

    def test_mapping_methods(self):
        headers = Headers(Host="example.com")
        headers.update({"Accept": "*/*"})
        assert headers.pop("accept") == "*/*"
        assert headers.setdefault("User-Agent", "netmock") == "netmock"
        assert headers == {"Host": "example.com", "User-Agent": "netmock"}

    def test_non_ascii(self):
        headers = Headers()
        headers["X-Name"] = "Ünïcödé"
        assert headers["x-name"] == "Ünïcödé"

    def test_repr(self):
        assert repr(Headers(Host="example.com")) == "Headers([('Host', 'example.com')])"
