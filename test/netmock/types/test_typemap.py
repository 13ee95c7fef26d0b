from dataclasses import dataclass

import pytest

from netmock.types.typemap import TypeMap


@dataclass
class Session:
    user: str


class RequestId:
    pass


class TestTypeMap:
    def test_insert(self):
        tm = TypeMap()
        assert tm.insert(Session("alice")) is None
        assert tm[Session] == Session("alice")
        assert tm.insert(Session("bob")) == Session("alice")
        assert tm[Session].user == "bob"
        assert len(tm) == 1

    def test_init(self):
        tm = TypeMap(Session("alice"), 42)
        assert tm[int] == 42
        assert list(tm) == [Session, int]

    def test_marker_keys(self):
        tm = TypeMap()
        tm[RequestId] = "5c6b"
        assert tm[RequestId] == "5c6b"
        assert RequestId in tm
        del tm[RequestId]
        assert RequestId not in tm

    def test_missing(self):
        tm = TypeMap()
        with pytest.raises(KeyError):
            tm[Session]
        assert tm.get(Session) is None
        assert tm.get(Session, "default") == "default"

    def test_non_type_keys(self):
        tm = TypeMap()
        with pytest.raises(TypeError):
            tm["session"] = 1
        with pytest.raises(TypeError):
            tm["session"]
        with pytest.raises(TypeError):
            tm.get("session")
        assert "session" not in tm

    def test_repr(self):
        assert repr(TypeMap()) == "TypeMap[]"
        assert repr(TypeMap(Session("alice"), 1)) == "TypeMap[Session, int]"
