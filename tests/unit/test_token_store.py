"""
Unit tests: token stores and navigator.
"""
import os
import stat

import pytest

from issue_tracker.client.navigation import Navigator, Route
from issue_tracker.client.token_store import FileTokenStore, MemoryTokenStore, TokenStore


@pytest.fixture(params=["memory", "file"])
def store(request, tmp_path):
    if request.param == "memory":
        return MemoryTokenStore()
    return FileTokenStore(tmp_path / "session" / "token")


def test_empty_store_returns_none(store):
    assert store.get() is None


def test_returns_most_recent_token(store):
    store.set("first")
    store.set("second")
    assert store.get() == "second"


def test_clear_forgets_token(store):
    store.set("tok")
    store.clear()
    assert store.get() is None
    store.clear()
    assert store.get() is None


def test_rejects_empty_token(store):
    store.set("kept")
    with pytest.raises(ValueError):
        store.set("")
    assert store.get() == "kept"


def test_file_store_survives_new_instance(tmp_path):
    path = tmp_path / "token"
    FileTokenStore(path).set("persisted")
    assert FileTokenStore(path).get() == "persisted"


@pytest.mark.skipif(os.name != "posix", reason="POSIX permissions")
def test_file_store_is_private(tmp_path):
    path = tmp_path / "token"
    FileTokenStore(path).set("secret")
    assert stat.S_IMODE(path.stat().st_mode) == 0o600


def test_navigator_records_pushes():
    nav = Navigator()
    assert nav.current is Route.SIGNIN
    nav.push("/")
    nav.push(Route.SIGNUP)
    assert nav.history == [Route.HOME, Route.SIGNUP]
    assert nav.current is Route.SIGNUP


def test_navigator_rejects_unknown_route():
    with pytest.raises(ValueError):
        Navigator().push("/admin")


def test_failed_file_write_keeps_previous_token(tmp_path, monkeypatch):
    path = tmp_path / "token"
    store = FileTokenStore(path)
    store.set("old")

    def fail_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", fail_replace)
    with pytest.raises(OSError):
        store.set("new")

    assert store.get() == "old"
    assert [p.name for p in tmp_path.iterdir()] == ["token"]


@pytest.mark.skipif(os.name != "posix", reason="POSIX permissions")
def test_file_store_is_private_under_permissive_umask(tmp_path):
    path = tmp_path / "token"
    old = os.umask(0o000)
    try:
        FileTokenStore(path).set("secret")
    finally:
        os.umask(old)
    assert stat.S_IMODE(path.stat().st_mode) == 0o600


def test_incomplete_store_cannot_be_created():
    class GetOnly(TokenStore):
        def get(self):
            return None

    with pytest.raises(TypeError):
        GetOnly()
