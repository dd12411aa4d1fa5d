"""Tests del almacén de credenciales."""

import json
import sys

import pytest

from adapters.credential_store import CredentialStore
from core.errors import NotAuthenticated


@pytest.fixture
def store(credentials_path):
    return CredentialStore(credentials_path)


@pytest.mark.parametrize(
    "user",
    [
        {"name": "Ada", "email": "ada@example.com"},
        {"email": "bob@example.com", "plan": {"tier": "pro", "seats": 3}, "tags": ["a", "b"]},
        None,
        "opaque",
    ],
)
def test_load_round_trips_user(store, credentials_path, user):
    credentials_path.parent.mkdir(parents=True)
    credentials_path.write_text(json.dumps({"apiKey": "k-123", "user": user}), encoding="utf-8")

    credentials = store.load()

    assert credentials.api_key == "k-123"
    assert credentials.user == user


def test_save_then_load(store, credentials_path):
    user = {"name": "Ada", "email": "ada@example.com", "id": 7}
    store.save("k-abc", user)

    payload = json.loads(credentials_path.read_text(encoding="utf-8"))
    assert payload == {"apiKey": "k-abc", "user": user}
    assert store.load().user == user


def test_save_overwrites_previous(store):
    store.save("old", {"email": "old@example.com"})
    store.save("new", {"email": "new@example.com"})

    assert store.load().api_key == "new"


@pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX permissions")
def test_save_restricts_permissions(store, credentials_path):
    store.save("k", {})
    assert credentials_path.stat().st_mode & 0o777 == 0o600


def test_load_missing_file(store):
    with pytest.raises(NotAuthenticated):
        store.load()


@pytest.mark.parametrize(
    "content",
    [
        "",
        "{not json",
        "[]",
        '"just a string"',
        '{"user": {"email": "a@b.c"}}',
        '{"apiKey": 42}',
        '{"apiKey": ""}',
    ],
)
def test_load_malformed_file(store, credentials_path, content):
    credentials_path.parent.mkdir(parents=True)
    credentials_path.write_text(content, encoding="utf-8")

    with pytest.raises(NotAuthenticated):
        store.load()


def test_clear_is_idempotent(store, credentials_path):
    store.save("k", {})

    assert store.clear() is True
    assert not credentials_path.exists()
    assert store.clear() is False
    assert not credentials_path.exists()
