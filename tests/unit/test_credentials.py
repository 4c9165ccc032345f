"""Tests for session tokens, the user store and credential resolution."""

import json
from concurrent.futures import ThreadPoolExecutor

import jwt
import pytest

from repodoc.core.exceptions import AuthError, GitHubNotConnectedError
from repodoc.core.security import create_session_token, decode_session_token
from repodoc.models.schemas import UserRecord
from repodoc.services.credentials import CredentialResolver
from repodoc.services.user_store import UserStore, UserStoreConfig

SECRET = "test-secret"


# ── session tokens ───────────────────────────────────────────────────────────


class TestSessionTokens:
    def test_round_trip(self):
        token = create_session_token("u1", "a@b.c", SECRET)
        claims = decode_session_token(token, SECRET)
        assert claims.user_id == "u1"
        assert claims.email == "a@b.c"

    def test_wrong_secret(self):
        token = create_session_token("u1", "", SECRET)
        assert decode_session_token(token, "other-secret") is None

    def test_expired(self):
        token = create_session_token("u1", "", SECRET, expires_hours=-1)
        assert decode_session_token(token, SECRET) is None

    def test_garbage(self):
        assert decode_session_token("not-a-jwt", SECRET) is None

    def test_missing_subject(self):
        token = jwt.encode({"exp": 9999999999}, SECRET, algorithm="HS256")
        assert decode_session_token(token, SECRET) is None


# ── UserStore ────────────────────────────────────────────────────────────────


class TestUserStore:
    def test_save_and_get(self):
        store = UserStore()
        store.save(UserRecord(id="u1", email="a@b.c"))
        assert store.get("u1").email == "a@b.c"
        assert store.get("missing") is None

    def test_upsert_creates(self):
        store = UserStore()
        user = store.upsert_github_user("42", "octo", "tok-1", email="o@x.io")
        assert user.github_id == "42"
        assert store.find_by_github_id("42").id == user.id

    def test_upsert_refreshes_token_and_keeps_id(self):
        store = UserStore()
        first = store.upsert_github_user("42", "octo", "tok-1", email="o@x.io")
        second = store.upsert_github_user("42", "octo-renamed", "tok-2", email="new@x.io")
        assert second.id == first.id
        assert second.github_access_token == "tok-2"
        assert second.github_username == "octo-renamed"
        assert second.email == "o@x.io"

    def test_json_backend_persists(self, tmp_path):
        path = tmp_path / "users.json"
        config = UserStoreConfig(backend="json", path=str(path))
        user = UserStore(config).upsert_github_user("7", "dev", "tok")

        assert json.loads(path.read_text())[user.id]["github_access_token"] == "tok"
        reloaded = UserStore(config)
        assert reloaded.get(user.id).github_username == "dev"

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unknown user store backend"):
            UserStore(UserStoreConfig(backend="mongo"))

    def test_concurrent_upserts_share_one_record(self):
        store = UserStore()
        with ThreadPoolExecutor(max_workers=8) as pool:
            users = list(pool.map(
                lambda i: store.upsert_github_user("42", "octo", f"tok-{i}"),
                range(32),
            ))
        assert len({u.id for u in users}) == 1
        assert store.find_by_github_id("42").github_access_token.startswith("tok-")


# ── CredentialResolver ───────────────────────────────────────────────────────


@pytest.fixture
def store():
    store = UserStore()
    store.save(UserRecord(id="linked", github_id="1", github_access_token="gh-token"))
    store.save(UserRecord(id="unlinked"))
    return store


class TestCredentialResolver:
    def test_resolves_linked_user(self, store):
        resolver = CredentialResolver(store, SECRET)
        user = resolver.resolve(create_session_token("linked", "", SECRET))
        assert user.github_access_token == "gh-token"

    def test_missing_token(self, store):
        with pytest.raises(AuthError) as exc_info:
            CredentialResolver(store, SECRET).resolve(None)
        assert exc_info.value.message == "Unauthorized"
        assert exc_info.value.status_code == 401

    def test_invalid_token(self, store):
        with pytest.raises(AuthError) as exc_info:
            CredentialResolver(store, SECRET).resolve("forged")
        assert exc_info.value.message == "Invalid token"

    def test_account_not_linked(self, store):
        token = create_session_token("unlinked", "", SECRET)
        with pytest.raises(GitHubNotConnectedError) as exc_info:
            CredentialResolver(store, SECRET).resolve(token)
        assert exc_info.value.status_code == 400

    def test_unknown_user(self, store):
        token = create_session_token("deleted", "", SECRET)
        with pytest.raises(GitHubNotConnectedError):
            CredentialResolver(store, SECRET).resolve(token)
