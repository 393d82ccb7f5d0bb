"""Credential store and session manager against a real SQLite database."""
from datetime import timedelta

import pytest

from questkeeper.core.errors import DuplicateUsername, NotFound, TokenExpired
from questkeeper.core.security import Identity
from questkeeper.services.credentials import CredentialStore
from questkeeper.services.sessions import SessionManager

pytestmark = pytest.mark.anyio


async def _user(store: CredentialStore, username: str = "astra"):
    return await store.create_user(username, "not-a-real-hash", "Zel")


class TestCredentialStore:
    async def test_create_and_find(self, db):
        store = CredentialStore(db)
        user = await _user(store)

        assert user.id is not None
        assert user.token is None
        found = await store.find_by_username("astra")
        assert found.id == user.id
        assert await store.find_by_username("nobody") is None

    async def test_duplicate_username(self, db):
        store = CredentialStore(db)
        await _user(store)
        with pytest.raises(DuplicateUsername):
            await _user(store)
        # session is still usable after the rollback
        assert await store.find_by_username("astra") is not None

    async def test_set_and_clear_token(self, db):
        store = CredentialStore(db)
        user = await _user(store)

        await store.set_token(user.id, "abc")
        assert await store.get_token(user.id) == "abc"
        await store.set_token(user.id, None)
        assert await store.get_token(user.id) is None

    async def test_update_display_name(self, db):
        store = CredentialStore(db)
        user = await _user(store)

        updated = await store.update_display_name(user.id, "Zelda")
        assert updated.adventurer_name == "Zelda"
        assert (await store.find_by_username("astra")).adventurer_name == "Zelda"

    async def test_update_display_name_unknown_user(self, db):
        with pytest.raises(NotFound):
            await CredentialStore(db).update_display_name(999, "Nobody")


class TestSessionManager:
    async def test_issue_stores_token(self, db):
        store = CredentialStore(db)
        user = await _user(store)
        sessions = SessionManager(store)

        token = await sessions.issue(user.id, user.username)

        assert await store.get_token(user.id) == token
        identity = sessions.verify(token)
        assert identity == Identity(user.id, "astra")
        assert await sessions.is_current(identity, token)

    async def test_reissue_supersedes_unexpired_token(self, db):
        store = CredentialStore(db)
        user = await _user(store)
        sessions = SessionManager(store)

        first = await sessions.issue(user.id, user.username)
        second = await sessions.issue(user.id, user.username)

        assert first != second
        # still cryptographically valid, but no longer the stored token
        identity = sessions.verify(first)
        assert not await sessions.is_current(identity, first)
        assert await sessions.is_current(identity, second)

    async def test_revoke_is_idempotent(self, db):
        store = CredentialStore(db)
        user = await _user(store)
        sessions = SessionManager(store)
        token = await sessions.issue(user.id, user.username)

        await sessions.revoke(user.id)
        await sessions.revoke(user.id)

        assert await store.get_token(user.id) is None
        assert not await sessions.is_current(sessions.verify(token), token)

    async def test_tokens_are_scoped_to_their_user(self, db):
        store = CredentialStore(db)
        astra = await _user(store, "astra")
        bram = await _user(store, "bram")
        sessions = SessionManager(store)

        astra_token = await sessions.issue(astra.id, astra.username)
        await sessions.issue(bram.id, bram.username)

        # presenting astra's token under bram's identity never matches
        assert not await sessions.is_current(Identity(bram.id, "bram"), astra_token)

    async def test_expired_token(self, db):
        store = CredentialStore(db)
        user = await _user(store)
        sessions = SessionManager(store, expires_delta=timedelta(seconds=-1))

        token = await sessions.issue(user.id, user.username)
        with pytest.raises(TokenExpired):
            sessions.verify(token)
