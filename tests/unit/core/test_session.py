"""
Unit tests for client sessions and their persistence.
"""
import pytest

from core.exceptions import IOFailure
from core.models import User
from core.session import SessionContext, SessionRegistry


@pytest.fixture
def user():
    return User(id="u1", email="jane@example.com", password="secret1", name="Jane")


@pytest.fixture
def session(store, local_store):
    return SessionContext(store, local_store)


class TestSessionContext:

    def test_starts_logged_out(self, session):
        assert session.current_user is None
        assert session.is_authenticated is False

    def test_login_persists_state(self, session, local_store, user):
        session.login(user)

        assert session.is_authenticated
        assert local_store.get_json("auth") == {
            "user": user.to_document(),
            "isAuthenticated": True,
        }

    def test_logout_clears_state(self, session, local_store, user):
        session.login(user)
        session.logout()

        assert session.current_user is None
        assert local_store.get_json("auth") == {"user": None, "isAuthenticated": False}

    def test_rehydrate_restores_previous_session(self, store, local_store, session, user):
        session.login(user)

        restarted = SessionContext(store, local_store)
        state = restarted.rehydrate()

        assert state.is_authenticated
        assert restarted.current_user == user

    def test_rehydrate_without_stored_state(self, session):
        assert session.rehydrate().is_authenticated is False

    def test_rehydrate_corrupt_state_raises(self, session, local_store):
        local_store.set_json("auth", {"user": {"id": 5}, "isAuthenticated": "maybe"})
        with pytest.raises(IOFailure):
            session.rehydrate()

    def test_register_saves_user_and_logs_in(self, session, store, user):
        session.register(user)

        assert store.get_users() == [user]
        assert session.current_user == user

    def test_update_current_user_ignores_other_users(self, session, user):
        session.login(user)
        other = User(id="u2", email="bob@example.com", name="Bob")

        session.update_current_user(other)

        assert session.current_user == user


@pytest.fixture
def registry(store, local_store):
    return SessionRegistry(store, local_store)


class TestSessionRegistry:

    def test_sessions_are_independent(self, registry, user):
        admin = User(id="admin-001", email="admin@atspro.com", password="admin123", name="Admin", role="admin")
        first = registry.create()
        first.login(admin)
        second = registry.create()
        second.login(user)

        assert first.token != second.token
        assert registry.get(first.token).current_user == admin
        assert registry.get(second.token).current_user == user

    def test_unknown_or_missing_token(self, registry, user):
        registry.create().login(user)

        assert registry.get(None) is None
        assert registry.get("") is None
        assert registry.get("not-a-token") is None

    def test_created_session_is_not_authenticated_until_login(self, registry):
        session = registry.create()
        assert registry.get(session.token) is None

    def test_close_only_ends_that_session(self, registry, local_store, user):
        first = registry.create()
        first.login(user)
        second = registry.create()
        second.login(user)

        state = registry.close(first.token)

        assert state.is_authenticated is False
        assert registry.get(first.token) is None
        assert registry.get(second.token) is not None
        assert local_store.get_raw(f"auth_{first.token}") is None

    def test_sessions_persist_under_token_keys(self, registry, local_store, user):
        session = registry.create()
        session.login(user)

        assert local_store.keys_with_prefix("auth_") == [f"auth_{session.token}"]
        assert local_store.get_json(f"auth_{session.token}")["isAuthenticated"] is True

    def test_rehydrate_restores_every_open_session(self, store, local_store, registry, user):
        admin = User(id="admin-001", email="admin@atspro.com", password="admin123", name="Admin", role="admin")
        first = registry.create()
        first.login(user)
        second = registry.create()
        second.login(admin)
        closed = registry.create()
        closed.login(user)
        registry.close(closed.token)

        restarted = SessionRegistry(store, local_store)

        assert restarted.rehydrate() == 2
        assert restarted.get(first.token).current_user == user
        assert restarted.get(second.token).current_user == admin
        assert restarted.get(closed.token) is None

    def test_rehydrate_corrupt_session_raises(self, registry, local_store):
        local_store.set_raw("auth_deadbeef", "{oops")
        with pytest.raises(IOFailure):
            registry.rehydrate()

    def test_refresh_user_updates_that_users_sessions(self, registry, user):
        other = User(id="u2", email="bob@example.com", password="secret1", name="Bob")
        mine = registry.create()
        mine.login(user)
        theirs = registry.create()
        theirs.login(other)

        registry.refresh_user(user.model_copy(update={"name": "Jane Doe"}))

        assert registry.get(mine.token).current_user.name == "Jane Doe"
        assert registry.get(theirs.token).current_user == other
