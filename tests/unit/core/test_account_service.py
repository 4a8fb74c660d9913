"""
Unit tests for login, registration and profile edits.
"""
import pytest

from core.account_service import AccountService
from core.bootstrap import ensure_default_admin
from core.config_loader import DefaultAdminConfig
from core.exceptions import ValidationError
from core.session import SessionRegistry


@pytest.fixture
def sessions(store, local_store):
    return SessionRegistry(store, local_store)


@pytest.fixture
def accounts(store, sessions):
    ensure_default_admin(store, DefaultAdminConfig())
    return AccountService(store, sessions)


class TestLogin:

    def test_default_admin_can_log_in(self, accounts, sessions):
        session = accounts.login("ADMIN@atspro.com", "admin123")

        assert session.is_authenticated
        assert session.current_user.role == "admin"
        assert sessions.get(session.token) is session

    def test_each_login_opens_a_new_session(self, accounts):
        first = accounts.login("admin@atspro.com", "admin123")
        second = accounts.login("admin@atspro.com", "admin123")
        assert first.token != second.token

    def test_wrong_password(self, accounts, sessions):
        with pytest.raises(ValidationError, match="CREDENTIAL MISMATCH"):
            accounts.login("admin@atspro.com", "wrong-pass")
        assert sessions.sessions() == []

    def test_malformed_email_is_rejected_before_lookup(self, accounts):
        with pytest.raises(ValidationError, match="INVALID EMAIL"):
            accounts.login("9admin@atspro.com", "admin123")

    def test_logout_ends_only_that_session(self, accounts, sessions):
        first = accounts.login("admin@atspro.com", "admin123")
        second = accounts.login("admin@atspro.com", "admin123")

        assert accounts.logout(first.token).is_authenticated is False

        assert sessions.get(first.token) is None
        assert sessions.get(second.token) is second

    def test_logout_without_token(self, accounts):
        assert accounts.logout(None).is_authenticated is False


class TestRegister:

    def test_register_logs_in_new_user(self, accounts, store):
        session = accounts.register("jane@example.com", "secret1", "  Jane  ")

        assert session.current_user.name == "Jane"
        assert session.current_user.role == "user"
        assert any(u.email == "jane@example.com" for u in store.get_users())

    def test_duplicate_email_case_insensitive(self, accounts):
        accounts.register("jane@example.com", "secret1", "Jane")
        with pytest.raises(ValidationError, match="IDENTITY CONFLICT"):
            accounts.register("JANE@example.com", "secret2", "Other Jane")

    def test_register_admin_role(self, accounts):
        session = accounts.register("rec@example.com", "secret1", "Recruiter", role="admin")
        assert session.current_user.is_admin

    def test_short_password(self, accounts):
        with pytest.raises(ValidationError, match="SECURITY REQUIREMENT"):
            accounts.register("jane@example.com", "123", "Jane")


class TestUpdateProfile:

    def test_updates_store_and_session(self, accounts, store, sessions):
        session = accounts.register("jane@example.com", "secret1", "Jane")

        updated = accounts.update_profile(session.current_user, name="Jane Doe", email="jane.doe@example.com")

        assert sessions.get(session.token).current_user == updated
        stored = next(u for u in store.get_users() if u.id == updated.id)
        assert stored.name == "Jane Doe"
        assert stored.email == "jane.doe@example.com"
        assert stored.password == "secret1"

    def test_keeping_own_email_is_allowed(self, accounts):
        session = accounts.register("jane@example.com", "secret1", "Jane")
        assert accounts.update_profile(session.current_user, email="Jane@example.com").email == "Jane@example.com"

    def test_taking_another_users_email_fails(self, accounts):
        session = accounts.register("jane@example.com", "secret1", "Jane")
        with pytest.raises(ValidationError, match="IDENTITY CONFLICT"):
            accounts.update_profile(session.current_user, email="admin@atspro.com")

    def test_blank_name_is_rejected(self, accounts):
        session = accounts.register("jane@example.com", "secret1", "Jane")
        with pytest.raises(ValidationError, match="PROFILE INCOMPLETE"):
            accounts.update_profile(session.current_user, name="   ")
