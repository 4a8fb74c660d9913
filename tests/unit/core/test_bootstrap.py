"""
Unit tests for the default administrator bootstrap.
"""
from core.bootstrap import ensure_default_admin
from core.config_loader import DefaultAdminConfig
from core.models import User


class TestEnsureDefaultAdmin:

    def test_first_run_creates_admin(self, store):
        users = ensure_default_admin(store, DefaultAdminConfig())

        assert [u.email for u in users] == ["admin@atspro.com"]
        stored = store.get_users()
        assert len(stored) == 1
        assert stored[0].id == "admin-001"
        assert stored[0].role == "admin"

    def test_first_run_stats(self, store):
        ensure_default_admin(store, DefaultAdminConfig())
        stats = store.get_stats()
        assert (stats.user_count, stats.report_count) == (1, 0)

    def test_idempotent(self, store):
        ensure_default_admin(store, DefaultAdminConfig())
        ensure_default_admin(store, DefaultAdminConfig())

        admins = [u for u in store.get_users() if u.email == "admin@atspro.com"]
        assert len(admins) == 1

    def test_edited_admin_is_not_resynced(self, store):
        ensure_default_admin(store, DefaultAdminConfig())
        store.save_user(User(id="admin-001", email="admin@atspro.com", password="changed1",
                             name="Renamed", role="admin"))

        ensure_default_admin(store, DefaultAdminConfig())

        admin = store.get_users()[0]
        assert admin.name == "Renamed"
        assert admin.password == "changed1"

    def test_missing_admin_is_reinserted(self, store):
        store.save_user(User(id="u1", email="jane@example.com", password="secret1", name="Jane"))

        users = ensure_default_admin(store, DefaultAdminConfig())

        assert {u.email for u in users} == {"jane@example.com", "admin@atspro.com"}
        assert len(store.get_users()) == 2
