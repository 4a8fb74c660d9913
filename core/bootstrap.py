"""Default administrator bootstrap."""
import logging
from typing import List

from core.config_loader import DefaultAdminConfig
from core.models import User
from database.repository import AtsRepository

logger = logging.getLogger(__name__)


def default_admin_user(config: DefaultAdminConfig) -> User:
    return User(
        id=config.id,
        email=config.email,
        password=config.password,
        name=config.name,
        role="admin",
    )


def ensure_default_admin(store: AtsRepository, config: DefaultAdminConfig) -> List[User]:
    """Guarantee a user with the default admin email exists.

    Only presence is checked (exact email match). An admin record that was
    edited after creation is left as it is.

    Returns:
        The user list after the check.
    """
    users = store.get_users()
    admin = default_admin_user(config)

    if not users:
        logger.info(f"Empty user registry, creating default admin {admin.email}")
        store.save_user(admin)
        return [admin]

    if not any(u.email == admin.email for u in users):
        logger.info(f"Default admin {admin.email} missing, re-inserting")
        store.save_user(admin)
        return users + [admin]

    return users
