"""Startup seeding: default companies and the default admin account."""


import logging

from audit_dashboard.core.config import Settings
from audit_dashboard.domain import DEFAULT_COMPANIES
from audit_dashboard.repositories.store import Store
from audit_dashboard.services.auth import AuthService

logger = logging.getLogger(__name__)


async def seed_defaults(store: Store, settings: Settings) -> None:
    """Idempotent; safe to run on every startup."""
    for name, display_name in DEFAULT_COMPANIES:
        await store.ensure_company(name, display_name)

    if settings.admin_email and settings.admin_password:
        await AuthService(store, settings).ensure_admin(settings.admin_email, settings.admin_password)
        logger.info("Default admin account: %s", settings.admin_email)
