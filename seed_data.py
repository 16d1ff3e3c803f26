"""
One-time deployment step: create tables, seed categories and the admin account
"""
import asyncio
import logging
import sys
from studentblog.core.config import settings
from studentblog.core.logging_config import setup_logging
from studentblog.core.seed import DEFAULT_CATEGORIES
from studentblog.db.database import AsyncSessionLocal, engine, init_models
from studentblog.services.auth_service import AuthService
from studentblog.services.category_service import CategoryService

logger = logging.getLogger("seed_data")


async def seed() -> None:
    """Idempotent: existing categories and an existing admin are left alone"""
    await init_models()

    async with AsyncSessionLocal() as session:
        inserted = await CategoryService.seed_categories(session, DEFAULT_CATEGORIES)
        logger.info("Categories inserted: %d", inserted)

        if settings.ADMIN_PASSWORD:
            admin = await AuthService.ensure_admin(session, settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD)
            logger.info("Admin account ready: %s (id=%d)", admin.username, admin.id)
        else:
            logger.warning("ADMIN_PASSWORD not set, no admin account created")

    await engine.dispose()


if __name__ == "__main__":
    setup_logging()
    try:
        asyncio.run(seed())
    except Exception:
        logger.exception("Seeding failed")
        sys.exit(1)
