"""Populate an empty database with the default site content and admin account."""
import sys

from vivida.config import settings
from vivida.constants import DEFAULT_CONTACT_INFO, DEFAULT_THEME
from vivida.seed_data import JOURNEY_MILESTONES, PORTFOLIO_PROJECTS, SERVICES, TEAM_MEMBERS
from vivida.services.storage import Storage
from vivida.utils.hashing import hash_password
from vivida.utils.logger import logger


def ensure_admin_user(storage: Storage) -> bool:
    """
    Create the configured admin account unless it exists.

    Returns:
        True if the account was created
    """
    if storage.get_user_by_email(settings.admin_email):
        logger.info("Admin user already exists")
        return False

    storage.create_user(settings.admin_email, password_hash=hash_password(settings.admin_password))
    logger.info(f"Admin user created: {settings.admin_email}")
    return True


def seed_database(storage: Storage) -> bool:
    """
    Seed default content once.

    The presence of any service row means the database was seeded before and
    the whole routine is skipped.

    Args:
        storage: Storage bound to an open session

    Returns:
        True if content was inserted, False if seeding was skipped
    """
    try:
        logger.info("Starting database seeding")

        if storage.count_services() > 0:
            logger.info("Database already seeded, skipping")
            return False

        ensure_admin_user(storage)

        storage.update_site_theme(dict(DEFAULT_THEME))
        logger.info("Default theme set")

        storage.update_contact_info(dict(DEFAULT_CONTACT_INFO))
        logger.info("Contact information set")

        for member in TEAM_MEMBERS:
            storage.create_team_member(dict(member))
        logger.info(f"Created {len(TEAM_MEMBERS)} team members")

        for service in SERVICES:
            storage.create_service(dict(service))
        logger.info(f"Created {len(SERVICES)} services")

        for milestone in JOURNEY_MILESTONES:
            storage.create_journey_milestone(dict(milestone))
        logger.info(f"Created {len(JOURNEY_MILESTONES)} journey milestones")

        for project in PORTFOLIO_PROJECTS:
            storage.create_portfolio_project({**project, "tags": list(project["tags"])})
        logger.info(f"Created {len(PORTFOLIO_PROJECTS)} portfolio projects")

        logger.info("Database seeding completed")
        return True
    except Exception as e:
        logger.error(f"Error seeding database: {e}", exc_info=True)
        raise


def main() -> int:
    """Create tables and seed them; used when the module is run directly."""
    from vivida.database import SessionLocal, init_db

    init_db()
    db = SessionLocal()
    try:
        seed_database(Storage(db))
    except Exception:
        logger.error("Seeding script failed")
        return 1
    finally:
        db.close()
    logger.info("Seeding script finished")
    return 0


if __name__ == "__main__":
    sys.exit(main())
