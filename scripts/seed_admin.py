"""Create the console administrator account if it does not exist.

Usage:
    uv run python -m scripts.seed_admin [user_name] [password]
user_name defaults to "admin". If password is omitted, a random one is printed.
Creates missing tables first when AUTO_CREATE_SCHEMA is true.
All imports use app.*.
"""

import asyncio
import secrets
import sys

from app.application.dtos.dashboard_user import DashboardUserDTO
from app.application.services.dashboard_user_service import DashboardUserService
from app.core.config import get_settings
from app.infrastructure.persistence import database
from app.infrastructure.persistence.repositories import DashboardUserRepository

ADMIN_ROLE = 1


async def main() -> None:
    """Seed the administrator; exit 0 when it already exists."""
    user_name = sys.argv[1] if len(sys.argv) > 1 else "admin"
    password = sys.argv[2] if len(sys.argv) > 2 else secrets.token_urlsafe(12)

    settings = get_settings()
    if settings.auto_create_schema:
        await database.create_schema()
    database._ensure_engine()

    try:
        async with database.AsyncSessionLocal() as session:
            user_repo = DashboardUserRepository(session)
            existing = await user_repo.get_by_user_name(user_name)
            if existing:
                print(f"Dashboard user already exists: {existing.id} ({user_name})")
                return
            await DashboardUserService(user_repo).create_or_update(
                DashboardUserDTO(
                    user_name=user_name,
                    password=password,
                    role=ADMIN_ROLE,
                    enabled=True,
                )
            )
            created = await user_repo.get_by_user_name(user_name)
            print(f"Created dashboard user: {created.id} ({user_name})")
            print(f"Password: {password}")
    finally:
        await database.dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
