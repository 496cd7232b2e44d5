"""
Bootstrap script - creates an admin account directly in the database.

Usage:
    python -m scripts.create_admin <username>

Admin registration over HTTP needs an existing admin token, so the very
first admin has to be created here. The password is prompted for (or read
from PLACEMENTLOG_ADMIN_PASSWORD when set, for CI).

Running it twice with the same username is a no-op.
"""
import argparse
import asyncio
import getpass
import os
import sys

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from placementlog.core.config import settings
from placementlog.core.database import async_session_maker, close_db, init_db
from placementlog.core.exceptions import IdentifierAlreadyExistsException
from placementlog.core.tokens import TokenService
from placementlog.repositories.admin_repository import AdminRepository
from placementlog.services.auth_service import AdminAuthService


async def create_admin(username: str, password: str) -> int:
    """Create the admin; returns a process exit code."""
    await init_db()

    try:
        async with async_session_maker() as db:
            service = AdminAuthService(
                AdminRepository(db),
                TokenService.from_settings(settings),
            )
            try:
                admin = await service.register(username=username, password=password)
            except IdentifierAlreadyExistsException:
                print(f"  Admin '{username}' already exists, nothing to do")
                return 0
    finally:
        await close_db()

    print(f"  Admin created: {admin.username} ({admin.id})")
    print(f"  Token (valid {settings.access_token_expire_hours}h): {admin.token}")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Create a PlacementLog admin account")
    parser.add_argument("username")
    args = parser.parse_args()

    password = os.environ.get("PLACEMENTLOG_ADMIN_PASSWORD") or getpass.getpass("Password: ")
    if not password:
        print("Password must not be empty", file=sys.stderr)
        return 1

    return asyncio.run(create_admin(args.username, password))


if __name__ == "__main__":
    sys.exit(main())
