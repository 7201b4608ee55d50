"""Create a staff user (creates tables first if they are missing).

Usage:
    python -m scripts.create_admin_user <username> <email> [password] [--role admin|editor|viewer]
If password is omitted, a random one is printed.
All imports use app.*.
"""

import argparse
import asyncio
import secrets
import sys

from app.core.config import get_settings
from app.domain.enums import UserRole
from app.infrastructure.persistence import database
from app.infrastructure.persistence.repositories import UserRepository


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a CMS staff user")
    parser.add_argument("username")
    parser.add_argument("email")
    parser.add_argument("password", nargs="?", default=None)
    parser.add_argument("--role", choices=UserRole.values(), default=UserRole.ADMIN.value)
    return parser.parse_args(argv)


async def main(argv: list[str]) -> None:
    """Create the user in one transaction; exit 1 if the username is taken."""
    args = _parse_args(argv)
    get_settings()
    await database.init_models()
    if database.AsyncSessionLocal is None:
        print("Database not configured (set DATABASE_URL)", file=sys.stderr)
        sys.exit(1)

    password = args.password or secrets.token_urlsafe(12)
    async with database.AsyncSessionLocal() as session:
        async with session.begin():
            user_repo = UserRepository(session)
            if await user_repo.get_by_username(args.username):
                print(f"User already exists: {args.username}", file=sys.stderr)
                sys.exit(1)
            user = await user_repo.create_user(
                username=args.username,
                email=args.email,
                password=password,
                role=args.role,
            )
    print(f"Created user: {user.id} ({user.username}, role={user.role})")
    if not args.password:
        print(f"Password: {password}")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1:]))
