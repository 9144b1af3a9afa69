#!/usr/bin/env python3
"""
Bootstrap an admin account. Run once during initial setup.

Usage:
    python scripts/create_admin.py admin
    python scripts/create_admin.py admin --password mypassword --email me@example.com

If the username already exists the account is re-activated and no
password is asked for; the stored one is left untouched.
"""

import sys
import asyncio
import argparse
from pathlib import Path
from getpass import getpass
from typing import Callable, Optional

SRC_DIR = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_DIR))

from dotenv import load_dotenv
load_dotenv()


class PasswordError(ValueError):
    pass


def prompt_password(given: Optional[str] = None) -> str:
    """Return `given`, or ask twice on the terminal; enforce the minimum length"""
    password = given
    if not password:
        password = getpass("Password: ")
        confirm = getpass("Confirm password: ")
        if password != confirm:
            raise PasswordError("Passwords do not match")

    if len(password) < 4:
        raise PasswordError("Password must be at least 4 characters")
    return password


async def bootstrap_admin(
    storage,
    username: str,
    get_password: Callable[[], str],
    email: Optional[str] = None,
) -> str:
    """
    Create the admin, or re-activate it if it already exists

    `get_password` is only called when a new account is created.

    Returns:
        a one-line summary for the operator
    """
    from api.schemas.auth import InsertAdmin

    existing = await storage.get_admin_by_username(username)
    if existing:
        if existing.is_active != 1:
            existing.is_active = 1
            await storage.admins.update(existing)
            return f"Admin '{username}' already exists (id={existing.id}), re-activated"
        return f"Admin '{username}' already exists (id={existing.id}), nothing to do"

    admin = await storage.create_admin(
        InsertAdmin(username=username, password=get_password(), email=email)
    )
    return f"Admin created: {admin.username} (id={admin.id})"


async def main(username: str, password: Optional[str], email: Optional[str] = None) -> None:
    from api.config import config
    from db.database import DatabaseManager
    from repositories.storage import Storage

    db = DatabaseManager(config.DATABASE_URL, echo=config.DATABASE_ECHO)
    await db.initialize()

    try:
        async with db.session() as session:
            message = await bootstrap_admin(
                Storage(session),
                username,
                lambda: prompt_password(password),
                email,
            )
        print(message)
    finally:
        await db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create an admin account for the portfolio")
    parser.add_argument("username", help="Admin username")
    parser.add_argument("--password", help="Admin password (prompted if not given)")
    parser.add_argument("--email", help="Admin contact email")

    args = parser.parse_args()

    try:
        asyncio.run(main(args.username, args.password, args.email))
    except PasswordError as e:
        print(e)
        sys.exit(1)
