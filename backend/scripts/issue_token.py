#!/usr/bin/env python3
"""
Print a signed access token for an existing user.

Usage:
    python scripts/issue_token.py --email coach.rivera@example.com
    python scripts/issue_token.py --user-id 1 --minutes 30

Environment variables:
    JWT_SECRET_KEY: Shared signing secret (must match the API)
"""

from __future__ import annotations

import argparse
import sys
from datetime import timedelta
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.core.security import create_access_token
from app.database import get_session
from app.models.user import User


def issue_token(user_id: int | None = None, email: str | None = None, minutes: int | None = None) -> str:
    """Look the user up and return a token carrying its id."""
    with get_session() as db:
        query = db.query(User)
        user = query.filter(User.id == user_id).first() if user_id else query.filter(User.email == email).first()
        if user is None:
            raise LookupError(f"User not found: {user_id or email}")
        expires = timedelta(minutes=minutes) if minutes else None
        return create_access_token(user.id, expires_delta=expires)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--user-id", type=int)
    target.add_argument("--email")
    parser.add_argument("--minutes", type=int, help="Token lifetime in minutes")
    args = parser.parse_args(argv)

    try:
        token = issue_token(args.user_id, args.email, args.minutes)
    except LookupError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
