"""
Create multiple users from a JSON file
Usage: python create_users.py <users.json>

The file holds a list of {"username": ..., "password": ..., "role": ...} objects.
"""
import json
import sys

from database import get_db, MissingCredentialError
from services.user_service import upsert_user
import config


def load_users(path: str) -> list:
    with open(path, encoding="utf-8") as f:
        users = json.load(f)
    if not isinstance(users, list):
        raise ValueError(f"{path} must contain a JSON list of users")
    for user in users:
        if not isinstance(user, dict):
            raise ValueError(f"Every user must be a JSON object, got: {user!r}")
        if not user.get("username") or not user.get("password"):
            raise ValueError(f"Every user needs a username and password: {user.get('username')}")
    return users


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 1:
        print("Usage: python create_users.py <users.json>", file=sys.stderr)
        return 1

    try:
        users = load_users(args[0])
    except (OSError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    try:
        db = get_db()
    except (MissingCredentialError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    try:
        for user in users:
            upsert_user(db, user["username"], user["password"], user.get("role") or config.DEFAULT_ROLE)
    except Exception as e:
        print(f"[ERROR] Failed to create users: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
