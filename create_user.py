"""
Create or update a user
Usage: python create_user.py <username> <password> [role]
"""
import sys

from database import get_db, MissingCredentialError
from services.user_service import upsert_user
import config


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 2:
        print("Usage: python create_user.py <username> <password> [role]", file=sys.stderr)
        return 1
    username, password = args[0], args[1]
    role = args[2] if len(args) > 2 else config.DEFAULT_ROLE

    try:
        db = get_db()
    except (MissingCredentialError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    try:
        upsert_user(db, username, password, role)
    except Exception as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
