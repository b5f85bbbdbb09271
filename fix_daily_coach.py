"""Align the daily_coach pricing document with the daily bundle availability (15:00-21:59 Manila)"""
import sys

from database import get_db, MissingCredentialError
from services.pricing_service import update_fields
import config


def main(argv=None) -> int:
    try:
        db = get_db()
    except (MissingCredentialError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    try:
        update_fields(db, config.DAILY_COACH_ID, config.DAILY_COACH_UPDATE)
    except Exception as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    print(f"Updated `{config.DAILY_COACH_ID}` document with: {config.DAILY_COACH_UPDATE}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
