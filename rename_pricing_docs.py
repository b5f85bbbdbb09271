"""Rename pricing documents whose label is RENAME_OLD_NAME to RENAME_NEW_NAME"""
import sys

from database import get_db, MissingCredentialError
from services.pricing_service import rename_by_value
import config


def main(argv=None) -> int:
    try:
        db = get_db()
    except (MissingCredentialError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    try:
        print(f"Searching {config.COL_PRICING} collection for docs with name/Particulars == {config.RENAME_OLD_NAME}")
        updated = rename_by_value(db, config.RENAME_OLD_NAME, config.RENAME_NEW_NAME)
    except Exception as e:
        print(f"[ERROR] Error: {e}", file=sys.stderr)
        return 2

    print(f"Updated {updated} docs")
    return 0


if __name__ == "__main__":
    sys.exit(main())
