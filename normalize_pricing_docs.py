"""
Normalize pricing documents
Adds the legacy display fields and canonical fields to every document.
Set DRY_RUN=1 to only print the patches.
"""
import sys

from database import get_db, MissingCredentialError
from services.pricing_service import normalize_pricing
import config


def main(argv=None) -> int:
    try:
        db = get_db()
    except (MissingCredentialError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    try:
        count = normalize_pricing(db, dry_run=config.DRY_RUN)
    except Exception as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    if config.DRY_RUN:
        print("DRY RUN complete. No documents were modified.")
    else:
        print(f"Completed. Patched {count} documents.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
