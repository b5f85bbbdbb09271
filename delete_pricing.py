"""
Delete retired pricing documents
First by known document id, then by exact Particulars/name match
"""
import sys

from database import get_db, MissingCredentialError
from services.pricing_service import all_failed, delete_by_field_match, delete_by_ids
import config


def main(argv=None) -> int:
    try:
        db = get_db()
    except (MissingCredentialError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    try:
        by_id = delete_by_ids(db, config.DELETE_PRICING_IDS)
        by_name = delete_by_field_match(db, config.DELETE_PRICING_NAMES)
    except Exception as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    if all_failed(by_id) and all_failed(by_name):
        print("[ERROR] Every pricing delete failed", file=sys.stderr)
        return 2
    print("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
