"""Delete the old daily pass pricing documents if they still exist"""
import sys

from database import get_db, MissingCredentialError
from services.pricing_service import all_failed, delete_by_ids
import config


def main(argv=None) -> int:
    try:
        db = get_db()
    except (MissingCredentialError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    try:
        report = delete_by_ids(db, config.DELETE_OLD_DAILY_IDS)
    except Exception as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    summary = f"Deleted {len(report['deleted'])}, missing {len(report['missing'])}, failed {len(report['failed'])}"
    if all_failed(report):
        print(f"[ERROR] {summary}", file=sys.stderr)
        return 2
    print(f"[OK] {summary}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
