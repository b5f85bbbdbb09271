"""Smoke test: read a few documents from each of the main app collections"""
import sys

from database import get_db, MissingCredentialError
from services.collection_service import print_samples
import config


def main(argv=None) -> int:
    try:
        db = get_db()
    except (MissingCredentialError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    print(f"Checking collections: {', '.join(config.SMOKE_TEST_COLLECTIONS)}")
    try:
        print_samples(db, config.SMOKE_TEST_COLLECTIONS)
    except Exception as e:
        print(f"[ERROR] Smoke test failed: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
