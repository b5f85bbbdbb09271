"""Print price, time window, availability, notes and meta of every pricing document"""
import sys

from database import get_db, MissingCredentialError
from services.pricing_service import describe_pricing
import config


def main(argv=None) -> int:
    try:
        db = get_db()
    except (MissingCredentialError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    try:
        docs = list(db.collection(config.COL_PRICING).stream())
        print(f"Found {len(docs)} pricing documents:")
        for doc in docs:
            print("---")
            for line in describe_pricing(doc):
                print(line)
    except Exception as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
