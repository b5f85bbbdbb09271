"""List every pricing document with its product label"""
import sys

from database import get_db, MissingCredentialError
from services.pricing_service import pricing_label
import config


def main(argv=None) -> int:
    try:
        db = get_db()
    except (MissingCredentialError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    try:
        docs = list(db.collection(config.COL_PRICING).stream())
        print(f"Pricing docs count: {len(docs)}")
        for doc in docs:
            print(f"- {doc.id} -> {pricing_label(doc)}")
    except Exception as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
