"""Print the first few documents of the members collection"""
import sys

from database import get_db, MissingCredentialError
from services.collection_service import format_sample, sample_collection
import config


def main(argv=None) -> int:
    try:
        db = get_db()
    except (MissingCredentialError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    try:
        print(f"Checking top {config.SAMPLE_LIMIT} docs in `{config.COL_MEMBERS}` collection...")
        docs = sample_collection(db, config.COL_MEMBERS)
        if not docs:
            print(f"No documents found in {config.COL_MEMBERS}.")
        for doc in docs:
            print(format_sample(doc))
    except Exception as e:
        print(f"[ERROR] Error checking Firestore: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
