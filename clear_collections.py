"""
Delete every document from the app collections
Usage: python clear_collections.py [--all | extra_collection ...]

Without arguments the default app collections are cleared. `--all` clears every
top-level collection in the project.
"""
import sys

from database import get_db, MissingCredentialError
from services.collection_service import clear_collections, list_collection_names
import config


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv

    try:
        db = get_db()
    except (MissingCredentialError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    try:
        names = list(config.CLEAR_DEFAULT_COLLECTIONS)
        if "--all" in args:
            print("Listing all collections from Firestore...")
            names = list_collection_names(db)
        else:
            names += [name for name in args if name not in names]

        print(f"Collections to clear: {', '.join(names)}")
        clear_collections(db, names)
    except Exception as e:
        print(f"[ERROR] Unhandled error: {e}", file=sys.stderr)
        return 2

    print("Done clearing collections.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
