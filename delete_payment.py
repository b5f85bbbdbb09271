"""
Delete one payment document by id
Usage: python delete_payment.py --id=PAYMENT_DOC_ID [--yes]

Without --yes the document is only shown (dry run).
"""
import argparse
import sys

from database import get_db, MissingCredentialError
from services.payment_service import delete_payment


def parse_args(argv):
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--id", dest="doc_id", help="payment document id")
    parser.add_argument("--yes", action="store_true", help="actually delete")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    try:
        args = parse_args(sys.argv[1:] if argv is None else argv)
    except SystemExit as e:
        return 0 if e.code == 0 else 1
    if not args.doc_id:
        print("Usage: python delete_payment.py --id=DOCID [--yes]", file=sys.stderr)
        return 1

    try:
        db = get_db()
    except (MissingCredentialError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    try:
        delete_payment(db, args.doc_id, confirm=args.yes)
    except Exception as e:
        print(f"[ERROR] Error {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
