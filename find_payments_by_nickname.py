"""
Find payments whose nickname contains a given string (case-insensitive)
Usage: python find_payments_by_nickname.py --nick=rafael [--limit=2000]
"""
import argparse
import sys

from database import get_db, MissingCredentialError
from services.payment_service import find_payments_by_nickname, payment_snippet
import config


def parse_args(argv):
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--nick", help="nickname to search for")
    parser.add_argument("--limit", type=int, default=config.PAYMENT_SCAN_LIMIT,
                        help="number of payments documents to scan")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    try:
        args = parse_args(sys.argv[1:] if argv is None else argv)
    except SystemExit as e:
        return 0 if e.code == 0 else 1
    if not args.nick:
        print("Usage: python find_payments_by_nickname.py --nick=RAFAEL", file=sys.stderr)
        return 1

    try:
        db = get_db()
    except (MissingCredentialError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    print(f"Searching payments for nickname (case-insensitive): {args.nick}")
    try:
        matches = find_payments_by_nickname(db, args.nick, args.limit)
    except Exception as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    if not matches:
        print(f"No matches found in first {args.limit} payments documents.")
        return 0

    print(f"\nFound {len(matches)} match(es):")
    for match in matches:
        print(f"- {match['id']} field={match['field']} value={match['value']} {payment_snippet(match['data'])}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
