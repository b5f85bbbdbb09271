"""
Seed the pricing collection from pricing.json
Usage: python seed_pricing.py [path/to/pricing.json]

Without a path, dist/pricing.json then public/pricing.json are tried. Documents are
merge-written by id, sku or a slug of the product name.
"""
import sys

from database import get_db, MissingCredentialError
from services.pricing_service import load_pricing_file, seed_pricing


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv

    try:
        items = load_pricing_file(args[:1] or None)
    except (OSError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    try:
        db = get_db()
    except (MissingCredentialError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    print("Seeding Firestore `pricing` collection...")
    try:
        count = seed_pricing(db, items)
    except Exception as e:
        print(f"[ERROR] Seed failed: {e}", file=sys.stderr)
        return 2

    print(f"[OK] Pricing seed complete. Wrote {count} of {len(items)} docs")
    return 0


if __name__ == "__main__":
    sys.exit(main())
