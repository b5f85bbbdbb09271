"""
Pricing service
Seeding, lookup, delete, rename, update and normalisation of `pricing` documents.

Pricing documents were written by several generations of the app, so the product
label may live in `Particulars`, `particulars`, `name` or `title`. Every lookup here
takes an explicit ordered tuple of candidate fields from config.
"""
import json
import os
import sys
import uuid
from datetime import datetime, timezone

from google.api_core.exceptions import GoogleAPIError
from google.cloud import firestore

from utils.helpers import compact_json, first_present, normalized_name, slugify, to_bool, yes_no
import config


def delete_by_ids(db, doc_ids, collection: str = config.COL_PRICING) -> dict:
    """Delete each document that exists; report the ones that do not"""
    col = db.collection(collection)
    report = {"deleted": [], "missing": [], "failed": []}
    for doc_id in doc_ids:
        try:
            ref = col.document(doc_id)
            if ref.get().exists:
                ref.delete()
                report["deleted"].append(doc_id)
                print(f"Deleted {collection} doc by id: {doc_id}")
            else:
                report["missing"].append(doc_id)
                print(f"No doc for id: {doc_id}")
        except GoogleAPIError as e:
            report["failed"].append(doc_id)
            print(f"[ERROR] Error deleting id {doc_id}: {e}", file=sys.stderr)
    return report


def all_failed(report: dict) -> bool:
    """True when every item in a delete report failed, e.g. the store was unreachable"""
    return bool(report["failed"]) and not any(items for key, items in report.items() if key != "failed")


def _query_first_match(col, fields, value):
    """Return (field, docs) for the first field whose equality query has results"""
    for field in fields:
        docs = list(col.where(field, "==", value).stream())
        if docs:
            return field, docs
    return None, []


def delete_by_field_match(db, values, collection: str = config.COL_PRICING,
                          fields=config.NAME_QUERY_FIELDS) -> dict:
    """
    For each value, query the fields in order and delete every document of the first
    field that matches. Deletes run one after another; a failed delete is logged and the
    remaining documents are still deleted.
    """
    col = db.collection(collection)
    report = {"deleted": [], "failed": [], "not_found": []}
    for value in values:
        try:
            field, docs = _query_first_match(col, fields, value)
        except GoogleAPIError as e:
            print(f"[ERROR] Error querying for name {value}: {e}", file=sys.stderr)
            report["failed"].append(value)
            continue

        if not docs:
            report["not_found"].append(value)
            print(f"No {collection} doc found with {'/'.join(fields)} = {value}")
            continue

        for doc in docs:
            try:
                doc.reference.delete()
                report["deleted"].append(doc.id)
                print(f"Deleted {collection} doc by {field}: {doc.id} {value}")
            except GoogleAPIError as e:
                report["failed"].append(doc.id)
                print(f"[ERROR] Err deleting {doc.id}: {e}", file=sys.stderr)
    return report


def update_fields(db, doc_id: str, fields: dict, collection: str = config.COL_PRICING) -> None:
    """Merge fields onto one document, leaving its other fields untouched"""
    db.collection(collection).document(doc_id).set(fields, merge=True)


def find_by_name(db, name: str, collection: str = config.COL_PRICING,
                 fields=config.NAME_MATCH_FIELDS) -> list:
    """Scan the whole collection and match the trimmed label client-side"""
    target = str(name).strip()
    return [
        doc for doc in db.collection(collection).stream()
        if normalized_name(doc.to_dict() or {}, fields) == target
    ]


def rename_by_value(db, old_name: str, new_name: str, collection: str = config.COL_PRICING) -> int:
    matches = find_by_name(db, old_name, collection)
    print(f"Found {len(matches)} matching docs")
    updated = 0
    for doc in matches:
        print(f"Updating doc {doc.id} -> change name to {new_name}")
        try:
            db.collection(collection).document(doc.id).update({"Particulars": new_name, "name": new_name})
            updated += 1
        except GoogleAPIError as e:
            print(f"[ERROR] Failed to update {doc.id}: {e}", file=sys.stderr)
    return updated


def pricing_label(doc) -> str:
    data = doc.to_dict() or {}
    return first_present(data, config.NAME_LABEL_FIELDS) or compact_json(data)


def describe_pricing(doc) -> list:
    """Lines printed for one pricing document; optional fields only when set"""
    data = doc.to_dict() or {}
    lines = [f"id: {doc.id}", f"price: {data.get('price')}"]
    if data.get("time_window"):
        lines.append(f"time_window: {data['time_window']}")
    if data.get("availability"):
        lines.append(f"availability: {compact_json(data['availability'])}")
    if data.get("notes"):
        lines.append(f"notes: {data['notes']}")
    if data.get("meta"):
        lines.append(f"meta: {compact_json(data['meta'])}")
    return lines


def _number(value):
    number = float(value)
    return int(number) if number.is_integer() else number


def normalized_patch(doc_id: str, data: dict) -> dict:
    """
    Build the merge patch carrying both the legacy display shape (Particulars, Cost,
    Validity, Yes/No flags) and the canonical fields used by the API.
    """
    name = first_present(data, ("name", "Particulars", "particulars", "id")) or doc_id or ""
    if "price" in data:
        price = data["price"]
    else:
        price = data.get("Cost")
    has_price = price is not None and price != ""
    validity = first_present(data, ("validity_days", "Validity", "validity"), 0)

    if "is_gym_membership" in data:
        gym = to_bool(data["is_gym_membership"])
    else:
        gym = to_bool(data.get("Gym membership") or data.get("gym"))
    if "is_coach_subscription" in data:
        coach = to_bool(data["is_coach_subscription"])
    else:
        coach = to_bool(data.get("Coach subscription") or data.get("coach"))

    patch = {
        # legacy shape read by the frontend
        "Particulars": str(name),
        "Cost": f"{float(price):.2f}" if has_price else "",
        "Validity": _number(validity or 0),
        "Gym membership": yes_no(gym),
        "Coach subscription": yes_no(coach),
        "Notes": first_present(data, ("notes", "Notes"), ""),
        # canonical fields
        "id": data.get("id") or doc_id,
        "name": str(name),
        "price": _number(price) if has_price else None,
        "time_window": str(first_present(data, ("time_window", "TimeWindow", "Time Window"), "any")),
        "is_gym_membership": gym,
        "is_coach_subscription": coach,
        "category": str(first_present(data, ("category", "Category"), "")),
        "discount": to_bool(data.get("discount") or data.get("is_discount")),
    }
    for nested in ("_raw", "raw"):
        if nested in data:
            patch[nested] = firestore.DELETE_FIELD
    return patch


def normalize_pricing(db, dry_run: bool = False, collection: str = config.COL_PRICING) -> int:
    """Patch every pricing document into the normalised shape, return how many were patched"""
    col = db.collection(collection)
    docs = list(col.stream())
    print(f"Normalizing {len(docs)} pricing docs")
    count = 0
    for doc in docs:
        try:
            patch = normalized_patch(doc.id, doc.to_dict() or {})
            if dry_run:
                print(f"[DRY RUN] Would patch {doc.id} {patch}")
                continue
            col.document(doc.id).set(patch, merge=True)
            print(f"Patched {doc.id}")
            count += 1
        except (GoogleAPIError, ValueError) as e:
            print(f"[ERROR] Failed to patch {doc.id}: {e}", file=sys.stderr)
    return count


def load_pricing_file(paths=None) -> list:
    """Read the first pricing.json that exists; it must be a non-empty JSON list"""
    for path in paths or config.PRICING_SEED_PATHS:
        if os.path.exists(path):
            with open(path, encoding="utf-8") as f:
                items = json.load(f)
            if not isinstance(items, list) or not items:
                raise ValueError(f"{path} is empty or not an array")
            return items
    raise FileNotFoundError(
        f"Could not find pricing.json in {', '.join(paths or config.PRICING_SEED_PATHS)}"
    )


def seed_doc_id(item: dict) -> str:
    doc_id = item.get("id") or item.get("sku") or slugify(first_present(item, config.NAME_LABEL_FIELDS, ""))
    return str(doc_id or f"item_{uuid.uuid4().hex[:6]}").strip()


def seed_document(item: dict) -> dict:
    """Pricing document in canonical shape; the source row is kept under `_raw`"""
    if "price" in item:
        price = item["price"]
    else:
        price = item.get("Cost")
    return {
        "id": item.get("id"),
        "name": first_present(item, config.NAME_LABEL_FIELDS),
        "price": _number(price) if price is not None and price != "" else None,
        "validity_days": first_present(item, ("validity_days", "validity", "Validity"), 0),
        "is_gym_membership": to_bool(first_present(item, ("is_gym_membership", "Gym membership", "Gym Membership"))),
        "is_coach_subscription": to_bool(
            first_present(item, ("is_coach_subscription", "Coach subscription", "Coach Subscription"))
        ),
        "notes": first_present(item, ("notes", "Notes"), ""),
        "_raw": item,
        "createdAt": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
    }


def seed_pricing(db, items, collection: str = config.COL_PRICING) -> int:
    """Merge-write each pricing row by id/sku/slug, return how many were written"""
    col = db.collection(collection)
    count = 0
    for item in items:
        try:
            if not isinstance(item, dict):
                raise ValueError(f"pricing row is not an object: {item!r}")
            doc_id = seed_doc_id(item)
            col.document(doc_id).set(seed_document(item), merge=True)
            print(f"Wrote pricing doc {doc_id}")
            count += 1
        except (GoogleAPIError, ValueError) as e:
            print(f"[ERROR] Failed to write pricing row {item}: {e}", file=sys.stderr)
    return count
