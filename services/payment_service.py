"""
Payment service
Read-only nickname search and single-document delete for the `payments` collection
"""
from utils.helpers import truncated_json
import config


def payment_snippet(data: dict) -> str:
    """First few fields of a payment as compact JSON, cut to TRUNCATE_LENGTH"""
    keys = list(data)[:config.PAYMENT_SNIPPET_KEYS]
    return truncated_json({key: data[key] for key in keys}, config.TRUNCATE_LENGTH)


def find_payments_by_nickname(db, nickname: str, limit: int = config.PAYMENT_SCAN_LIMIT) -> list:
    """
    Scan the first `limit` payments and return the ones where any field whose name
    contains "nick" holds the nickname (case-insensitive substring match).
    Nickname field names vary between writers (nickname, Nickname, nick_name),
    so the match runs client-side instead of as a query.
    """
    target = str(nickname).lower()
    matches = []
    for doc in db.collection(config.COL_PAYMENTS).limit(limit).stream():
        data = doc.to_dict() or {}
        for key, value in data.items():
            if "nick" not in key.lower() or not value:
                continue
            if target in str(value).lower():
                matches.append({"id": doc.id, "field": key, "value": value, "data": data})
                break
    return matches


def delete_payment(db, doc_id: str, confirm: bool = False) -> str:
    """Delete one payment by id; without confirm only show it. Returns missing/dry_run/deleted"""
    ref = db.collection(config.COL_PAYMENTS).document(str(doc_id))
    snapshot = ref.get()
    if not snapshot.exists:
        print(f"No payment document found with id {doc_id}")
        return "missing"

    print(f"Found document: {doc_id} {payment_snippet(snapshot.to_dict() or {})}")
    if not confirm:
        print("Dry run: pass --yes to delete")
        return "dry_run"
    ref.delete()
    print(f"Deleted {doc_id}")
    return "deleted"
