"""
User service
Provisioning of staff/admin accounts in the `users` collection (document id = username)
"""
from datetime import datetime, timezone

from services.auth_service import hash_password
import config


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def user_document(username: str, password: str, role: str = config.DEFAULT_ROLE) -> dict:
    return {
        "username": str(username),
        "password_hash": hash_password(password),
        "role": role,
        "created_at": _now_iso(),
    }


def upsert_user(db, username: str, password: str, role: str = config.DEFAULT_ROLE) -> dict:
    """Create or merge the user document; an existing user is overwritten without warning"""
    doc = user_document(username, password, role)
    db.collection(config.COL_USERS).document(str(username)).set(doc, merge=True)
    print(f"User created/updated: {username}")
    return doc


def check_and_set_user(db, username: str, password: str, role: str = config.DEFAULT_ROLE) -> str:
    """
    Make sure the user exists and has a password hash.
    An existing role is never changed. Returns "created", "updated" or "unchanged".
    """
    doc_ref = db.collection(config.COL_USERS).document(str(username))
    snapshot = doc_ref.get()
    if not snapshot.exists:
        print("User doc not found. Will create.")
        doc_ref.set(user_document(username, password, role), merge=True)
        print(f"Created user {username} with role {role}")
        return "created"

    data = snapshot.to_dict() or {}
    current_role = data.get("role")
    status = "unchanged"
    if data.get("password_hash"):
        print(f"User exists and has a password_hash. Role: {current_role}")
    else:
        print("User exists but password_hash is missing. Setting password_hash now.")
        updates = {"password_hash": hash_password(password)}
        if not current_role:
            updates["role"] = role
        doc_ref.set(updates, merge=True)
        print(f"Updated user {username} with password_hash" + ("" if current_role else f" and role {role}"))
        status = "updated"

    if current_role and current_role != role:
        print(f"Note: existing role is '{current_role}', not '{role}'. Leaving existing role as-is.")
    return status


def recreate_user(db, username: str, password: str, role: str = config.DEFAULT_ROLE) -> dict:
    """Delete any existing user document and write a fresh one"""
    doc_ref = db.collection(config.COL_USERS).document(str(username))
    if doc_ref.get().exists:
        doc_ref.delete()
        print(f"Deleted existing user document for {username}")
    else:
        print(f"No existing user document for {username}")

    doc = user_document(username, password, role)
    doc_ref.set(doc)
    print(f"Created user {username} with role {role}")
    return doc
