"""
Collection service
Sampling a few documents and clearing whole collections
"""
import sys

from google.api_core.exceptions import GoogleAPIError

from utils.helpers import truncated_json
import config


def sample_collection(db, name: str, limit: int = config.SAMPLE_LIMIT) -> list:
    """Fetch up to `limit` documents from the first page of a collection"""
    return list(db.collection(name).limit(limit).stream())


def format_sample(doc, length: int = config.TRUNCATE_LENGTH) -> str:
    return f"{doc.id} {truncated_json(doc.to_dict() or {}, length)}"


def print_samples(db, names, limit: int = config.SAMPLE_LIMIT) -> dict:
    """Print a sample of each collection and return the row count per collection"""
    counts = {}
    for name in names:
        docs = sample_collection(db, name, limit)
        counts[name] = len(docs)
        print(f"{name}: {len(docs)} sample rows")
        for doc in docs:
            print(f" - {format_sample(doc)}")
    return counts


def list_collection_names(db) -> list:
    return [col.id for col in db.collections()]


def clear_collection(db, name: str, batch_size: int = config.CLEAR_BATCH_SIZE) -> int:
    """Delete every document in a collection in write batches, return how many were deleted"""
    collection_ref = db.collection(name)
    total = 0
    while True:
        docs = list(collection_ref.limit(batch_size).stream())
        if not docs:
            break
        batch = db.batch()
        for doc in docs:
            batch.delete(doc.reference)
        batch.commit()
        total += len(docs)
        print(f"  deleted {len(docs)} documents from {name}")
        if len(docs) < batch_size:
            break
    return total


def clear_collections(db, names) -> dict:
    """Clear each collection; a failure on one collection does not stop the rest"""
    results = {}
    for name in names:
        print(f"Clearing collection: {name}")
        try:
            results[name] = clear_collection(db, name)
        except GoogleAPIError as e:
            print(f"[ERROR] failed to clear {name}: {e}", file=sys.stderr)
            results[name] = None
    return results
