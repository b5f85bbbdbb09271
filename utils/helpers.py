"""
Helper functions
"""
import json
import re


def first_present(data: dict, fields, default=None):
    """Return the first truthy value among fields, in order"""
    for field in fields:
        value = data.get(field)
        if value:
            return value
    return default


def normalized_name(data: dict, fields) -> str:
    return str(first_present(data, fields, "")).strip()


def compact_json(data) -> str:
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"), default=str)


def truncated_json(data, length: int) -> str:
    """Serialise document fields to JSON and cut to length characters"""
    return compact_json(data)[:length]


def to_bool(value) -> bool:
    if value is True or value is False:
        return value
    text = str(value or "").strip().lower()
    return text in ("1", "yes", "y", "true", "t")


def yes_no(value) -> str:
    return "Yes" if to_bool(value) else "No"


def slugify(text: str, max_length: int = 64) -> str:
    slug = re.sub(r"[^a-z0-9]+", "_", str(text or "").lower()).strip("_")
    return slug[:max_length]
