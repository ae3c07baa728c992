"""One-way digests used to anonymize identifiers before they reach the ledger.

Composite values are serialized to compact JSON with keys in insertion
order and integral floats written without a fractional part, the same form
``JSON.stringify`` produces, so that institutions running other
implementations derive identical digests for identical inputs.
"""

import hashlib
import json
from typing import Any


def _normalize(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, dict):
        return {str(k): _normalize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_normalize(v) for v in value]
    return value


def canonical_json(value: Any) -> str:
    """Serialize a composite value to its canonical compact JSON form."""
    return json.dumps(
        _normalize(value), separators=(",", ":"), ensure_ascii=False, allow_nan=False
    )


def hash_value(value: Any) -> str:
    """Return the SHA-256 hex digest of a string or composite value."""
    text = value if isinstance(value, str) else canonical_json(value)
    return hashlib.sha256(text.encode("utf-8")).hexdigest()
