"""Firestore REST value encoding for SolarFlow documents.

Stored documents are the plain dicts produced by solarflow.infrastructure.serialization:
configuration records (nested rule maps and id lists), projects and customers
(open attribute maps) and submissions (a scalar answer, a file-reference map
and review timestamps). Only the Firestore value kinds those dicts need are
supported; anything else is a programming error and raises TypeError.
"""

from datetime import datetime
from typing import Any

from solarflow.shared.utils.datetime import ensure_utc, parse_iso_utc

# Firestore integers are signed 64-bit; larger answers are stored as doubles.
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _encode_int(value: int) -> dict[str, Any]:
    if _INT64_MIN <= value <= _INT64_MAX:
        return {"integerValue": str(value)}
    try:
        return {"doubleValue": float(value)}
    except OverflowError as e:
        raise ValueError(f"Integer is too large to store in Firestore: {value}") from e


def _encode_value(value: Any) -> dict[str, Any]:
    if value is None:
        return {"nullValue": None}
    if isinstance(value, bool):
        return {"booleanValue": value}
    if isinstance(value, int):
        return _encode_int(value)
    if isinstance(value, float):
        return {"doubleValue": value}
    if isinstance(value, str):
        return {"stringValue": value}
    if isinstance(value, datetime):
        return {"timestampValue": ensure_utc(value).strftime("%Y-%m-%dT%H:%M:%S.%fZ")}
    if isinstance(value, (list, tuple)):
        return {"arrayValue": {"values": [_encode_value(item) for item in value]}}
    if isinstance(value, dict):
        return {"mapValue": {"fields": encode_fields(value)}}
    raise TypeError(f"Unsupported Firestore value type: {type(value).__name__}")


def encode_fields(data: dict[str, Any]) -> dict[str, Any]:
    return {key: _encode_value(value) for key, value in data.items()}


def encode_document(data: dict[str, Any]) -> dict[str, Any]:
    """Wrap a SolarFlow document as a Firestore REST Document body ({"fields": ...})."""
    return {"fields": encode_fields(data)}


def _decode_value(obj: dict[str, Any]) -> Any:
    if "nullValue" in obj:
        return None
    if "booleanValue" in obj:
        return obj["booleanValue"]
    if "integerValue" in obj:
        return int(obj["integerValue"])
    if "doubleValue" in obj:
        # NaN and infinities arrive as strings
        return float(obj["doubleValue"])
    if "stringValue" in obj:
        return obj["stringValue"]
    if "timestampValue" in obj:
        return parse_iso_utc(obj["timestampValue"])
    if "arrayValue" in obj:
        return [_decode_value(item) for item in obj["arrayValue"].get("values") or []]
    if "mapValue" in obj:
        return decode_document(obj["mapValue"].get("fields"))
    return None


def decode_document(fields: dict[str, Any] | None) -> dict[str, Any]:
    """Turn a Firestore REST Document's fields mapping back into a SolarFlow document."""
    if not fields:
        return {}
    return {key: _decode_value(value) for key, value in fields.items()}
