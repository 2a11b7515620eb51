"""Message serialization for Kafka"""
import json
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Optional


def _convert(obj: Any):
    """json.dumps fallback for values coming out of the database"""
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if isinstance(obj, Decimal):
        return str(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def serialize_entity(entity) -> str:
    """
    Serialize an ORM entity to a JSON string.

    Args:
        entity: object exposing to_dict()

    Returns:
        str: JSON text with datetimes rendered as ISO-8601
    """
    return json.dumps(entity.to_dict(), default=_convert, ensure_ascii=False)


def build_payload(message: str, headers: Optional[Dict[str, str]] = None) -> bytes:
    """
    Build the message envelope sent as the Kafka value.

    Args:
        message: message body (usually a serialized entity)
        headers: string-to-string metadata, empty when omitted

    Returns:
        bytes: UTF-8 encoded JSON {"body": ..., "headers": {...}}
    """
    envelope = {
        "body": message,
        "headers": dict(headers) if headers else {},
    }
    return json.dumps(envelope, ensure_ascii=False).encode('utf-8')


def encode_key(key: Any) -> Optional[bytes]:
    """Partition key as bytes; the same id always gives the same key"""
    if key is None or isinstance(key, bytes):
        return key
    return str(key).encode('utf-8')
