"""
JSON wire serialization

Converts envelopes to and from the JSON text exchanged by transport adapters.
"""

import datetime
import json
from typing import Any, Mapping, Union


def json_default(obj: Any) -> Any:
    """Fallback encoder for values json cannot encode natively

    Args:
        obj: Value found inside an envelope

    Returns:
        JSON-compatible replacement

    Raises:
        TypeError: The value has no JSON representation
    """
    if isinstance(obj, (datetime.date, datetime.time)):
        return obj.isoformat()

    if isinstance(obj, (set, frozenset)):
        return list(obj)

    if isinstance(obj, Mapping):
        return dict(obj)

    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(data: Any) -> str:
    """Serialize an envelope to a JSON string"""
    return json.dumps(data, default=json_default)


def from_json(payload: Union[str, bytes]) -> Any:
    """Deserialize a JSON string or UTF-8 bytes

    Raises:
        json.JSONDecodeError: payload is not valid JSON
        UnicodeDecodeError: payload is not valid UTF-8
    """
    if isinstance(payload, (bytes, bytearray)):
        payload = payload.decode('utf-8')
    return json.loads(payload)
