"""
JSON Codec

Encodes request values into request bodies and decodes response bodies.
"""

import dataclasses
import json
from enum import Enum
from typing import Any, Union

from .constants import DEFAULT_ENCODING, JSON_CONTENT_TYPE
from .exceptions import CodecError


def _to_wire(value: Any) -> Any:
    """Fallback used by json.dumps for values it cannot serialize natively."""
    to_wire = getattr(value, "to_wire", None)
    if callable(to_wire):
        return to_wire()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (bytes, bytearray)):
        return list(value)
    raise TypeError(f"Object of type {type(value).__name__} is not serializable")


class JsonCodec:
    """
    JSON encoder/decoder for request and response bodies.
    
    decode(encode(value)) == value only for JSON-native values. Bytes and
    tuples come back as lists, non-string dict keys come back as strings, and
    dataclasses come back as dicts.
    """
    
    content_type = JSON_CONTENT_TYPE
    
    def __init__(self, encoding: str = DEFAULT_ENCODING) -> None:
        self.encoding = encoding
    
    def encode(self, value: Any) -> bytes:
        """
        Serialize a value into a request body.
        
        Raises:
            CodecError: If the value cannot be represented as JSON.
        """
        try:
            return json.dumps(value, default=_to_wire, ensure_ascii=False,
                              separators=(",", ":")).encode(self.encoding)
        except (TypeError, ValueError, RecursionError) as e:
            raise CodecError(f"Failed to encode value: {e}") from e
    
    def decode(self, body: Union[bytes, str]) -> Any:
        """
        Deserialize a response body.
        
        Raises:
            CodecError: If the body is not valid JSON.
        """
        try:
            if isinstance(body, bytes):
                body = body.decode(self.encoding)
            return json.loads(body)
        except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
            raise CodecError(
                f"Failed to decode body: {e}",
                message_data=body[:200] if isinstance(body, str) else None,
                expected_format="JSON"
            ) from e
