"""JSON formatting utilities for decoded NMEA messages.

Every record field is always present in the output: an unavailable value is
written as ``null`` rather than left out, so the message shape only depends
on the sentence type.
"""

import dataclasses
import enum
import json
from datetime import datetime, time
from typing import Any

from navsentence.nmea.types import ParsedMessage

__all__ = ["format_message", "message_to_dict"]


def _to_json_value(value: Any) -> Any:
    if isinstance(value, datetime | time):
        # UTC instants render with a "Z" suffix
        return value.isoformat().replace("+00:00", "Z")
    if isinstance(value, enum.Enum):
        return value.value
    return value


def message_to_dict(message: ParsedMessage) -> dict[str, Any]:
    """Convert a decoded message into a JSON-compatible dict.

    Example:
        >>> message_to_dict(rmc)["timestamp"]
        '2020-11-19T22:54:46Z'
    """
    payload: dict[str, Any] = {"type": message.sentence_kind.lower()}
    for field in dataclasses.fields(message):
        payload[field.name] = _to_json_value(getattr(message, field.name))
    return payload


def format_message(message: ParsedMessage) -> str:
    """Serialize a decoded message into a JSON string for WebSocket transmission."""
    return json.dumps(message_to_dict(message))
