"""Decoding of the structured `activity` payload stored on ActivityLog rows."""
import json
import math


class MalformedActivityPayload(Exception):
    pass


def decode_activity(raw):
    """Return the payload as a dict; JSON text is decoded first."""
    if isinstance(raw, (str, bytes, bytearray)):
        try:
            raw = json.loads(raw)
        except ValueError as e:
            raise MalformedActivityPayload(f"invalid JSON: {e}") from e
    if not isinstance(raw, dict):
        raise MalformedActivityPayload(f"expected an object, got {type(raw).__name__}")
    return raw


def _as_number(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedActivityPayload(f"non-numeric value {value!r}")
    try:
        number = float(value)
    except OverflowError as e:
        raise MalformedActivityPayload("value too large for a float") from e
    if not math.isfinite(number):
        raise MalformedActivityPayload(f"non-finite value {value!r}")
    return number


def activity_distance(raw):
    payload = decode_activity(raw)
    if 'distance' not in payload:
        raise MalformedActivityPayload("missing 'distance'")
    distance = _as_number(payload['distance'])
    if distance < 0:
        raise MalformedActivityPayload(f"negative distance {distance!r}")
    return distance


def numeric_fields(raw):
    """All finite numeric fields of the payload, keyed by name."""
    result = {}
    for key, value in decode_activity(raw).items():
        try:
            result[key] = _as_number(value)
        except MalformedActivityPayload:
            continue
    return result
