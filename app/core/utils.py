import json
import re
from datetime import datetime, timezone
from fastapi import Request
from app.core.errors import BadRequestError, OBJECT_TYPE_MESSAGE

ISO_DATE_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}")

# Integer columns are signed 64-bit
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


def utc_now() -> datetime:
    """Current UTC time as a naive datetime (the way timestamps are stored)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def parse_datetime(value: str) -> datetime:
    """
    Parse an ISO-8601 date or datetime string.

    Accepts "2018-01-01", "2018-01-01T10:00:00" and "2018-01-01T10:00:00.000Z".
    Aware values are converted to UTC and returned naive.
    """
    if not isinstance(value, str) or not ISO_DATE_PREFIX.match(value):
        raise ValueError(f"Invalid ISO date: {value!r}")

    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def parse_id(value):
    """Return the integer id for a path/body value, or None if it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str) and value.isascii() and value.isdigit():
        value = int(value)
    if isinstance(value, int) and MIN_ID <= value <= MAX_ID:
        return value
    return None


def trim_inputs(value):
    """Strip surrounding whitespace from every string in a decoded JSON document."""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, dict):
        return {key: trim_inputs(item) for key, item in value.items()}
    if isinstance(value, list):
        return [trim_inputs(item) for item in value]
    return value


def reject_constant(name: str):
    """NaN and Infinity are not JSON; the json module accepts them unless told otherwise."""
    raise ValueError(f"Invalid JSON constant: {name}")


async def get_payload(request: Request) -> dict:
    """Dependency returning the trimmed JSON object sent in the request body."""
    body = await request.body()
    if not body.strip():
        return {}

    try:
        data = json.loads(body, parse_constant=reject_constant)
    except ValueError:
        raise BadRequestError(OBJECT_TYPE_MESSAGE)

    if not isinstance(data, dict):
        raise BadRequestError(OBJECT_TYPE_MESSAGE)

    return trim_inputs(data)
