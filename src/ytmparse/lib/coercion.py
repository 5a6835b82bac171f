"""Conversion of resolved tree nodes into typed values.

Every helper takes the path the value was read from, so a mismatch can be
reported against the exact lookup that produced it. The ``select_*``
wrappers combine a navigator lookup with the matching coercion.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta
from typing import Any

from dateutil import parser as dateutil_parser

from ytmparse.exceptions import TypeMismatchError
from ytmparse.lib.navigator import select, select_optional
from ytmparse.models.entities import NamedEntity, Radio, Thumbnail

EXPLICIT_BADGE_ICON = "MUSIC_EXPLICIT_BADGE"

_BADGE_ICON_PATH = "musicInlineBadgeRenderer.icon.iconType"
_FLOAT_RE = re.compile(r"-?\d+(\.\d+)?")

# Group separators seen in localized counts ("12,345", "12.345", "12'345")
_GROUP_SEPARATORS = str.maketrans("", "", ",.'\u00a0\u202f")

_RELATIVE_UNITS = {
    "s": timedelta(seconds=1),
    "m": timedelta(minutes=1),
    "h": timedelta(hours=1),
    "d": timedelta(days=1),
    "w": timedelta(weeks=1),
}

_LONG_DURATION_RE = re.compile(r"(\d+)\+?\s*(hour|minute|second)s?\b", re.IGNORECASE)
_LONG_DURATION_UNITS = {
    "hour": timedelta(hours=1),
    "minute": timedelta(minutes=1),
    "second": timedelta(seconds=1),
}


# ============================================================================
# SCALAR COERCION
# ============================================================================


def as_string(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise TypeMismatchError(path, "string", value)
    return value


def as_int(value: Any, path: str) -> int:
    """Coerce to int, accepting digit strings as InnerTube sends them."""
    if isinstance(value, bool):
        raise TypeMismatchError(path, "integer", value)
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    raise TypeMismatchError(path, "integer", value)


def as_float(value: Any, path: str) -> float:
    if isinstance(value, bool):
        raise TypeMismatchError(path, "number", value)
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str) and _FLOAT_RE.fullmatch(value):
        return float(value)
    raise TypeMismatchError(path, "number", value)


def as_bool(value: Any, path: str) -> bool:
    if not isinstance(value, bool):
        raise TypeMismatchError(path, "boolean", value)
    return value


def as_array(value: Any, path: str) -> list[Any]:
    if not isinstance(value, list):
        raise TypeMismatchError(path, "array", value)
    return value


def as_object(value: Any, path: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise TypeMismatchError(path, "object", value)
    return value


# ============================================================================
# SEMANTIC PARSERS
# ============================================================================


def parse_duration(text: str, path: str = "<duration>") -> timedelta:
    """Parse 'M:SS' or 'H:MM:SS' into a timedelta.

    Raises:
        TypeMismatchError: If the text has no colon separator, more than
            three parts, or a non-numeric part.
    """
    parts = text.strip().split(":")
    if len(parts) not in (2, 3) or not all(p.isascii() and p.isdigit() for p in parts):
        raise TypeMismatchError(path, "duration", text)

    numbers = [int(p) for p in parts]
    if len(numbers) == 2:
        minutes, seconds = numbers
        return timedelta(minutes=minutes, seconds=seconds)
    hours, minutes, seconds = numbers
    return timedelta(hours=hours, minutes=minutes, seconds=seconds)


def parse_long_duration(text: str, path: str = "<duration>") -> timedelta:
    """Parse a spelled-out total ('6 hours, 30 minutes', '1+ hours').

    A "+" marks a lower bound and is read as the bound itself.

    Raises:
        TypeMismatchError: If the text names no hours, minutes or seconds.
    """
    parts = _LONG_DURATION_RE.findall(text)
    if not parts:
        raise TypeMismatchError(path, "duration", text)
    total = timedelta()
    for amount, unit in parts:
        total += int(amount) * _LONG_DURATION_UNITS[unit.lower()]
    return total


def parse_relative_date(
    text: str, now: datetime, path: str = "<date>"
) -> datetime:
    """Parse an absolute date or a '<N> <unit> ago' phrase.

    The unit is picked by its first letter (seconds, minutes, hours, days,
    weeks). Months are rejected rather than read as minutes.

    Args:
        text: Date text as displayed by YouTube Music.
        now: Reference time for relative phrases.
        path: Path the text was read from, for error reporting.

    Raises:
        TypeMismatchError: If the text is neither form.
    """
    tokens = text.split()
    if len(tokens) >= 3 and tokens[-1] == "ago":
        amount, unit = tokens[-3], tokens[-2].lower()
        if not (amount.isascii() and amount.isdigit()):
            raise TypeMismatchError(path, "relative date", text)
        if unit.startswith("mo") or unit[0] not in _RELATIVE_UNITS:
            raise TypeMismatchError(path, "relative date", text)
        return now - int(amount) * _RELATIVE_UNITS[unit[0]]

    # Fields missing from the text come from the start of now's year
    default = now.replace(
        month=1, day=1, hour=0, minute=0, second=0, microsecond=0, tzinfo=None
    )
    try:
        parsed = dateutil_parser.parse(text, default=default)
    except (ValueError, OverflowError) as e:
        raise TypeMismatchError(path, "date", text) from e

    if parsed.tzinfo is None and now.tzinfo is not None:
        parsed = parsed.replace(tzinfo=now.tzinfo)
    return parsed


def parse_count(text: str, path: str = "<count>") -> int:
    """Parse the leading number of a localized count ('12,345 songs')."""
    # Split on ASCII space only: no-break spaces group digits
    token = text.strip().split(" ", 1)[0]
    digits = token.translate(_GROUP_SEPARATORS)
    if not (digits.isascii() and digits.isdigit()):
        raise TypeMismatchError(path, "count", text)
    return int(digits)


def is_explicit(badges: Any, path: str = "<badges>") -> bool:
    """Check a badge list for the explicit-content icon.

    An absent or empty list is not explicit.
    """
    if badges is None:
        return False
    return any(
        select_optional(badge, _BADGE_ICON_PATH) == EXPLICIT_BADGE_ICON
        for badge in as_array(badges, path)
    )


# ============================================================================
# SELECT + COERCE
# ============================================================================


def select_string(node: Any, path: str) -> str:
    return as_string(select(node, path), path)


def select_string_optional(node: Any, path: str) -> str | None:
    value = select_optional(node, path)
    return None if value is None else as_string(value, path)


def select_int(node: Any, path: str) -> int:
    return as_int(select(node, path), path)


def select_int_optional(node: Any, path: str) -> int | None:
    value = select_optional(node, path)
    return None if value is None else as_int(value, path)


def select_float_optional(node: Any, path: str) -> float | None:
    value = select_optional(node, path)
    return None if value is None else as_float(value, path)


def select_array(node: Any, path: str) -> list[Any]:
    return as_array(select(node, path), path)


def select_array_optional(node: Any, path: str) -> list[Any] | None:
    value = select_optional(node, path)
    return None if value is None else as_array(value, path)


def select_duration(node: Any, path: str) -> timedelta:
    return parse_duration(select_string(node, path), path)


def select_long_duration(node: Any, path: str) -> timedelta:
    return parse_long_duration(select_string(node, path), path)


def select_count(node: Any, path: str) -> int:
    return parse_count(select_string(node, path), path)


def select_is_explicit(node: Any, path: str) -> bool:
    return is_explicit(select_optional(node, path), path)


def select_thumbnails(node: Any, path: str) -> list[Thumbnail]:
    """Select a thumbnail list, ordered by ascending resolution.

    A missing list yields no thumbnails; entries without a url are skipped.
    """
    entries = select_array_optional(node, path)
    if not entries:
        return []

    thumbnails = []
    for i, entry in enumerate(entries):
        url = select_optional(entry, "url")
        if not isinstance(url, str):
            continue
        width = select_optional(entry, "width")
        height = select_optional(entry, "height")
        thumbnails.append(
            Thumbnail(
                url=url,
                width=0 if width is None else as_int(width, f"{path}[{i}].width"),
                height=0 if height is None else as_int(height, f"{path}[{i}].height"),
            )
        )
    return sorted(thumbnails, key=lambda t: t.width * t.height)


def select_radio(node: Any, playlist_path: str, video_path: str | None = None) -> Radio:
    return Radio(
        playlist_id=select_string(node, playlist_path),
        video_id=select_string_optional(node, video_path) if video_path else None,
    )


def select_radio_optional(
    node: Any, playlist_path: str, video_path: str | None = None
) -> Radio | None:
    if select_optional(node, playlist_path) is None:
        return None
    return select_radio(node, playlist_path, video_path)


def select_named_entity(node: Any, name_path: str, id_path: str) -> NamedEntity:
    return NamedEntity(
        name=select_string(node, name_path).strip(),
        id=select_string_optional(node, id_path),
    )


def select_named_entity_optional(
    node: Any, name_path: str, id_path: str
) -> NamedEntity | None:
    if select_optional(node, name_path) is None:
        return None
    return select_named_entity(node, name_path, id_path)
