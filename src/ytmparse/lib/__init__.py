"""Tree navigation, value coercion and run heuristics.

Available via `from ytmparse.lib import ...` for callers that assemble
their own renderers. These helpers are pure and never log.
"""

from ytmparse.lib.coercion import (
    as_array,
    as_bool,
    as_float,
    as_int,
    as_object,
    as_string,
    is_explicit,
    parse_count,
    parse_duration,
    parse_relative_date,
    select_thumbnails,
)
from ytmparse.lib.navigator import find_all_by_key, parse_path, select, select_optional
from ytmparse.lib.runs import (
    detect_album_subtype,
    has_trailing_navigation,
    is_separator_run,
    select_artists,
)

__all__ = [
    "as_array",
    "as_bool",
    "as_float",
    "as_int",
    "as_object",
    "as_string",
    "detect_album_subtype",
    "find_all_by_key",
    "has_trailing_navigation",
    "is_explicit",
    "is_separator_run",
    "parse_count",
    "parse_duration",
    "parse_path",
    "parse_relative_date",
    "select",
    "select_artists",
    "select_optional",
    "select_thumbnails",
]
