"""Heuristics over subtitle run sequences.

Many renderers pack artists, separators and a trailing count, duration or
year into one ordered list of runs::

    ["Album", " • ", "Artist A", " & ", "Artist B", " • ", "2021"]

Where the trailing token sits depends on how many artist runs precede it
and on the release subtype. Each rule lives in its own predicate so a
schema change shows up as one failing predicate instead of a silently
shifted index.
"""

from __future__ import annotations

import re
from typing import Any

from ytmparse.lib.coercion import select_array
from ytmparse.lib.navigator import select_optional
from ytmparse.models.entities import NamedEntity
from ytmparse.models.enums import AlbumType

SEPARATOR_TEXTS = frozenset({",", "&", "•"})

# Index of the first artist run in the library album layout
# ["Album", " • ", artist, ...]
SUBTITLE_ARTISTS_START = 2

# Index of the release year in a labelled artist-page item, the same for
# every subtype: ["EP", " • ", "2021"]
ALBUM_YEAR_INDEX = 2

# An unlabelled item is a single whose subtitle is just the year
UNLABELLED_YEAR_OFFSET = -2

_RUN_TEXT = "text"
_RUN_BROWSE_ID = "navigationEndpoint.browseEndpoint.browseId"
_ARTIST_NAME_SPLIT_RE = re.compile(r"[,&•]")


def is_separator_run(run: Any) -> bool:
    """True for runs that only hold a separator glyph, or no text at all."""
    text = select_optional(run, _RUN_TEXT)
    if not isinstance(text, str):
        return True
    return text.strip() in SEPARATOR_TEXTS


def has_trailing_navigation(runs: list[Any]) -> bool:
    """True when the last run links somewhere.

    A linked last run is an artist; an unlinked one is a plain count or
    year token that has to be trimmed from the artist list.
    """
    if not runs:
        return False
    return select_optional(runs[-1], "navigationEndpoint") is not None


def has_subtype_label(text: str) -> bool:
    """True when the leading run names a release subtype."""
    return text.strip() in {t.value for t in AlbumType}


def detect_album_subtype(text: str) -> AlbumType:
    """Classify a release by its leading subtitle run.

    Anything that is not "Album" or "EP" is a single: the artist page lists
    singles with a bare year in that position.
    """
    label = text.strip()
    if label == AlbumType.EP:
        return AlbumType.EP
    if label == AlbumType.ALBUM:
        return AlbumType.ALBUM
    return AlbumType.SINGLE


def release_year_index(first_run_text: str) -> int:
    """Index of the release year in an artist-page subtitle."""
    if has_subtype_label(first_run_text):
        return ALBUM_YEAR_INDEX
    return ALBUM_YEAR_INDEX + UNLABELLED_YEAR_OFFSET


def artist_run_count(artists: list[NamedEntity]) -> int:
    """Number of runs the artists occupy, separators not counted.

    Unlinked artists ("Various Artists", "A, B & C") arrive as one combined
    run, so an unlinked first artist counts as a single run.
    """
    if artists and artists[0].id is None:
        return 1
    return len(artists)


def library_release_year_index(artists: list[NamedEntity]) -> int:
    """Index of the release year in a library album subtitle."""
    return SUBTITLE_ARTISTS_START + 2 * artist_run_count(artists)


def select_artists(
    node: Any, runs_path: str, start: int = 0, trim: int = 0
) -> list[NamedEntity]:
    """Build the artist list from a run sequence.

    Args:
        node: Tree containing the runs.
        runs_path: Path to the runs array.
        start: Number of leading runs to skip (subtype label, separator).
        trim: Number of trailing runs to drop (count, views, year).

    Raises:
        PathNotFoundError: If the runs array is absent.
        TypeMismatchError: If it is not an array.
    """
    runs = select_array(node, runs_path)
    artists = []
    for run in runs[start : max(len(runs) - trim, start)]:
        if is_separator_run(run):
            continue
        browse_id = select_optional(run, _RUN_BROWSE_ID)
        artists.append(
            NamedEntity(
                name=run["text"].strip(),
                id=browse_id if isinstance(browse_id, str) else None,
            )
        )
    return artists


def split_artist_names(text: str) -> list[str]:
    """Split a plain author string ("A, B & C") into artist names."""
    return [
        name.strip() for name in _ARTIST_NAME_SPLIT_RE.split(text) if name.strip()
    ]
