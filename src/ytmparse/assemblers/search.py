"""Assemblers for search result shelves."""

from __future__ import annotations

from typing import Any

from ytmparse.assemblers.common import (
    MUSIC_THUMBNAILS,
    RESPONSIVE,
    RUN_BROWSE_ID,
    RUN_TEXT,
    assembling,
    flex_runs,
    menu_playlist_id,
    select_name,
)
from ytmparse.lib.coercion import select_radio, select_string, select_thumbnails
from ytmparse.models.entities import ArtistSearchResult
from ytmparse.models.enums import EntityKind

# Search params restricting results to artists
ARTISTS_SEARCH_PARAMS = "EgWKAQIgAWoMEA4QChADEAQQCRAF"

# Artist result menu: shuffle, then radio
ARTIST_RADIO_MENU_ITEM = 1

# Artist result details: ["Artist", " • ", "<n> subscribers"]
_SUBSCRIBERS_RUN = 2


def assemble_artist_search_result(item: Any) -> ArtistSearchResult:
    """Assemble an artist from the artists search shelf.

    Raises:
        AssemblyError: If a required field is missing or malformed.
    """
    with assembling(EntityKind.ARTIST):
        return ArtistSearchResult(
            name=select_name(item, f"{flex_runs(0)}[0].{RUN_TEXT}"),
            id=select_string(item, f"{RESPONSIVE}.{RUN_BROWSE_ID}"),
            subscribers_info=select_string(
                item, f"{flex_runs(1)}[{_SUBSCRIBERS_RUN}].{RUN_TEXT}"
            ),
            radio=select_radio(
                item, menu_playlist_id(RESPONSIVE, ARTIST_RADIO_MENU_ITEM)
            ),
            thumbnails=select_thumbnails(item, f"{RESPONSIVE}.{MUSIC_THUMBNAILS}"),
        )
