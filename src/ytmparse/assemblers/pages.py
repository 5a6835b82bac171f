"""Assemblers for page headers and shelf lookup on whole browse responses.

Unlike the item assemblers these take the full response of a playlist,
album or artist page. The shelves below a header are assembled item by
item with the list assemblers; ``find_carousel`` locates them.
"""

from __future__ import annotations

from collections.abc import Collection
from datetime import timedelta
from typing import Any

from ytmparse.assemblers.common import (
    MUSIC_THUMBNAILS,
    RUN_BROWSE_ID,
    RUN_TEXT,
    assembling,
    select_name,
)
from ytmparse.assemblers.library import DEFAULT_CREATOR_NAME
from ytmparse.lib.coercion import (
    select_array_optional,
    select_count,
    select_is_explicit,
    select_long_duration,
    select_named_entity,
    select_radio_optional,
    select_string,
    select_string_optional,
    select_thumbnails,
)
from ytmparse.lib.navigator import find_all_by_key, select_optional
from ytmparse.lib.runs import detect_album_subtype, select_artists
from ytmparse.models.entities import (
    AlbumInfo,
    ArtistInfo,
    CommunityPlaylistInfo,
    NamedEntity,
)
from ytmparse.models.enums import AlbumType, EntityKind

# Carousel titles on an artist page, lower-cased
ARTIST_ALBUMS_TITLES = frozenset({"albums"})
ARTIST_SINGLES_TITLES = frozenset({"singles", "singles & eps"})
ARTIST_VIDEOS_TITLES = frozenset({"videos"})
ARTIST_FEATURED_ON_TITLES = frozenset({"featured on"})
ARTIST_RELATED_TITLES = frozenset({"fans might also like"})

CAROUSEL = "musicCarouselShelfRenderer"
CAROUSEL_TITLE = (
    f"header.musicCarouselShelfBasicHeaderRenderer.title.runs[0].{RUN_TEXT}"
)

# Playlist stats: ["<n> views", " • ", "<n> songs", " • ", "<total>"]
# The view count and its separator are left out on small playlists
_STATS_VIEWS_MIN_RUNS = 4
_STATS_VIEWS_RUNS = 2

_HEADER = "..musicResponsiveHeaderRenderer"
_HEADER_TITLE = f"{_HEADER}.title.runs[0].{RUN_TEXT}"
_HEADER_DESCRIPTION = (
    f"{_HEADER}.description.musicDescriptionShelfRenderer.description.runs"
)
_HEADER_SUBTITLE = f"{_HEADER}.subtitle.runs"
_HEADER_STATS = f"{_HEADER}.secondSubtitle.runs"
_HEADER_STRAPLINE = f"{_HEADER}.straplineTextOne.runs"
_HEADER_PLAYLIST_ID = (
    f"{_HEADER}.buttons..musicPlayButtonRenderer.playNavigationEndpoint..playlistId"
)

_FACEPILE = f"{_HEADER}.facepile.avatarStackViewModel"
_FACEPILE_NAME = f"{_FACEPILE}.text.content"
_FACEPILE_BROWSE_ID = (
    f"{_FACEPILE}.rendererContext.commandContext.onTap.innertubeCommand"
    ".browseEndpoint.browseId"
)

_ARTIST_HEADER = "header.musicImmersiveHeaderRenderer"
_ARTIST_SUBSCRIBE = f"{_ARTIST_HEADER}.subscriptionButton.subscribeButtonRenderer"
_ARTIST_RADIO = (
    f"{_ARTIST_HEADER}.startRadioButton.buttonRenderer"
    ".navigationEndpoint.watchPlaylistEndpoint.playlistId"
)
_DESCRIPTION_SHELF = "..musicDescriptionShelfRenderer"


def _joined_text(node: Any, runs_path: str) -> str | None:
    runs = select_array_optional(node, runs_path)
    if not runs:
        return None
    return "".join(
        select_string(node, f"{runs_path}[{i}].{RUN_TEXT}") for i in range(len(runs))
    )


def _trailing_year(node: Any, runs_path: str) -> int | None:
    """Year in the last subtitle run, if that run is a plain number."""
    runs = select_array_optional(node, runs_path)
    if not runs:
        return None
    text = select_string(node, f"{runs_path}[{len(runs) - 1}].{RUN_TEXT}").strip()
    return int(text) if text.isascii() and text.isdigit() else None


def find_carousel(response: Any, titles: Collection[str]) -> dict[str, Any] | None:
    """Find the first carousel whose header title is one of ``titles``.

    Titles are compared case-insensitively; they depend on the response
    language.
    """
    for carousel in find_all_by_key(response, CAROUSEL):
        title = select_optional(carousel, CAROUSEL_TITLE)
        if isinstance(title, str) and title.strip().lower() in titles:
            return carousel
    return None


# ============================================================================
# PLAYLIST AND ALBUM HEADERS
# ============================================================================


def _playlist_creator(response: Any, default_creator: str) -> NamedEntity:
    strapline = f"{_HEADER_STRAPLINE}[0]"
    if select_optional(response, strapline) is not None:
        return select_named_entity(
            response, f"{strapline}.{RUN_TEXT}", f"{strapline}.{RUN_BROWSE_ID}"
        )
    if select_optional(response, _FACEPILE_NAME) is not None:
        return select_named_entity(response, _FACEPILE_NAME, _FACEPILE_BROWSE_ID)
    return NamedEntity(name=default_creator)


def assemble_community_playlist_info(
    response: Any, default_creator: str = DEFAULT_CREATOR_NAME
) -> CommunityPlaylistInfo:
    """Assemble the header of a playlist page.

    The stats line reads ``[views, " • ", songs, " • ", total]``, with the
    views dropped on small playlists. A header without a stats line
    belongs to an infinite playlist.

    Args:
        response: Browse response of the playlist page.
        default_creator: Creator name for playlists whose header credits
            no channel.

    Raises:
        AssemblyError: If a required field is missing or malformed.
    """
    with assembling(EntityKind.COMMUNITY_PLAYLIST_INFO):
        stats = select_array_optional(response, _HEADER_STATS)
        views_info = None
        song_count = None
        duration = None
        if stats:
            offset = _STATS_VIEWS_RUNS if len(stats) >= _STATS_VIEWS_MIN_RUNS else 0
            if offset:
                views_info = select_string(response, f"{_HEADER_STATS}[0].{RUN_TEXT}")
            song_count = select_count(
                response, f"{_HEADER_STATS}[{offset}].{RUN_TEXT}"
            )
            total = offset + 2
            if len(stats) > total:
                duration = select_long_duration(
                    response, f"{_HEADER_STATS}[{total}].{RUN_TEXT}"
                )

        return CommunityPlaylistInfo(
            name=select_name(response, _HEADER_TITLE),
            id=select_string(response, _HEADER_PLAYLIST_ID),
            creator=_playlist_creator(response, default_creator),
            description=_joined_text(response, _HEADER_DESCRIPTION),
            views_info=views_info,
            duration=duration,
            song_count=song_count,
            creation_year=_trailing_year(response, _HEADER_SUBTITLE),
            is_infinite=not stats,
            thumbnails=select_thumbnails(response, f"{_HEADER}.{MUSIC_THUMBNAILS}"),
        )


def assemble_album_info(response: Any) -> AlbumInfo:
    """Assemble the header of an album page.

    The subtitle is ``[subtype, " • ", year]`` and the stats line
    ``["<n> songs", " • ", total]``; a one-run stats line holds only the
    total.

    Raises:
        AssemblyError: If a required field is missing or malformed.
    """
    with assembling(EntityKind.ALBUM_INFO):
        subtype = detect_album_subtype(
            select_string(response, f"{_HEADER_SUBTITLE}[0].{RUN_TEXT}")
        )

        stats = select_array_optional(response, _HEADER_STATS) or []
        song_count = None
        duration: timedelta | None = None
        if len(stats) > 1:
            song_count = select_count(response, f"{_HEADER_STATS}[0].{RUN_TEXT}")
            duration = select_long_duration(
                response, f"{_HEADER_STATS}[2].{RUN_TEXT}"
            )
        elif stats:
            duration = select_long_duration(
                response, f"{_HEADER_STATS}[0].{RUN_TEXT}"
            )

        artists = []
        if select_optional(response, _HEADER_STRAPLINE) is not None:
            artists = select_artists(response, _HEADER_STRAPLINE)

        return AlbumInfo(
            name=select_name(response, _HEADER_TITLE),
            id=select_string(response, _HEADER_PLAYLIST_ID),
            artists=artists,
            description=_joined_text(response, _HEADER_DESCRIPTION),
            release_year=_trailing_year(response, _HEADER_SUBTITLE),
            is_single=subtype == AlbumType.SINGLE,
            is_ep=subtype == AlbumType.EP,
            is_explicit=select_is_explicit(response, f"{_HEADER}.subtitleBadge"),
            song_count=song_count,
            duration=duration,
            thumbnails=select_thumbnails(response, f"{_HEADER}.{MUSIC_THUMBNAILS}"),
        )


# ============================================================================
# ARTIST HEADER
# ============================================================================


def assemble_artist_info(response: Any) -> ArtistInfo:
    """Assemble the header of an artist page.

    The description sits in the header on some pages and in a description
    shelf below it on others; the shelf also carries the view count.

    Raises:
        AssemblyError: If a required field is missing or malformed.
    """
    with assembling(EntityKind.ARTIST_INFO):
        description = _joined_text(response, f"{_ARTIST_HEADER}.description.runs")
        if description is None:
            description = _joined_text(
                response, f"{_DESCRIPTION_SHELF}.description.runs"
            )

        return ArtistInfo(
            name=select_name(response, f"{_ARTIST_HEADER}.title.runs[0].{RUN_TEXT}"),
            id=select_string(response, f"{_ARTIST_SUBSCRIBE}.channelId"),
            description=description,
            subscribers_info=select_string_optional(
                response, f"{_ARTIST_SUBSCRIBE}.subscriberCountText.runs[0].{RUN_TEXT}"
            ),
            views_info=select_string_optional(
                response, f"{_DESCRIPTION_SHELF}.subheader.runs[0].{RUN_TEXT}"
            ),
            radio=select_radio_optional(response, _ARTIST_RADIO),
            thumbnails=select_thumbnails(
                response, f"{_ARTIST_HEADER}.{MUSIC_THUMBNAILS}"
            ),
        )
