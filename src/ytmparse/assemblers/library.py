"""Assemblers for the library surfaces.

Each function takes one list item (the object wrapping the renderer, as it
appears in the surface's ``contents`` or ``items`` array) and returns a
fully populated entity, or raises AssemblyError.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from ytmparse.assemblers.common import (
    MULTI_ROW,
    MUSIC_THUMBNAILS,
    PLAY_BUTTON_PLAYLIST_ID,
    RESPONSIVE,
    RUN_BROWSE_ID,
    RUN_TEXT,
    RUN_VIDEO_ID,
    TWO_ROW,
    TWO_ROW_THUMBNAILS,
    assembling,
    flex_runs,
    menu_playlist_id,
    menu_watch_endpoint,
    select_name,
    select_track_duration,
)
from ytmparse.lib.coercion import (
    as_bool,
    parse_relative_date,
    select_array,
    select_count,
    select_int,
    select_is_explicit,
    select_named_entity,
    select_named_entity_optional,
    select_radio_optional,
    select_string,
    select_string_optional,
    select_thumbnails,
)
from ytmparse.lib.navigator import find_all_by_key, select_optional
from ytmparse.lib.runs import (
    SUBTITLE_ARTISTS_START,
    detect_album_subtype,
    has_trailing_navigation,
    library_release_year_index,
    select_artists,
)
from ytmparse.models.entities import (
    Album,
    Artist,
    CommunityPlaylist,
    Episode,
    NamedEntity,
    Podcast,
    Song,
    Subscription,
)
from ytmparse.models.enums import AlbumType, EntityKind

DEFAULT_CREATOR_NAME = "YouTube Music"

# Library artist browse ids carry this prefix in front of the channel id
LIBRARY_ARTIST_PREFIX = "MPLA"

# Playlist subtitle layout: [creator, " • ", "<n> songs"]
_PLAYLIST_COUNT_MIN_RUNS = 3

_LIKES_ALLOWED_PATH = f"{MULTI_ROW}.menu..likeButtonRenderer.likesAllowed"


def _subtitle_runs(renderer: str) -> str:
    return f"{renderer}.subtitle.runs"


def _title_text(renderer: str) -> str:
    return f"{renderer}.title.runs[0].{RUN_TEXT}"


# ============================================================================
# RESPONSIVE LIST ITEMS
# ============================================================================


def assemble_library_song(item: Any) -> Song:
    """Assemble a liked or uploaded song from a responsive list item.

    Columns are laid out as title, artists, album; the duration sits in
    the fixed column.

    Raises:
        AssemblyError: If a required field is missing or malformed.
    """
    title = f"{flex_runs(0)}[0]"
    watch = menu_watch_endpoint(RESPONSIVE, 0)
    with assembling(EntityKind.SONG):
        return Song(
            name=select_name(item, f"{title}.{RUN_TEXT}"),
            id=select_string(item, f"{title}.{RUN_VIDEO_ID}"),
            artists=select_artists(item, flex_runs(1)),
            album=select_named_entity_optional(
                item,
                f"{flex_runs(2)}[0].{RUN_TEXT}",
                f"{flex_runs(2)}[0].{RUN_BROWSE_ID}",
            ),
            duration=select_track_duration(item),
            is_explicit=select_is_explicit(item, f"{RESPONSIVE}.badges"),
            radio=select_radio_optional(
                item, f"{watch}.playlistId", f"{watch}.videoId"
            ),
            thumbnails=select_thumbnails(item, f"{RESPONSIVE}.{MUSIC_THUMBNAILS}"),
        )


def assemble_library_artist(item: Any) -> Artist:
    """Assemble an artist from the library's artist list.

    The browse id is prefixed with ``MPLA``; the prefix is stripped to get
    the channel id.

    Raises:
        AssemblyError: If a required field is missing or malformed.
    """
    with assembling(EntityKind.ARTIST):
        browse_id = select_string(item, f"{RESPONSIVE}.{RUN_BROWSE_ID}")
        return Artist(
            name=select_name(item, f"{flex_runs(0)}[0].{RUN_TEXT}"),
            id=browse_id.removeprefix(LIBRARY_ARTIST_PREFIX),
            song_count=select_count(item, f"{flex_runs(1)}[0].{RUN_TEXT}"),
            radio=select_radio_optional(item, menu_playlist_id(RESPONSIVE, 1)),
            thumbnails=select_thumbnails(item, f"{RESPONSIVE}.{MUSIC_THUMBNAILS}"),
        )


def assemble_library_subscription(item: Any) -> Subscription:
    """Assemble a subscribed channel.

    Raises:
        AssemblyError: If a required field is missing or malformed.
    """
    with assembling(EntityKind.SUBSCRIPTION):
        return Subscription(
            name=select_name(item, f"{flex_runs(0)}[0].{RUN_TEXT}"),
            id=select_string(item, f"{RESPONSIVE}.{RUN_BROWSE_ID}"),
            subscribers_info=select_string(item, f"{flex_runs(1)}[0].{RUN_TEXT}"),
            radio=select_radio_optional(item, menu_playlist_id(RESPONSIVE, 1)),
            thumbnails=select_thumbnails(item, f"{RESPONSIVE}.{MUSIC_THUMBNAILS}"),
        )


# ============================================================================
# TWO-ROW GRID ITEMS
# ============================================================================


def assemble_library_album(item: Any) -> Album:
    """Assemble a saved album from a two-row grid item.

    The subtitle reads ``[subtype, " • ", artist, ..., " • ", year]``. The
    year is only taken when it lands on the last run; otherwise the layout
    is not the one expected and the year is left unset.

    Raises:
        AssemblyError: If a required field is missing or malformed.
    """
    runs_path = _subtitle_runs(TWO_ROW)
    with assembling(EntityKind.ALBUM):
        runs = select_array(item, runs_path)
        trim = 0 if has_trailing_navigation(runs) else 1
        artists = select_artists(
            item, runs_path, start=SUBTITLE_ARTISTS_START, trim=trim
        )

        year_index = library_release_year_index(artists)
        release_year = None
        if year_index == len(runs) - 1:
            release_year = select_int(item, f"{runs_path}[{year_index}].{RUN_TEXT}")

        subtype_text = select_string(item, f"{runs_path}[0].{RUN_TEXT}")
        subtype = detect_album_subtype(subtype_text)
        return Album(
            name=select_name(item, _title_text(TWO_ROW)),
            id=select_string(item, menu_playlist_id(TWO_ROW, 0)),
            artists=artists,
            release_year=release_year,
            is_single=subtype == AlbumType.SINGLE,
            is_ep=subtype == AlbumType.EP,
            is_explicit=select_is_explicit(item, f"{TWO_ROW}.subtitleBadges"),
            radio=select_radio_optional(item, menu_playlist_id(TWO_ROW, 1)),
            thumbnails=select_thumbnails(item, f"{TWO_ROW}.{TWO_ROW_THUMBNAILS}"),
        )


def assemble_library_community_playlist(
    item: Any, default_creator: str = DEFAULT_CREATOR_NAME
) -> CommunityPlaylist:
    """Assemble a saved playlist from a two-row grid item.

    Args:
        item: Grid item wrapping a musicTwoRowItemRenderer.
        default_creator: Name credited when the creator run does not link
            to a channel (platform-made playlists).

    Raises:
        AssemblyError: If a required field is missing or malformed.
    """
    runs_path = _subtitle_runs(TWO_ROW)
    with assembling(EntityKind.COMMUNITY_PLAYLIST):
        runs = select_array(item, runs_path)
        creator_id = select_string_optional(item, f"{runs_path}[0].{RUN_BROWSE_ID}")
        if creator_id is None:
            creator = NamedEntity(name=default_creator)
        else:
            creator = NamedEntity(
                name=select_name(item, f"{runs_path}[0].{RUN_TEXT}"), id=creator_id
            )

        song_count = None
        if len(runs) >= _PLAYLIST_COUNT_MIN_RUNS:
            song_count = select_count(item, f"{runs_path}[{len(runs) - 1}].{RUN_TEXT}")

        return CommunityPlaylist(
            name=select_name(item, _title_text(TWO_ROW)),
            id=select_string(item, f"{TWO_ROW}.{PLAY_BUTTON_PLAYLIST_ID}"),
            creator=creator,
            song_count=song_count,
            radio=select_radio_optional(item, menu_playlist_id(TWO_ROW, 1)),
            thumbnails=select_thumbnails(item, f"{TWO_ROW}.{TWO_ROW_THUMBNAILS}"),
        )


def assemble_library_podcast(item: Any) -> Podcast:
    """Assemble a saved podcast show.

    Raises:
        AssemblyError: If a required field is missing or malformed.
    """
    host = f"{_subtitle_runs(TWO_ROW)}[0]"
    with assembling(EntityKind.PODCAST):
        return Podcast(
            name=select_name(item, _title_text(TWO_ROW)),
            id=select_string(item, f"{TWO_ROW}.{PLAY_BUTTON_PLAYLIST_ID}"),
            host=select_named_entity(
                item, f"{host}.{RUN_TEXT}", f"{host}.{RUN_BROWSE_ID}"
            ),
            thumbnails=select_thumbnails(item, f"{TWO_ROW}.{TWO_ROW_THUMBNAILS}"),
        )


# ============================================================================
# MULTI-ROW ITEMS
# ============================================================================


def assemble_episode(item: Any, now: datetime) -> Episode:
    """Assemble a podcast episode from a multi-row list item.

    The subtitle is either ``[duration]`` or ``[date, " • ", duration]``.
    Relative dates ("3 days ago") are resolved against ``now``.

    Args:
        item: List item wrapping a musicMultiRowListItemRenderer.
        now: Reference time for relative release dates.

    Raises:
        AssemblyError: If a required field is missing or malformed.
    """
    runs_path = _subtitle_runs(MULTI_ROW)
    podcast = f"{MULTI_ROW}.secondTitle.runs[0]"
    with assembling(EntityKind.EPISODE):
        runs = select_array(item, runs_path)
        released_at = None
        duration_info = select_string_optional(item, f"{runs_path}[0].{RUN_TEXT}")
        if len(runs) > 1:
            date_path = f"{runs_path}[0].{RUN_TEXT}"
            released_at = parse_relative_date(
                select_string(item, date_path), now, date_path
            )
            duration_info = select_string_optional(item, f"{runs_path}[2].{RUN_TEXT}")

        return Episode(
            name=select_name(item, _title_text(MULTI_ROW)),
            id=select_string(item, f"{MULTI_ROW}.onTap.watchEndpoint.videoId"),
            podcast=select_named_entity_optional(
                item, f"{podcast}.{RUN_TEXT}", f"{podcast}.{RUN_BROWSE_ID}"
            ),
            released_at=released_at,
            duration_info=duration_info,
            is_likes_allowed=_likes_allowed(item),
            thumbnails=select_thumbnails(item, f"{MULTI_ROW}.{MUSIC_THUMBNAILS}"),
        )


def _likes_allowed(item: Any) -> bool:
    # The like button sits at a varying depth inside the item's menu
    menu = select_optional(item, f"{MULTI_ROW}.menu")
    for button in find_all_by_key(menu, "likeButtonRenderer"):
        allowed = select_optional(button, "likesAllowed")
        if allowed is not None:
            return as_bool(allowed, _LIKES_ALLOWED_PATH)
    return False
