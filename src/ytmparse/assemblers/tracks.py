"""Assemblers for track lists: album pages, playlists, the watch queue and
the player response.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any

from ytmparse.assemblers.common import (
    MUSIC_THUMBNAILS,
    PANEL_VIDEO,
    RESPONSIVE,
    RUN_BROWSE_ID,
    RUN_TEXT,
    RUN_VIDEO_ID,
    assembling,
    flex_runs,
    select_name,
    select_track_duration,
)
from ytmparse.lib.coercion import (
    select_array,
    select_duration,
    select_int,
    select_int_optional,
    select_is_explicit,
    select_named_entity_optional,
    select_string,
    select_string_optional,
    select_thumbnails,
)
from ytmparse.lib.runs import select_artists, split_artist_names
from ytmparse.models.entities import NamedEntity, Song
from ytmparse.models.enums import EntityKind

# Flexible column holding the duration when the fixed column is absent
ALBUM_DURATION_FLEX = 3
PLAYLIST_DURATION_FLEX = 2

# Playlist items list title and artists before the album column
_PLAYLIST_ALBUM_MIN_FLEX = 2

# Queue byline: [artist, ..., " • ", album, " • ", year]
_QUEUE_TRAILING_RUNS = 3

_VIDEO_DETAILS = "videoDetails"


def assemble_album_track(item: Any) -> Song:
    """Assemble a track from an album page.

    Album tracks carry a track number and a play count but no album
    reference or artwork of their own.

    Raises:
        AssemblyError: If a required field is missing or malformed.
    """
    title = f"{flex_runs(0)}[0]"
    with assembling(EntityKind.SONG):
        return Song(
            name=select_name(item, f"{title}.{RUN_TEXT}"),
            id=select_string_optional(item, f"{title}.{RUN_VIDEO_ID}"),
            duration=select_track_duration(item, ALBUM_DURATION_FLEX),
            is_explicit=select_is_explicit(item, f"{RESPONSIVE}.badges"),
            plays_info=select_string_optional(item, f"{flex_runs(2)}[0].{RUN_TEXT}"),
            track_number=select_int_optional(
                item, f"{RESPONSIVE}.index.runs[0].{RUN_TEXT}"
            ),
        )


def assemble_playlist_track(item: Any) -> Song:
    """Assemble a track from a playlist page.

    The album, when listed, is the last flexible column.

    Raises:
        AssemblyError: If a required field is missing or malformed.
    """
    title = f"{flex_runs(0)}[0]"
    with assembling(EntityKind.SONG):
        columns = select_array(item, f"{RESPONSIVE}.flexColumns")
        album = None
        if len(columns) - 1 >= _PLAYLIST_ALBUM_MIN_FLEX:
            album_run = f"{flex_runs(len(columns) - 1)}[0]"
            album = select_named_entity_optional(
                item, f"{album_run}.{RUN_TEXT}", f"{album_run}.{RUN_BROWSE_ID}"
            )

        return Song(
            name=select_name(item, f"{title}.{RUN_TEXT}"),
            id=select_string_optional(item, f"{title}.{RUN_VIDEO_ID}"),
            artists=select_artists(item, flex_runs(1)),
            album=album,
            duration=select_track_duration(item, PLAYLIST_DURATION_FLEX),
            is_explicit=select_is_explicit(item, f"{RESPONSIVE}.badges"),
            thumbnails=select_thumbnails(item, f"{RESPONSIVE}.{MUSIC_THUMBNAILS}"),
        )


def assemble_queue_track(item: Any) -> Song:
    """Assemble a track from the watch queue (playlistPanelVideoRenderer).

    The album is read from the byline only when its run links to an album
    page; videos put a view count there instead.

    Raises:
        AssemblyError: If a required field is missing or malformed.
    """
    byline = f"{PANEL_VIDEO}.longBylineText.runs"
    with assembling(EntityKind.SONG):
        runs = select_array(item, byline)
        album = None
        album_index = len(runs) - _QUEUE_TRAILING_RUNS
        if album_index >= 0:
            album_run = f"{byline}[{album_index}]"
            album_id = select_string_optional(item, f"{album_run}.{RUN_BROWSE_ID}")
            if album_id is not None:
                album = NamedEntity(
                    name=select_name(item, f"{album_run}.{RUN_TEXT}"), id=album_id
                )

        return Song(
            name=select_name(item, f"{PANEL_VIDEO}.title.runs[0].{RUN_TEXT}"),
            id=select_string_optional(item, f"{PANEL_VIDEO}.{RUN_VIDEO_ID}"),
            artists=select_artists(item, byline, trim=_QUEUE_TRAILING_RUNS),
            album=album,
            duration=select_duration(
                item, f"{PANEL_VIDEO}.lengthText.runs[0].{RUN_TEXT}"
            ),
            is_explicit=select_is_explicit(item, f"{PANEL_VIDEO}.badges"),
            thumbnails=select_thumbnails(item, f"{PANEL_VIDEO}.thumbnail.thumbnails"),
        )


def assemble_player_song(response: Any) -> Song:
    """Assemble the playing song from a player response's ``videoDetails``.

    The author is a plain string ("A, B & C"). It is split into artists and
    the first one is linked to the uploading channel.

    Raises:
        AssemblyError: If a required field is missing or malformed.
    """
    with assembling(EntityKind.SONG):
        names = split_artist_names(select_string(response, f"{_VIDEO_DETAILS}.author"))
        channel_id = select_string_optional(response, f"{_VIDEO_DETAILS}.channelId")
        artists = [
            NamedEntity(name=name, id=channel_id if i == 0 else None)
            for i, name in enumerate(names)
        ]
        seconds = select_int(response, f"{_VIDEO_DETAILS}.lengthSeconds")
        return Song(
            name=select_name(response, f"{_VIDEO_DETAILS}.title"),
            id=select_string(response, f"{_VIDEO_DETAILS}.videoId"),
            artists=artists,
            duration=timedelta(seconds=seconds),
            thumbnails=select_thumbnails(
                response, f"{_VIDEO_DETAILS}.thumbnail.thumbnails"
            ),
        )
