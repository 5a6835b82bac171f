"""Assemblers for the shelves of an artist page."""

from __future__ import annotations

from typing import Any

from ytmparse.assemblers.common import (
    MUSIC_THUMBNAILS,
    RESPONSIVE,
    RUN_BROWSE_ID,
    RUN_TEXT,
    RUN_VIDEO_ID,
    TWO_ROW,
    TWO_ROW_THUMBNAILS,
    assembling,
    flex_runs,
    select_name,
)
from ytmparse.lib.coercion import (
    select_int,
    select_is_explicit,
    select_named_entity,
    select_string,
    select_thumbnails,
)
from ytmparse.lib.runs import detect_album_subtype, release_year_index, select_artists
from ytmparse.models.entities import Album, Artist, CommunityPlaylist, Song, Video
from ytmparse.models.enums import AlbumType, EntityKind

# Artist video subtitle: [artist, ..., " • ", "<n> views"]
_VIDEO_TRAILING_RUNS = 2

_TITLE_TEXT = f"{TWO_ROW}.title.runs[0].{RUN_TEXT}"
_SUBTITLE_RUNS = f"{TWO_ROW}.subtitle.runs"
_TWO_ROW_BROWSE_ID = f"{TWO_ROW}.{RUN_BROWSE_ID}"


def assemble_artist_song(item: Any) -> Song:
    """Assemble a song from the artist's top songs shelf.

    Columns are laid out as title, artists, plays, album.

    Raises:
        AssemblyError: If a required field is missing or malformed.
    """
    title = f"{flex_runs(0)}[0]"
    album = f"{flex_runs(3)}[0]"
    with assembling(EntityKind.SONG):
        return Song(
            name=select_name(item, f"{title}.{RUN_TEXT}"),
            id=select_string(item, f"{title}.{RUN_VIDEO_ID}"),
            artists=select_artists(item, flex_runs(1)),
            album=select_named_entity(
                item, f"{album}.{RUN_TEXT}", f"{album}.{RUN_BROWSE_ID}"
            ),
            plays_info=select_string(item, f"{flex_runs(2)}[0].{RUN_TEXT}"),
            is_explicit=select_is_explicit(item, f"{RESPONSIVE}.badges"),
            thumbnails=select_thumbnails(item, f"{RESPONSIVE}.{MUSIC_THUMBNAILS}"),
        )


def assemble_artist_album(item: Any) -> Album:
    """Assemble a release from the albums or singles shelf.

    The subtitle is ``[subtype, " • ", year]`` for albums and EPs and just
    ``[year]`` for singles.

    Raises:
        AssemblyError: If a required field is missing or malformed.
    """
    with assembling(EntityKind.ALBUM):
        label = select_string(item, f"{_SUBTITLE_RUNS}[0].{RUN_TEXT}")
        subtype = detect_album_subtype(label)
        year_path = f"{_SUBTITLE_RUNS}[{release_year_index(label)}].{RUN_TEXT}"
        return Album(
            name=select_name(item, _TITLE_TEXT),
            id=select_string(item, f"{TWO_ROW}.title.runs[0].{RUN_BROWSE_ID}"),
            release_year=select_int(item, year_path),
            is_single=subtype == AlbumType.SINGLE,
            is_ep=subtype == AlbumType.EP,
            is_explicit=select_is_explicit(item, f"{TWO_ROW}.subtitleBadges"),
            thumbnails=select_thumbnails(item, f"{TWO_ROW}.{TWO_ROW_THUMBNAILS}"),
        )


def assemble_artist_video(item: Any) -> Video:
    """Assemble a music video from the videos shelf.

    The view count follows the artists, two runs per artist.

    Raises:
        AssemblyError: If a required field is missing or malformed.
    """
    with assembling(EntityKind.VIDEO):
        artists = select_artists(item, _SUBTITLE_RUNS, trim=_VIDEO_TRAILING_RUNS)
        views_path = f"{_SUBTITLE_RUNS}[{len(artists) * 2}].{RUN_TEXT}"
        return Video(
            name=select_name(item, _TITLE_TEXT),
            id=select_string(item, f"{TWO_ROW}.{RUN_VIDEO_ID}"),
            artists=artists,
            views_info=select_string(item, views_path),
            thumbnails=select_thumbnails(item, f"{TWO_ROW}.{TWO_ROW_THUMBNAILS}"),
        )


def assemble_featured_playlist(item: Any) -> CommunityPlaylist:
    """Assemble a playlist from the "Featured on" shelf.

    The subtitle is ``["Playlist", " • ", creator]``.

    Raises:
        AssemblyError: If a required field is missing or malformed.
    """
    creator = f"{_SUBTITLE_RUNS}[2]"
    with assembling(EntityKind.COMMUNITY_PLAYLIST):
        return CommunityPlaylist(
            name=select_name(item, _TITLE_TEXT),
            id=select_string(item, _TWO_ROW_BROWSE_ID),
            creator=select_named_entity(
                item, f"{creator}.{RUN_TEXT}", f"{creator}.{RUN_BROWSE_ID}"
            ),
            thumbnails=select_thumbnails(item, f"{TWO_ROW}.{TWO_ROW_THUMBNAILS}"),
        )


def assemble_related_artist(item: Any) -> Artist:
    """Assemble an artist from the "Fans might also like" shelf.

    Raises:
        AssemblyError: If a required field is missing or malformed.
    """
    with assembling(EntityKind.ARTIST):
        return Artist(
            name=select_name(item, _TITLE_TEXT),
            id=select_string(item, _TWO_ROW_BROWSE_ID),
            subscribers_info=select_string(item, f"{_SUBTITLE_RUNS}[0].{RUN_TEXT}"),
            thumbnails=select_thumbnails(item, f"{TWO_ROW}.{TWO_ROW_THUMBNAILS}"),
        )
