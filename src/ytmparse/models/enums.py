"""Enumerations for ytmparse domain models."""

from enum import StrEnum


class EntityKind(StrEnum):
    """Kinds of entity the assemblers produce.

    Used to label assembly errors and to select an assembler from the CLI.
    """

    SONG = "song"
    ALBUM = "album"
    ARTIST = "artist"
    COMMUNITY_PLAYLIST = "community_playlist"
    PODCAST = "podcast"
    EPISODE = "episode"
    SUBSCRIPTION = "subscription"
    VIDEO = "video"
    AUDIO_STREAM = "audio_stream"
    VIDEO_STREAM = "video_stream"
    STREAM = "stream"
    STREAMING_DATA = "streaming_data"
    COMMUNITY_PLAYLIST_INFO = "community_playlist_info"
    ALBUM_INFO = "album_info"
    ARTIST_INFO = "artist_info"


class AlbumType(StrEnum):
    """Release subtype, read from the leading subtitle run."""

    ALBUM = "Album"
    EP = "EP"
    SINGLE = "Single"


class StreamKind(StrEnum):
    """Major MIME type of an adaptive format descriptor."""

    AUDIO = "audio"
    VIDEO = "video"


class BatchPolicy(StrEnum):
    """How list surfaces react to a malformed item.

    - FAIL_FAST: the first malformed item fails the whole list
    - ISOLATE: malformed items are collected as errors next to the good ones
    """

    FAIL_FAST = "fail_fast"
    ISOLATE = "isolate"
