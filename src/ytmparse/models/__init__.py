"""Data models for ytmparse.

Public API:
    Song, Album, Artist, CommunityPlaylist, Podcast, Episode,
    Subscription, Video, ArtistSearchResult - assembled entities
    CommunityPlaylistInfo, AlbumInfo, ArtistInfo - page headers
    PlaylistPage, AlbumPage, ArtistPage - header plus shelves
    AudioStream, VideoStream, StreamingData - stream descriptors
    BatchResult - outcome of isolated list assembly
"""

from ytmparse.models.entities import (
    Album,
    AlbumInfo,
    Artist,
    ArtistInfo,
    ArtistSearchResult,
    CommunityPlaylist,
    CommunityPlaylistInfo,
    Episode,
    NamedEntity,
    Podcast,
    Radio,
    Song,
    Subscription,
    Thumbnail,
    Video,
)
from ytmparse.models.enums import AlbumType, BatchPolicy, EntityKind, StreamKind
from ytmparse.models.pages import AlbumPage, ArtistPage, PlaylistPage
from ytmparse.models.results import BatchResult
from ytmparse.models.streams import (
    UNBOUNDED_DURATION,
    UNKNOWN_CONTENT_LENGTH,
    AudioStream,
    MediaContainer,
    RejectedStream,
    StreamingData,
    VideoStream,
)

__all__ = [
    "UNBOUNDED_DURATION",
    "UNKNOWN_CONTENT_LENGTH",
    "Album",
    "AlbumInfo",
    "AlbumPage",
    "AlbumType",
    "Artist",
    "ArtistInfo",
    "ArtistPage",
    "ArtistSearchResult",
    "AudioStream",
    "BatchPolicy",
    "BatchResult",
    "CommunityPlaylist",
    "CommunityPlaylistInfo",
    "EntityKind",
    "Episode",
    "MediaContainer",
    "NamedEntity",
    "PlaylistPage",
    "Podcast",
    "Radio",
    "RejectedStream",
    "Song",
    "StreamKind",
    "StreamingData",
    "Subscription",
    "Thumbnail",
    "Video",
    "VideoStream",
]
