"""Entity models produced by the assemblers.

These are the public output contract of ytmparse. Every model is frozen:
an assembled entity is a value, and assembling the same tree twice yields
two equal entities.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict, Field

from ytmparse.models.enums import AlbumType

__all__ = [
    "Album",
    "AlbumInfo",
    "Artist",
    "ArtistInfo",
    "ArtistSearchResult",
    "CommunityPlaylist",
    "CommunityPlaylistInfo",
    "Episode",
    "NamedEntity",
    "Podcast",
    "Radio",
    "Song",
    "Subscription",
    "Thumbnail",
    "Video",
]

YOUTUBE_MUSIC_URL = "https://music.youtube.com"


class EntityModel(BaseModel):
    """Base model for assembled entities."""

    model_config = ConfigDict(frozen=True)


class Thumbnail(EntityModel):
    """Thumbnail image reference."""

    url: str
    width: int = 0
    height: int = 0


class Radio(EntityModel):
    """Continuation descriptor for open-ended playback from a seed item."""

    playlist_id: str
    video_id: str | None = None


class NamedEntity(EntityModel):
    """Embedded reference to another entity (artist, album, creator, host).

    A missing id marks a synthetic reference, such as a playlist credited
    to the platform itself rather than to a channel.
    """

    name: str
    id: str | None = None


class Song(EntityModel):
    """A song or track, as listed on any surface.

    Only ``name`` is guaranteed; the other fields depend on the surface the
    song was assembled from.
    """

    name: str
    id: str | None = None
    artists: list[NamedEntity] = Field(default_factory=list)
    album: NamedEntity | None = None
    duration: timedelta | None = None
    is_explicit: bool = False
    plays_info: str | None = None
    track_number: int | None = None
    radio: Radio | None = None
    thumbnails: list[Thumbnail] = Field(default_factory=list)

    @property
    def url(self) -> str | None:
        """Watch URL on YouTube Music, if the song has an id."""
        return f"{YOUTUBE_MUSIC_URL}/watch?v={self.id}" if self.id else None

    @property
    def artist_display(self) -> str:
        """Artist names joined for display."""
        return ", ".join(a.name for a in self.artists) if self.artists else ""


class Album(EntityModel):
    """An album, EP or single."""

    name: str
    id: str
    artists: list[NamedEntity] = Field(default_factory=list)
    release_year: int | None = None
    is_single: bool = False
    is_ep: bool = False
    is_explicit: bool = False
    radio: Radio | None = None
    thumbnails: list[Thumbnail] = Field(default_factory=list)

    @property
    def album_type(self) -> AlbumType:
        """Release subtype derived from the single/EP flags."""
        if self.is_ep:
            return AlbumType.EP
        if self.is_single:
            return AlbumType.SINGLE
        return AlbumType.ALBUM


class Artist(EntityModel):
    """An artist channel."""

    name: str
    id: str
    song_count: int | None = None
    subscribers_info: str | None = None
    radio: Radio | None = None
    thumbnails: list[Thumbnail] = Field(default_factory=list)

    @property
    def url(self) -> str:
        """Channel URL on YouTube Music."""
        return f"{YOUTUBE_MUSIC_URL}/channel/{self.id}"


class CommunityPlaylist(EntityModel):
    """A user- or platform-curated playlist."""

    name: str
    id: str
    creator: NamedEntity
    song_count: int | None = None
    radio: Radio | None = None
    thumbnails: list[Thumbnail] = Field(default_factory=list)

    @property
    def url(self) -> str:
        """Playlist URL on YouTube Music."""
        return f"{YOUTUBE_MUSIC_URL}/playlist?list={self.id}"


class Podcast(EntityModel):
    """A podcast show."""

    name: str
    id: str
    host: NamedEntity
    thumbnails: list[Thumbnail] = Field(default_factory=list)


class Episode(EntityModel):
    """A podcast episode."""

    name: str
    id: str
    podcast: NamedEntity | None = None
    released_at: datetime | None = None
    duration_info: str | None = None
    is_likes_allowed: bool = False
    thumbnails: list[Thumbnail] = Field(default_factory=list)

    @property
    def url(self) -> str:
        """Watch URL on YouTube Music."""
        return f"{YOUTUBE_MUSIC_URL}/watch?v={self.id}"


class Subscription(EntityModel):
    """A subscribed channel from the library."""

    name: str
    id: str
    subscribers_info: str
    radio: Radio | None = None
    thumbnails: list[Thumbnail] = Field(default_factory=list)


class Video(EntityModel):
    """A music video, as listed on an artist page."""

    name: str
    id: str
    artists: list[NamedEntity] = Field(default_factory=list)
    views_info: str
    thumbnails: list[Thumbnail] = Field(default_factory=list)


class ArtistSearchResult(EntityModel):
    """An artist, as listed in artist search results."""

    name: str
    id: str
    subscribers_info: str
    radio: Radio
    thumbnails: list[Thumbnail] = Field(default_factory=list)


# ============================================================================
# PAGE HEADERS
# ============================================================================


class CommunityPlaylistInfo(EntityModel):
    """Details from the header of a playlist page.

    An infinite playlist (a mix or radio) has no song count, duration or
    view count.
    """

    name: str
    id: str
    creator: NamedEntity
    description: str | None = None
    views_info: str | None = None
    duration: timedelta | None = None
    song_count: int | None = None
    creation_year: int | None = None
    is_infinite: bool = False
    thumbnails: list[Thumbnail] = Field(default_factory=list)


class AlbumInfo(EntityModel):
    """Details from the header of an album page."""

    name: str
    id: str
    artists: list[NamedEntity] = Field(default_factory=list)
    description: str | None = None
    release_year: int | None = None
    is_single: bool = False
    is_ep: bool = False
    is_explicit: bool = False
    song_count: int | None = None
    duration: timedelta | None = None
    thumbnails: list[Thumbnail] = Field(default_factory=list)


class ArtistInfo(EntityModel):
    """Details from the header of an artist page."""

    name: str
    id: str
    description: str | None = None
    subscribers_info: str | None = None
    views_info: str | None = None
    radio: Radio | None = None
    thumbnails: list[Thumbnail] = Field(default_factory=list)

    @property
    def url(self) -> str:
        """Channel URL on YouTube Music."""
        return f"{YOUTUBE_MUSIC_URL}/channel/{self.id}"
