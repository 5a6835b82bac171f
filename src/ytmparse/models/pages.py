"""Whole-page results: a header entity plus the shelves below it."""

from __future__ import annotations

from pydantic import Field

from ytmparse.models.entities import (
    Album,
    AlbumInfo,
    Artist,
    ArtistInfo,
    CommunityPlaylist,
    CommunityPlaylistInfo,
    EntityModel,
    Song,
    Video,
)


class PlaylistPage(EntityModel):
    """A playlist's details and the tracks loaded with the first page."""

    info: CommunityPlaylistInfo
    tracks: list[Song] = Field(default_factory=list)


class AlbumPage(EntityModel):
    """An album's details and its track list."""

    info: AlbumInfo
    tracks: list[Song] = Field(default_factory=list)


class ArtistPage(EntityModel):
    """An artist's details and the shelves of their page.

    A shelf the page does not show is an empty list.
    """

    info: ArtistInfo
    songs: list[Song] = Field(default_factory=list)
    albums: list[Album] = Field(default_factory=list)
    singles: list[Album] = Field(default_factory=list)
    videos: list[Video] = Field(default_factory=list)
    featured_on: list[CommunityPlaylist] = Field(default_factory=list)
    related: list[Artist] = Field(default_factory=list)
