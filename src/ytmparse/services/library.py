"""Library service: fetches library surfaces, pages and search results and
assembles their entities.
"""

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from functools import partial
from typing import Any, TypeVar

from ytmparse.assemblers.artist import (
    assemble_artist_album,
    assemble_artist_song,
    assemble_artist_video,
    assemble_featured_playlist,
    assemble_related_artist,
)
from ytmparse.assemblers.batch import (
    ItemFilter,
    assemble_all,
    assemble_each,
    has_key,
    has_play_button,
)
from ytmparse.assemblers.common import MULTI_ROW, RESPONSIVE, TWO_ROW
from ytmparse.assemblers.library import (
    LIBRARY_ARTIST_PREFIX,
    assemble_episode,
    assemble_library_album,
    assemble_library_artist,
    assemble_library_community_playlist,
    assemble_library_podcast,
    assemble_library_song,
    assemble_library_subscription,
)
from ytmparse.assemblers.pages import (
    ARTIST_ALBUMS_TITLES,
    ARTIST_FEATURED_ON_TITLES,
    ARTIST_RELATED_TITLES,
    ARTIST_SINGLES_TITLES,
    ARTIST_VIDEOS_TITLES,
    assemble_album_info,
    assemble_artist_info,
    assemble_community_playlist_info,
    find_carousel,
)
from ytmparse.assemblers.search import (
    ARTISTS_SEARCH_PARAMS,
    assemble_artist_search_result,
)
from ytmparse.assemblers.streams import select_streaming_data
from ytmparse.assemblers.tracks import (
    assemble_album_track,
    assemble_player_song,
    assemble_playlist_track,
)
from ytmparse.client import TransportProtocol
from ytmparse.config import ParserConfig
from ytmparse.lib.navigator import select_optional
from ytmparse.models.entities import (
    Album,
    Artist,
    ArtistSearchResult,
    CommunityPlaylist,
    Episode,
    Podcast,
    Song,
    Subscription,
)
from ytmparse.models.enums import BatchPolicy
from ytmparse.models.pages import AlbumPage, ArtistPage, PlaylistPage
from ytmparse.models.streams import StreamingData

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Browse ids of the library surfaces
LIBRARY_SONGS = "FEmusic_liked_videos"
LIBRARY_ALBUMS = "FEmusic_liked_albums"
LIBRARY_ARTISTS = "FEmusic_library_corpus_track_artists"
LIBRARY_SUBSCRIPTIONS = "FEmusic_library_corpus_artists"
LIBRARY_PLAYLISTS = "FEmusic_liked_playlists"
LIBRARY_PODCASTS = "FEmusic_library_non_music_audio_list"
SAVED_EPISODES = "VLSE"

# Playlist pages are browsed by the playlist id with this prefix
PLAYLIST_BROWSE_PREFIX = "VL"

# List containers of the surface layouts
SHELF = "..musicShelfRenderer"
SHELF_CONTENTS = f"{SHELF}.contents"
GRID_ITEMS = "..gridRenderer.items"
PLAYLIST_SHELF_CONTENTS = "..musicPlaylistShelfRenderer.contents"
SHELF_ITEMS = "contents"


def _utc_now() -> datetime:
    return datetime.now(UTC)


class LibraryService:
    """Service for reading the signed-in user's library.

    Each method fetches one surface through the transport and assembles
    its list. With ``BatchPolicy.FAIL_FAST`` the first malformed item
    raises; with ``BatchPolicy.ISOLATE`` malformed items are logged and
    left out.
    """

    def __init__(
        self,
        transport: TransportProtocol,
        config: ParserConfig | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize the service.

        Args:
            transport: Source of raw response trees.
            config: Optional assembly configuration. Uses defaults if not provided.
            clock: Source of the reference time for relative dates and
                stream timestamps.
        """
        self._transport = transport
        self._config = config or ParserConfig()
        self._clock = clock

    # ============================================================================
    # LIBRARY SURFACES
    # ============================================================================

    def get_songs(self) -> list[Song]:
        """Fetch liked and uploaded songs.

        Raises:
            APIError: If the request fails.
            AssemblyError: If an item is malformed (fail-fast policy).
            PathNotFoundError: If the surface has no song list.
        """
        response = self._browse(LIBRARY_SONGS)
        return self._assemble(
            response, SHELF_CONTENTS, assemble_library_song, has_key(RESPONSIVE)
        )

    def get_albums(self) -> list[Album]:
        """Fetch saved albums."""
        response = self._browse(LIBRARY_ALBUMS)
        return self._assemble(
            response, GRID_ITEMS, assemble_library_album, has_key(TWO_ROW)
        )

    def get_artists(self) -> list[Artist]:
        """Fetch artists of the songs in the library."""
        response = self._browse(LIBRARY_ARTISTS)
        return self._assemble(
            response, SHELF_CONTENTS, assemble_library_artist, has_key(RESPONSIVE)
        )

    def get_subscriptions(self) -> list[Subscription]:
        """Fetch subscribed channels."""
        response = self._browse(LIBRARY_SUBSCRIPTIONS)
        return self._assemble(
            response,
            SHELF_CONTENTS,
            assemble_library_subscription,
            has_key(RESPONSIVE),
        )

    def get_playlists(self) -> list[CommunityPlaylist]:
        """Fetch saved and created playlists.

        Platform playlists are credited to ``config.default_creator_name``.
        """
        response = self._browse(LIBRARY_PLAYLISTS)
        assembler = partial(
            assemble_library_community_playlist,
            default_creator=self._config.default_creator_name,
        )
        return self._assemble(response, GRID_ITEMS, assembler, has_play_button)

    def get_podcasts(self) -> list[Podcast]:
        """Fetch saved podcast shows."""
        response = self._browse(LIBRARY_PODCASTS)
        return self._assemble(
            response, GRID_ITEMS, assemble_library_podcast, has_play_button
        )

    def get_episodes(self) -> list[Episode]:
        """Fetch episodes saved for later."""
        response = self._browse(SAVED_EPISODES)
        assembler = partial(assemble_episode, now=self._clock())
        return self._assemble(response, SHELF_CONTENTS, assembler, has_key(MULTI_ROW))

    # ============================================================================
    # PAGES
    # ============================================================================

    def get_playlist(self, playlist_id: str) -> PlaylistPage:
        """Fetch a playlist's header and the tracks of its first page.

        Args:
            playlist_id: Playlist ID, with or without the "VL" browse prefix.

        Raises:
            APIError: If the request fails.
            AssemblyError: If the header or a track is malformed.
            PathNotFoundError: If the page has no track list.
        """
        if not playlist_id.startswith(PLAYLIST_BROWSE_PREFIX):
            playlist_id = PLAYLIST_BROWSE_PREFIX + playlist_id
        response = self._browse(playlist_id)
        info = assemble_community_playlist_info(
            response, default_creator=self._config.default_creator_name
        )
        tracks = self._assemble(
            response,
            PLAYLIST_SHELF_CONTENTS,
            assemble_playlist_track,
            has_key(RESPONSIVE),
        )
        return PlaylistPage(info=info, tracks=tracks)

    def get_album(self, browse_id: str) -> AlbumPage:
        """Fetch an album's header and track list.

        Args:
            browse_id: Album browse ID ("MPREb_...").
        """
        response = self._browse(browse_id)
        info = assemble_album_info(response)
        tracks = self._assemble(
            response, SHELF_CONTENTS, assemble_album_track, has_key(RESPONSIVE)
        )
        return AlbumPage(info=info, tracks=tracks)

    def get_artist(self, channel_id: str) -> ArtistPage:
        """Fetch an artist's header and the shelves of their page.

        Shelves the page does not show come back empty.

        Args:
            channel_id: Artist channel ID. A library artist browse ID
                ("MPLA" + channel ID) is accepted too.

        Raises:
            APIError: If the request fails.
            AssemblyError: If the header or a shelf item is malformed.
        """
        response = self._browse(channel_id.removeprefix(LIBRARY_ARTIST_PREFIX))
        songs_shelf = select_optional(response, SHELF)
        return ArtistPage(
            info=assemble_artist_info(response),
            songs=self._assemble_shelf(
                songs_shelf, assemble_artist_song, has_key(RESPONSIVE)
            ),
            albums=self._assemble_carousel(
                response, ARTIST_ALBUMS_TITLES, assemble_artist_album
            ),
            singles=self._assemble_carousel(
                response, ARTIST_SINGLES_TITLES, assemble_artist_album
            ),
            videos=self._assemble_carousel(
                response, ARTIST_VIDEOS_TITLES, assemble_artist_video
            ),
            featured_on=self._assemble_carousel(
                response, ARTIST_FEATURED_ON_TITLES, assemble_featured_playlist
            ),
            related=self._assemble_carousel(
                response, ARTIST_RELATED_TITLES, assemble_related_artist
            ),
        )

    # ============================================================================
    # SEARCH
    # ============================================================================

    def search_artists(self, query: str) -> list[ArtistSearchResult]:
        """Search for artists.

        Raises:
            ValueError: If query is empty.
            APIError: If the request fails.
            AssemblyError: If a result is malformed (fail-fast policy).
        """
        if not query or not query.strip():
            raise ValueError("query cannot be empty")

        logger.debug("Searching artists for %r", query)
        response = self._transport.fetch(
            "search", {"query": query, "params": ARTISTS_SEARCH_PARAMS}
        )
        shelf = select_optional(response, SHELF)
        return self._assemble_shelf(
            shelf, assemble_artist_search_result, has_key(RESPONSIVE)
        )

    # ============================================================================
    # PLAYER
    # ============================================================================

    def get_song(self, video_id: str) -> Song:
        """Fetch a song's details from its player response.

        Raises:
            APIError: If the request fails.
            AssemblyError: If the response is malformed.
        """
        return assemble_player_song(self._transport.fetch_player(video_id))

    def get_streaming_data(self, video_id: str) -> StreamingData:
        """Fetch and classify the adaptive streams of a video.

        Raises:
            APIError: If the request fails.
            AssemblyError: If the response has no streaming data or a
                descriptor is malformed.
        """
        response = self._transport.fetch_player(video_id)
        data = select_streaming_data(response, self._clock())
        if data.rejected:
            logger.debug(
                "Left out %d stream(s) of unsupported kind for %s",
                len(data.rejected),
                video_id,
            )
        logger.debug(
            "Classified %d audio and %d video stream(s) for %s",
            len(data.audio_streams),
            len(data.video_streams),
            video_id,
        )
        return data

    # ============================================================================
    # INTERNAL
    # ============================================================================

    def _browse(self, browse_id: str) -> dict[str, Any]:
        logger.debug("Browsing %s", browse_id)
        return self._transport.fetch("browse", {"browseId": browse_id})

    def _assemble_shelf(
        self,
        shelf: Any,
        assembler: Callable[[Any], T],
        where: ItemFilter | None = None,
    ) -> list[T]:
        if shelf is None:
            return []
        return self._assemble(shelf, SHELF_ITEMS, assembler, where)

    def _assemble_carousel(
        self,
        response: dict[str, Any],
        titles: frozenset[str],
        assembler: Callable[[Any], T],
    ) -> list[T]:
        carousel = find_carousel(response, titles)
        if carousel is None:
            logger.debug("No carousel titled %s", sorted(titles))
        return self._assemble_shelf(carousel, assembler, has_key(TWO_ROW))

    def _assemble(
        self,

        response: dict[str, Any],
        path: str,
        assembler: Callable[[Any], T],
        where: ItemFilter | None = None,
    ) -> list[T]:
        if self._config.batch_policy == BatchPolicy.FAIL_FAST:
            return assemble_all(response, path, assembler, where=where)

        result = assemble_each(response, path, assembler, where=where)
        for error in result.errors:
            logger.warning(
                "Skipping malformed %s at index %s: %s",
                error.kind,
                error.index,
                error.cause.message,
            )
        if not result.ok:
            logger.warning(
                "Assembled %d of %d item(s) from %s",
                len(result.items),
                result.total,
                path,
            )
        return result.items
