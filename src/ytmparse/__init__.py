"""ytmparse - Assemble typed entities from YouTube Music responses.

This library turns the deeply nested, renderer-based JSON returned by the
YouTube Music InnerTube API into frozen entity models: songs, albums,
artists, playlists, podcasts, episodes, subscriptions, page headers,
search results and adaptive media streams. The core (navigation, coercion,
assembly) is pure and works on captured responses as well as live ones.

Designed for use as a library, with a CLI for inspecting captures.

Examples:
    Read the signed-in user's library:
    ```python
    from pathlib import Path
    from ytmparse import create_library_service

    service = create_library_service(cookies_path=Path("cookies.txt"))
    for song in service.get_songs():
        print(f"{song.artist_display} - {song.name}")
    ```

    Assemble a captured response:
    ```python
    import json
    from pathlib import Path
    from ytmparse import assemble_all, assemble_library_album

    tree = json.loads(Path("albums.json").read_text())
    albums = assemble_all(tree, "..gridRenderer.items", assemble_library_album)
    ```
"""

from pathlib import Path

# Internal imports (not exported)
from ytmparse.assemblers import (
    assemble_album_info,
    assemble_album_track,
    assemble_all,
    assemble_artist_album,
    assemble_artist_info,
    assemble_artist_search_result,
    assemble_artist_song,
    assemble_artist_video,
    assemble_community_playlist_info,
    assemble_each,
    assemble_episode,
    assemble_featured_playlist,
    assemble_library_album,
    assemble_library_artist,
    assemble_library_community_playlist,
    assemble_library_podcast,
    assemble_library_song,
    assemble_library_subscription,
    assemble_player_song,
    assemble_playlist_track,
    assemble_queue_track,
    assemble_related_artist,
    classify_stream,
    select_streaming_data,
)
from ytmparse.client import TransportProtocol, YTMusicTransport
from ytmparse.config import ParserConfig, TransportConfig
from ytmparse.exceptions import (
    APIError,
    AssemblyError,
    PathNotFoundError,
    TypeMismatchError,
    UnsupportedStreamKindError,
    YTParseError,
)
from ytmparse.models import (
    Album,
    AlbumInfo,
    AlbumPage,
    AlbumType,
    Artist,
    ArtistInfo,
    ArtistPage,
    ArtistSearchResult,
    AudioStream,
    BatchPolicy,
    BatchResult,
    CommunityPlaylist,
    CommunityPlaylistInfo,
    EntityKind,
    Episode,
    MediaContainer,
    NamedEntity,
    PlaylistPage,
    Podcast,
    Radio,
    Song,
    StreamingData,
    Subscription,
    Thumbnail,
    Video,
    VideoStream,
)
from ytmparse.services import LibraryService

__version__ = "0.1.0"


def create_library_service(
    config: ParserConfig | None = None,
    transport_config: TransportConfig | None = None,
    cookies_path: Path | None = None,
) -> LibraryService:
    """Create a configured library service.

    This is the recommended way to create a service for library usage.
    It handles transport instantiation internally.

    Args:
        config: Optional assembly configuration. Uses defaults if not provided.
        transport_config: Optional session configuration (language, location).
        cookies_path: Optional path to cookies.txt for YouTube Music
            authentication. Library surfaces are empty without it.

    Returns:
        A configured LibraryService instance.

    Examples:
        Skip malformed items instead of failing:
        ```python
        config = ParserConfig(batch_policy=BatchPolicy.ISOLATE)
        service = create_library_service(config, cookies_path=Path("cookies.txt"))
        ```
    """
    transport = YTMusicTransport(config=transport_config, cookies_path=cookies_path)
    return LibraryService(transport, config)


__all__ = [
    "APIError",
    "Album",
    "AlbumInfo",
    "AlbumPage",
    "AlbumType",
    "Artist",
    "ArtistInfo",
    "ArtistPage",
    "ArtistSearchResult",
    "AssemblyError",
    "AudioStream",
    "BatchPolicy",
    "BatchResult",
    "CommunityPlaylist",
    "CommunityPlaylistInfo",
    "EntityKind",
    "Episode",
    "LibraryService",
    "MediaContainer",
    "NamedEntity",
    "ParserConfig",
    "PathNotFoundError",
    "PlaylistPage",
    "Podcast",
    "Radio",
    "Song",
    "StreamingData",
    "Subscription",
    "Thumbnail",
    "TransportConfig",
    "TransportProtocol",
    "TypeMismatchError",
    "UnsupportedStreamKindError",
    "Video",
    "VideoStream",
    "YTMusicTransport",
    "YTParseError",
    "assemble_album_info",
    "assemble_album_track",
    "assemble_all",
    "assemble_artist_album",
    "assemble_artist_info",
    "assemble_artist_search_result",
    "assemble_artist_song",
    "assemble_artist_video",
    "assemble_community_playlist_info",
    "assemble_each",
    "assemble_episode",
    "assemble_featured_playlist",
    "assemble_library_album",
    "assemble_library_artist",
    "assemble_library_community_playlist",
    "assemble_library_podcast",
    "assemble_library_song",
    "assemble_library_subscription",
    "assemble_player_song",
    "assemble_playlist_track",
    "assemble_queue_track",
    "assemble_related_artist",
    "classify_stream",
    "create_library_service",
    "select_streaming_data",
]
