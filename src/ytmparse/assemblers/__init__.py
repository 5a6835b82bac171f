"""Entity assemblers.

One pure function per entity kind and surface. Each takes a list item (or
a whole response, for the player) and returns a frozen entity model, or
raises AssemblyError naming the entity kind and the failing path.

Library:
    assemble_library_song, assemble_library_album, assemble_library_artist,
    assemble_library_subscription, assemble_library_podcast,
    assemble_library_community_playlist, assemble_episode

Artist page:
    assemble_artist_song, assemble_artist_album, assemble_artist_video,
    assemble_featured_playlist, assemble_related_artist

Track lists:
    assemble_album_track, assemble_playlist_track, assemble_queue_track,
    assemble_player_song

Pages and search:
    assemble_community_playlist_info, assemble_album_info,
    assemble_artist_info, find_carousel, assemble_artist_search_result

Streams:
    classify_stream, select_streaming_data

Lists:
    assemble_all (fail fast), assemble_each (collect failures)
"""

from ytmparse.assemblers.artist import (
    assemble_artist_album,
    assemble_artist_song,
    assemble_artist_video,
    assemble_featured_playlist,
    assemble_related_artist,
)
from ytmparse.assemblers.batch import (
    assemble_all,
    assemble_each,
    has_key,
    has_play_button,
)
from ytmparse.assemblers.library import (
    DEFAULT_CREATOR_NAME,
    assemble_episode,
    assemble_library_album,
    assemble_library_artist,
    assemble_library_community_playlist,
    assemble_library_podcast,
    assemble_library_song,
    assemble_library_subscription,
)
from ytmparse.assemblers.pages import (
    assemble_album_info,
    assemble_artist_info,
    assemble_community_playlist_info,
    find_carousel,
)
from ytmparse.assemblers.search import assemble_artist_search_result
from ytmparse.assemblers.streams import classify_stream, select_streaming_data
from ytmparse.assemblers.tracks import (
    assemble_album_track,
    assemble_player_song,
    assemble_playlist_track,
    assemble_queue_track,
)

__all__ = [
    "DEFAULT_CREATOR_NAME",
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
    "find_carousel",
    "has_key",
    "has_play_button",
    "select_streaming_data",
]
