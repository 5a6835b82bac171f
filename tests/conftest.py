"""Test fixtures and renderer builders.

The builders produce the same shapes InnerTube returns, trimmed to the
fields the assemblers read.
"""

from datetime import UTC, datetime
from typing import Any

import pytest

SEPARATOR = " • "

# Fixed reference time for relative dates and stream defaults
NOW = datetime(2024, 6, 15, 12, 0, 0, tzinfo=UTC)


# ============================================================================
# BUILDERS
# ============================================================================


def run(
    text: str, browse_id: str | None = None, video_id: str | None = None
) -> dict[str, Any]:
    """Build a text run, optionally linked to a browse or watch endpoint."""
    result: dict[str, Any] = {"text": text}
    if browse_id is not None:
        result["navigationEndpoint"] = {"browseEndpoint": {"browseId": browse_id}}
    elif video_id is not None:
        result["navigationEndpoint"] = {"watchEndpoint": {"videoId": video_id}}
    return result


def sep(text: str = SEPARATOR) -> dict[str, Any]:
    return {"text": text}


def thumbnails(*sizes: int) -> dict[str, Any]:
    """Build a thumbnail list holder with square images of the given sizes."""
    return {
        "thumbnails": [
            {"url": f"https://lh3.googleusercontent.com/img=w{s}-h{s}", "width": s, "height": s}
            for s in sizes
        ]
    }


def explicit_badges() -> list[dict[str, Any]]:
    return [{"musicInlineBadgeRenderer": {"icon": {"iconType": "MUSIC_EXPLICIT_BADGE"}}}]


def flex_column(*runs: dict[str, Any]) -> dict[str, Any]:
    return {"musicResponsiveListItemFlexColumnRenderer": {"text": {"runs": list(runs)}}}


def fixed_column(text: str) -> dict[str, Any]:
    return {"musicResponsiveListItemFixedColumnRenderer": {"text": {"runs": [{"text": text}]}}}


def playlist_menu(*playlist_ids: str) -> dict[str, Any]:
    """Build a menu whose entries start playlist playback."""
    return {
        "menuRenderer": {
            "items": [
                {
                    "menuNavigationItemRenderer": {
                        "navigationEndpoint": {
                            "watchPlaylistEndpoint": {"playlistId": pid}
                        }
                    }
                }
                for pid in playlist_ids
            ]
        }
    }


def watch_menu(playlist_id: str, video_id: str) -> dict[str, Any]:
    """Build a menu whose first entry starts a radio from a song."""
    return {
        "menuRenderer": {
            "items": [
                {
                    "menuNavigationItemRenderer": {
                        "navigationEndpoint": {
                            "watchEndpoint": {
                                "playlistId": playlist_id,
                                "videoId": video_id,
                            }
                        }
                    }
                }
            ]
        }
    }


def play_button(playlist_id: str) -> dict[str, Any]:
    return {
        "musicItemThumbnailOverlayRenderer": {
            "content": {
                "musicPlayButtonRenderer": {
                    "playNavigationEndpoint": {
                        "watchPlaylistEndpoint": {"playlistId": playlist_id}
                    }
                }
            }
        }
    }


def responsive_item(
    columns: list[list[dict[str, Any]]],
    *,
    fixed: str | None = None,
    badges: list[dict[str, Any]] | None = None,
    menu: dict[str, Any] | None = None,
    browse_id: str | None = None,
    index: str | None = None,
) -> dict[str, Any]:
    """Build a list item wrapping a musicResponsiveListItemRenderer."""
    renderer: dict[str, Any] = {
        "thumbnail": {"musicThumbnailRenderer": {"thumbnail": thumbnails(226, 60)}},
        "flexColumns": [flex_column(*runs) for runs in columns],
    }
    if fixed is not None:
        renderer["fixedColumns"] = [fixed_column(fixed)]
    if badges is not None:
        renderer["badges"] = badges
    if menu is not None:
        renderer["menu"] = menu
    if browse_id is not None:
        renderer["navigationEndpoint"] = {"browseEndpoint": {"browseId": browse_id}}
    if index is not None:
        renderer["index"] = {"runs": [{"text": index}]}
    return {"musicResponsiveListItemRenderer": renderer}


def two_row_item(
    title: str,
    subtitle: list[dict[str, Any]],
    *,
    title_browse_id: str | None = None,
    browse_id: str | None = None,
    video_id: str | None = None,
    play_playlist_id: str | None = None,
    menu: dict[str, Any] | None = None,
    subtitle_badges: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Build a grid or carousel item wrapping a musicTwoRowItemRenderer."""
    renderer: dict[str, Any] = {
        "title": {"runs": [run(title, browse_id=title_browse_id)]},
        "subtitle": {"runs": subtitle},
        "thumbnailRenderer": {
            "musicThumbnailRenderer": {"thumbnail": thumbnails(544, 226)}
        },
    }
    if browse_id is not None:
        renderer["navigationEndpoint"] = {"browseEndpoint": {"browseId": browse_id}}
    elif video_id is not None:
        renderer["navigationEndpoint"] = {"watchEndpoint": {"videoId": video_id}}
    if play_playlist_id is not None:
        renderer["thumbnailOverlay"] = play_button(play_playlist_id)
    if menu is not None:
        renderer["menu"] = menu
    if subtitle_badges is not None:
        renderer["subtitleBadges"] = subtitle_badges
    return {"musicTwoRowItemRenderer": renderer}


# Leading tile of the library playlist grid; it has no play button
NEW_PLAYLIST_TILE = two_row_item("New playlist", [])


def shelf(*items: dict[str, Any]) -> dict[str, Any]:
    """Wrap items into a browse response with one music shelf."""
    return {
        "contents": {
            "singleColumnBrowseResultsRenderer": {
                "tabs": [
                    {
                        "tabRenderer": {
                            "content": {
                                "sectionListRenderer": {
                                    "contents": [
                                        {"musicShelfRenderer": {"contents": list(items)}}
                                    ]
                                }
                            }
                        }
                    }
                ]
            }
        }
    }


def grid(*items: dict[str, Any]) -> dict[str, Any]:
    """Wrap items into a browse response with one grid."""
    return {
        "contents": {
            "singleColumnBrowseResultsRenderer": {
                "tabs": [
                    {
                        "tabRenderer": {
                            "content": {
                                "sectionListRenderer": {
                                    "contents": [
                                        {"gridRenderer": {"items": list(items)}}
                                    ]
                                }
                            }
                        }
                    }
                ]
            }
        }
    }


def responsive_header(
    title: str,
    subtitle: list[dict[str, Any]],
    *,
    stats: list[dict[str, Any]] | None = None,
    strapline: list[dict[str, Any]] | None = None,
    description: str | None = None,
    playlist_id: str = "PLroadtrip",
    badges: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Build the header of a playlist or album page."""
    renderer: dict[str, Any] = {
        "title": {"runs": [run(title)]},
        "subtitle": {"runs": subtitle},
        "thumbnail": {"musicThumbnailRenderer": {"thumbnail": thumbnails(544, 226)}},
        "buttons": [
            {"toggleButtonRenderer": {}},
            {
                "musicPlayButtonRenderer": {
                    "playNavigationEndpoint": {
                        "watchEndpoint": {"videoId": "xQ4g5SQqGzo", "playlistId": playlist_id}
                    }
                }
            },
        ],
    }
    if stats is not None:
        renderer["secondSubtitle"] = {"runs": stats}
    if strapline is not None:
        renderer["straplineTextOne"] = {"runs": strapline}
    if description is not None:
        renderer["description"] = {
            "musicDescriptionShelfRenderer": {"description": {"runs": [run(description)]}}
        }
    if badges is not None:
        renderer["subtitleBadge"] = badges
    return {"musicResponsiveHeaderRenderer": renderer}


def two_column_page(header: dict[str, Any], *sections: dict[str, Any]) -> dict[str, Any]:
    """Wrap a header and the sections below it into a playlist or album page."""
    return {
        "contents": {
            "twoColumnBrowseResultsRenderer": {
                "tabs": [
                    {
                        "tabRenderer": {
                            "content": {"sectionListRenderer": {"contents": [header]}}
                        }
                    }
                ],
                "secondaryContents": {
                    "sectionListRenderer": {"contents": list(sections)}
                },
            }
        }
    }


def playlist_shelf(*items: dict[str, Any]) -> dict[str, Any]:
    return {"musicPlaylistShelfRenderer": {"contents": list(items)}}


def music_shelf(*items: dict[str, Any]) -> dict[str, Any]:
    return {"musicShelfRenderer": {"contents": list(items)}}


def carousel(title: str, *items: dict[str, Any]) -> dict[str, Any]:
    """Build an artist page carousel with a titled header."""
    return {
        "musicCarouselShelfRenderer": {
            "header": {
                "musicCarouselShelfBasicHeaderRenderer": {"title": {"runs": [run(title)]}}
            },
            "contents": list(items),
        }
    }


def artist_header(*, description: str | None = "French electronic duo.") -> dict[str, Any]:
    renderer: dict[str, Any] = {
        "title": {"runs": [run("Daft Punk")]},
        "subscriptionButton": {
            "subscribeButtonRenderer": {
                "channelId": "UC_kRDKYrUlrbtrSiyu5Tflg",
                "subscriberCountText": {"runs": [run("8.1M")]},
            }
        },
        "startRadioButton": {
            "buttonRenderer": {
                "navigationEndpoint": {
                    "watchPlaylistEndpoint": {"playlistId": "RDEM_daftpunk"}
                }
            }
        },
        "thumbnail": {"musicThumbnailRenderer": {"thumbnail": thumbnails(540, 1080)}},
    }
    if description is not None:
        renderer["description"] = {"runs": [run(description)]}
    return {"musicImmersiveHeaderRenderer": renderer}


def artist_page(
    *sections: dict[str, Any], header: dict[str, Any] | None = None
) -> dict[str, Any]:
    """Wrap a header and its shelves into an artist page."""
    return {
        "header": header or artist_header(),
        "contents": {
            "singleColumnBrowseResultsRenderer": {
                "tabs": [
                    {
                        "tabRenderer": {
                            "content": {"sectionListRenderer": {"contents": list(sections)}}
                        }
                    }
                ]
            }
        },
    }


def audio_format(**overrides: Any) -> dict[str, Any]:
    descriptor = {
        "itag": 251,
        "url": "https://rr1---sn.googlevideo.com/videoplayback?itag=251",
        "mimeType": 'audio/webm; codecs="opus"',
        "bitrate": 141000,
        "lastModified": "1700000000000000",
        "contentLength": "3483457",
        "quality": "tiny",
        "approxDurationMs": "204041",
        "audioSampleRate": "48000",
        "audioChannels": 2,
        "loudnessDb": -7.2,
    }
    descriptor.update(overrides)
    return descriptor


def video_format(**overrides: Any) -> dict[str, Any]:
    descriptor = {
        "itag": 137,
        "url": "https://rr1---sn.googlevideo.com/videoplayback?itag=137",
        "mimeType": 'video/mp4; codecs="avc1.640028"',
        "bitrate": 4400000,
        "width": 1920,
        "height": 1080,
        "lastModified": "1700000000000000",
        "contentLength": "58000000",
        "quality": "hd1080",
        "fps": 30,
        "qualityLabel": "1080p",
        "approxDurationMs": "204000",
    }
    descriptor.update(overrides)
    return descriptor


def player_response(*formats: dict[str, Any]) -> dict[str, Any]:
    return {
        "playabilityStatus": {"status": "OK"},
        "streamingData": {
            "expiresInSeconds": "21540",
            "adaptiveFormats": list(formats),
        },
        "videoDetails": {
            "videoId": "dQw4w9WgXcQ",
            "title": "Never Gonna Give You Up",
            "lengthSeconds": "213",
            "channelId": "UCuAXFkgsw1L7xaCfnd5JJOw",
            "author": "Rick Astley",
            "thumbnail": thumbnails(120, 480),
        },
    }


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def now() -> datetime:
    """Fixed reference time."""
    return NOW


@pytest.fixture
def library_song_item() -> dict[str, Any]:
    """Liked song as listed in the library songs shelf."""
    return responsive_item(
        [
            [run("One More Time", video_id="FGBhQbmPwH8")],
            [run("Daft Punk", browse_id="UC_kRDKYrUlrbtrSiyu5Tflg")],
            [run("Discovery", browse_id="MPREb_discovery")],
        ],
        fixed="5:21",
        badges=explicit_badges(),
        menu=watch_menu("RDAMVMFGBhQbmPwH8", "FGBhQbmPwH8"),
    )


@pytest.fixture
def library_album_item() -> dict[str, Any]:
    """Saved album: ["Album", " • ", artist, " • ", year]."""
    return two_row_item(
        "Discovery",
        [
            run("Album"),
            sep(),
            run("Daft Punk", browse_id="UC_kRDKYrUlrbtrSiyu5Tflg"),
            sep(),
            run("2001"),
        ],
        title_browse_id="MPREb_discovery",
        menu=playlist_menu("OLAK5uy_discovery", "RDAMPLOLAK5uy_discovery"),
    )


@pytest.fixture
def library_artist_item() -> dict[str, Any]:
    return responsive_item(
        [[run("Daft Punk")], [run("12 songs")]],
        browse_id="MPLAUC_kRDKYrUlrbtrSiyu5Tflg",
        menu=playlist_menu("RDEM_shuffle", "RDEM_radio"),
    )


@pytest.fixture
def library_subscription_item() -> dict[str, Any]:
    return responsive_item(
        [[run("Daft Punk")], [run("8.1M subscribers")]],
        browse_id="UC_kRDKYrUlrbtrSiyu5Tflg",
    )


@pytest.fixture
def library_playlist_item() -> dict[str, Any]:
    """User playlist: [creator, " • ", "<n> songs"]."""
    return two_row_item(
        "Road Trip",
        [run("Jane Doe", browse_id="UCjanedoe"), sep(), run("1,234 songs")],
        play_playlist_id="PLroadtrip",
        menu=playlist_menu("PLroadtrip", "RDAMPLPLroadtrip"),
    )


@pytest.fixture
def library_podcast_item() -> dict[str, Any]:
    return two_row_item(
        "The Daily",
        [run("The New York Times", browse_id="UCnyt")],
        play_playlist_id="PLthedaily",
    )


@pytest.fixture
def episode_item() -> dict[str, Any]:
    """Saved episode: ["3 days ago", " • ", "25 min"]."""
    return {
        "musicMultiRowListItemRenderer": {
            "title": {"runs": [{"text": "A Big Week"}]},
            "subtitle": {"runs": [run("3 days ago"), sep(), run("25 min")]},
            "secondTitle": {"runs": [run("The Daily", browse_id="MPSPPLthedaily")]},
            "onTap": {"watchEndpoint": {"videoId": "ep123"}},
            "thumbnail": {"musicThumbnailRenderer": {"thumbnail": thumbnails(226)}},
            "menu": {
                "menuRenderer": {
                    "topLevelButtons": [
                        {"likeButtonRenderer": {"likeStatus": "INDIFFERENT", "likesAllowed": True}}
                    ]
                }
            },
        }
    }


@pytest.fixture
def artist_search_item() -> dict[str, Any]:
    """Artist search result: details are ["Artist", " • ", subscribers]."""
    return responsive_item(
        [[run("Daft Punk")], [run("Artist"), sep(), run("8.1M subscribers")]],
        browse_id="UC_kRDKYrUlrbtrSiyu5Tflg",
        menu=playlist_menu("RDAO_shuffle", "RDEM_radio"),
    )


@pytest.fixture
def playlist_track_item() -> dict[str, Any]:
    return responsive_item(
        [
            [run("Digital Love", video_id="xQ4g5SQqGzo")],
            [run("Daft Punk", browse_id="UC_kRDKYrUlrbtrSiyu5Tflg")],
            [run("Discovery", browse_id="MPREb_discovery")],
        ],
        fixed="4:58",
    )


@pytest.fixture
def album_track_item() -> dict[str, Any]:
    return responsive_item(
        [[run("Aerodynamic", video_id="L93-7vRfxNs")], [], [run("120M plays")]],
        fixed="3:27",
        index="3",
    )


@pytest.fixture
def queue_track_item() -> dict[str, Any]:
    """Watch queue entry: [artist, " • ", album, " • ", year]."""
    return {
        "playlistPanelVideoRenderer": {
            "title": {"runs": [{"text": "Digital Love"}]},
            "longBylineText": {
                "runs": [
                    run("Daft Punk", browse_id="UC_kRDKYrUlrbtrSiyu5Tflg"),
                    sep(),
                    run("Discovery", browse_id="MPREb_discovery"),
                    sep(),
                    run("2001"),
                ]
            },
            "lengthText": {"runs": [{"text": "4:58"}]},
            "navigationEndpoint": {"watchEndpoint": {"videoId": "xQ4g5SQqGzo"}},
            "thumbnail": thumbnails(60, 120),
        }
    }


# ============================================================================
# MOCK TRANSPORT
# ============================================================================


class MockTransport:
    """Mock transport serving canned response trees."""

    def __init__(
        self,
        browse: dict[str, dict[str, Any]] | None = None,
        player: dict[str, Any] | None = None,
        search: dict[str, dict[str, Any]] | None = None,
    ) -> None:
        self._browse = browse or {}
        self._player = player
        self._search = search or {}
        self.fetch_calls: list[tuple[str, dict[str, Any]]] = []
        self.fetch_player_calls: list[str] = []

    def fetch(self, endpoint: str, body: dict[str, Any]) -> dict[str, Any]:
        """Mock fetch, keyed by browse id or search query."""
        self.fetch_calls.append((endpoint, body))
        if endpoint == "search":
            query = body.get("query", "")
            if query not in self._search:
                raise ValueError(f"No search response configured for {query}")
            return self._search[query]
        browse_id = body.get("browseId", "")
        if browse_id not in self._browse:
            raise ValueError(f"No response configured for {browse_id}")
        return self._browse[browse_id]

    def fetch_player(self, video_id: str) -> dict[str, Any]:
        """Mock fetch_player."""
        self.fetch_player_calls.append(video_id)
        if self._player is None:
            raise ValueError("No player response configured")
        return self._player
