"""Renderer paths and helpers shared by the assemblers."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import timedelta
from typing import Any

from ytmparse.exceptions import AssemblyError, PathNotFoundError, TypeMismatchError
from ytmparse.lib.coercion import select_duration, select_string
from ytmparse.lib.navigator import select_optional
from ytmparse.models.enums import EntityKind

RESPONSIVE = "musicResponsiveListItemRenderer"
TWO_ROW = "musicTwoRowItemRenderer"
MULTI_ROW = "musicMultiRowListItemRenderer"
PANEL_VIDEO = "playlistPanelVideoRenderer"

# Relative to a run
RUN_TEXT = "text"
RUN_BROWSE_ID = "navigationEndpoint.browseEndpoint.browseId"
RUN_VIDEO_ID = "navigationEndpoint.watchEndpoint.videoId"

# Relative to a renderer
MENU_ITEMS = "menu.menuRenderer.items"
PLAY_BUTTON_PLAYLIST_ID = (
    "thumbnailOverlay.musicItemThumbnailOverlayRenderer.content"
    ".musicPlayButtonRenderer.playNavigationEndpoint"
    ".watchPlaylistEndpoint.playlistId"
)
MUSIC_THUMBNAILS = "thumbnail.musicThumbnailRenderer.thumbnail.thumbnails"
TWO_ROW_THUMBNAILS = "thumbnailRenderer.musicThumbnailRenderer.thumbnail.thumbnails"


def flex_runs(index: int) -> str:
    """Path to the runs of a responsive item's flexible column."""
    return (
        f"{RESPONSIVE}.flexColumns[{index}]"
        ".musicResponsiveListItemFlexColumnRenderer.text.runs"
    )


def fixed_runs(index: int) -> str:
    """Path to the runs of a responsive item's fixed column."""
    return (
        f"{RESPONSIVE}.fixedColumns[{index}]"
        ".musicResponsiveListItemFixedColumnRenderer.text.runs"
    )


def menu_playlist_id(renderer: str, item: int) -> str:
    """Path to the playlist id behind a menu entry's playlist endpoint."""
    return (
        f"{renderer}.{MENU_ITEMS}[{item}].menuNavigationItemRenderer"
        ".navigationEndpoint.watchPlaylistEndpoint.playlistId"
    )


def menu_watch_endpoint(renderer: str, item: int) -> str:
    """Path to a menu entry's watch endpoint."""
    return (
        f"{renderer}.{MENU_ITEMS}[{item}].menuNavigationItemRenderer"
        ".navigationEndpoint.watchEndpoint"
    )


@contextmanager
def assembling(kind: EntityKind) -> Iterator[None]:
    """Wrap navigation and coercion failures into an AssemblyError.

    Raises:
        AssemblyError: Carrying ``kind`` and the failing path.
    """
    try:
        yield
    except (PathNotFoundError, TypeMismatchError) as e:
        raise AssemblyError(kind.value, e) from e


def select_name(node: Any, path: str) -> str:
    """Select a display name, stripped.

    Raises:
        TypeMismatchError: If the name is blank.
    """
    name = select_string(node, path).strip()
    if not name:
        raise TypeMismatchError(path, "non-empty string", name)
    return name


def select_track_duration(node: Any, fallback_flex: int | None = None) -> timedelta:
    """Read a track duration from the fixed column, else a flexible column.

    Args:
        node: Responsive list item.
        fallback_flex: Flexible column holding the duration on surfaces
            that lay it out there. None when the surface has no fallback.

    Raises:
        PathNotFoundError: Naming the fixed-column path when neither
            column holds a duration.
    """
    fixed = f"{fixed_runs(0)}[0].{RUN_TEXT}"
    if select_optional(node, fixed) is not None or fallback_flex is None:
        return select_duration(node, fixed)

    flex = f"{flex_runs(fallback_flex)}[0].{RUN_TEXT}"
    if select_optional(node, flex) is None:
        raise PathNotFoundError(fixed)
    return select_duration(node, flex)
