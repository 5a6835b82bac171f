#!/usr/bin/env python3
"""Command-line interface for ytmparse.

This CLI is primarily for debugging response captures and schema drift.
For production use, import ytmparse as a library.
"""

import json
import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from functools import partial
from pathlib import Path
from typing import Any

import click
from pydantic import BaseModel
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ytmparse.assemblers import (
    assemble_album_track,
    assemble_all,
    assemble_artist_album,
    assemble_artist_search_result,
    assemble_artist_song,
    assemble_artist_video,
    assemble_each,
    assemble_episode,
    assemble_featured_playlist,
    assemble_library_album,
    assemble_library_artist,
    assemble_library_community_playlist,
    assemble_library_podcast,
    assemble_library_song,
    assemble_library_subscription,
    assemble_playlist_track,
    assemble_queue_track,
    assemble_related_artist,
    has_key,
    has_play_button,
    select_streaming_data,
)
from ytmparse.assemblers.batch import ItemFilter
from ytmparse.assemblers.common import MULTI_ROW, PANEL_VIDEO, RESPONSIVE, TWO_ROW
from ytmparse.client import YTMusicTransport
from ytmparse.exceptions import AssemblyError, YTParseError
from ytmparse.models import (
    Album,
    Artist,
    ArtistSearchResult,
    AudioStream,
    BatchPolicy,
    CommunityPlaylist,
    Episode,
    Podcast,
    Song,
    StreamingData,
    Subscription,
    Video,
)
from ytmparse.services import LibraryService
from ytmparse.settings import get_settings

logger = logging.getLogger("ytmparse")

SHELF = "..musicShelfRenderer.contents"
GRID = "..gridRenderer.items"
CAROUSEL = "..musicCarouselShelfRenderer.contents"
QUEUE = "..playlistPanelRenderer.contents"

IS_RESPONSIVE = has_key(RESPONSIVE)
IS_TWO_ROW = has_key(TWO_ROW)
IS_MULTI_ROW = has_key(MULTI_ROW)


@dataclass(frozen=True)
class ListKind:
    """How to find and assemble the items of one list surface."""

    assembler: Callable[..., Any]
    path: str
    where: ItemFilter
    needs_clock: bool = False
    needs_default_creator: bool = False


LIST_KINDS: dict[str, ListKind] = {
    "library-song": ListKind(assemble_library_song, SHELF, IS_RESPONSIVE),
    "library-album": ListKind(assemble_library_album, GRID, IS_TWO_ROW),
    "library-artist": ListKind(assemble_library_artist, SHELF, IS_RESPONSIVE),
    "subscription": ListKind(assemble_library_subscription, SHELF, IS_RESPONSIVE),
    "podcast": ListKind(assemble_library_podcast, GRID, has_play_button),
    "playlist": ListKind(
        assemble_library_community_playlist,
        GRID,
        has_play_button,
        needs_default_creator=True,
    ),
    "episode": ListKind(assemble_episode, SHELF, IS_MULTI_ROW, needs_clock=True),
    "artist-song": ListKind(assemble_artist_song, SHELF, IS_RESPONSIVE),
    "artist-album": ListKind(assemble_artist_album, CAROUSEL, IS_TWO_ROW),
    "artist-video": ListKind(assemble_artist_video, CAROUSEL, IS_TWO_ROW),
    "featured-playlist": ListKind(assemble_featured_playlist, CAROUSEL, IS_TWO_ROW),
    "related-artist": ListKind(assemble_related_artist, CAROUSEL, IS_TWO_ROW),
    "artist-search-result": ListKind(
        assemble_artist_search_result, SHELF, IS_RESPONSIVE
    ),
    "album-track": ListKind(assemble_album_track, SHELF, IS_RESPONSIVE),
    "playlist-track": ListKind(assemble_playlist_track, SHELF, IS_RESPONSIVE),
    "queue-track": ListKind(assemble_queue_track, QUEUE, has_key(PANEL_VIDEO)),
}

LIBRARY_SURFACES = (
    "songs",
    "albums",
    "artists",
    "subscriptions",
    "playlists",
    "podcasts",
    "episodes",
)


def setup_logging(
    verbose: bool = False, console: Console | None = None, level: str = "WARNING"
) -> None:
    """Configure logging with Rich handler.

    Clears existing handlers first, so it can be called again to switch
    consoles.

    Args:
        verbose: If True, set log level to DEBUG. Otherwise use ``level``.
        console: Optional Console instance to use for RichHandler.
        level: Log level name used when not verbose.
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = RichHandler(
        rich_tracebacks=True,
        show_path=False,
        console=console,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root_logger.setLevel(logging.DEBUG if verbose else level)
    root_logger.addHandler(handler)


# ============================================================================
# FORMATTING
# ============================================================================


def format_duration(value: Any) -> str:
    """Format a timedelta as M:SS or H:MM:SS."""
    if value is None:
        return ""
    total = int(value.total_seconds())
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def describe(entity: BaseModel) -> str:
    """One-line summary of the fields that differ per entity kind."""
    match entity:
        case Song():
            parts = [entity.artist_display]
            if entity.album:
                parts.append(entity.album.name)
            if entity.plays_info:
                parts.append(entity.plays_info)
            parts.append(format_duration(entity.duration))
            if entity.is_explicit:
                parts.append("[E]")
            return " · ".join(p for p in parts if p)
        case Album():
            year = str(entity.release_year) if entity.release_year else "?"
            artists = ", ".join(a.name for a in entity.artists)
            return " · ".join(p for p in (entity.album_type.value, year, artists) if p)
        case Artist():
            if entity.song_count is not None:
                return f"{entity.song_count} songs"
            return entity.subscribers_info or ""
        case Subscription() | ArtistSearchResult():
            return entity.subscribers_info
        case CommunityPlaylist():
            count = ""
            if entity.song_count is not None:
                count = f"{entity.song_count} songs"
            return " · ".join(p for p in (entity.creator.name, count) if p)
        case Podcast():
            return entity.host.name
        case Episode():
            released = ""
            if entity.released_at:
                released = entity.released_at.date().isoformat()
            podcast = entity.podcast.name if entity.podcast else ""
            parts = (podcast, released, entity.duration_info or "")
            return " · ".join(p for p in parts if p)
        case Video():
            artists = ", ".join(a.name for a in entity.artists)
            return f"{artists} · {entity.views_info}"
    return ""


def print_entities(console: Console, title: str, entities: list[BaseModel]) -> None:
    """Print assembled entities as a table."""
    table = Table(title=f"[bold]{title}[/bold]", title_justify="left")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Name", style="bold cyan", overflow="fold")
    table.add_column("ID", style="dim", overflow="fold")
    table.add_column("Details", overflow="fold")

    for i, entity in enumerate(entities, 1):
        table.add_row(
            str(i),
            getattr(entity, "name", ""),
            getattr(entity, "id", None) or "",
            describe(entity),
        )
    console.print(table)


def print_errors(console: Console, errors: list[AssemblyError]) -> None:
    """Print per-item assembly failures."""
    if not errors:
        return
    console.print()
    console.print("[red]Malformed items:[/red]")
    for error in errors:
        console.print(f"  [red]- #{error.index}: {error.cause.message}[/red]")


def print_streams(console: Console, data: StreamingData) -> None:
    """Print classified streams as a table."""
    table = Table(title="[bold]Adaptive streams[/bold]", title_justify="left")
    table.add_column("itag", justify="right")
    table.add_column("Kind", style="cyan")
    table.add_column("Container")
    table.add_column("Codecs", style="dim")
    table.add_column("Bitrate", justify="right")
    table.add_column("Quality")
    table.add_column("Size", justify="right")

    for stream in data.streams:
        if isinstance(stream, AudioStream):
            quality = f"{stream.sample_rate} Hz · {stream.channels} ch"
        else:
            quality = f"{stream.quality_label} · {stream.width}x{stream.height}"
        size = str(stream.content_length) if stream.is_content_length_known else "?"
        table.add_row(
            str(stream.itag),
            stream.container.kind.value,
            stream.container.format,
            stream.container.codecs,
            f"{stream.bitrate // 1000} kbps",
            quality,
            size,
        )

    console.print(table)
    if data.rejected:
        console.print(
            f"[yellow]{len(data.rejected)} stream(s) of unsupported kind left out: "
            f"{', '.join(r.mime_type for r in data.rejected)}[/yellow]"
        )


def dump_json(entities: list[BaseModel]) -> None:
    data = [e.model_dump(mode="json") for e in entities]
    json.dump(data, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")


def load_document(path: Path) -> Any:
    """Load a captured response document.

    Raises:
        click.ClickException: If the file is not valid JSON.
    """
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid JSON in {path}: {e}") from e


# ============================================================================
# COMMANDS
# ============================================================================


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Assemble YouTube Music entities from InnerTube responses."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    setup_logging(verbose=verbose, level=get_settings().log_level)


@main.command(name="inspect")
@click.argument("file", type=click.Path(exists=True, path_type=Path), metavar="FILE")
@click.option(
    "-k",
    "--kind",
    type=click.Choice(sorted(LIST_KINDS)),
    required=True,
    help="Kind of list item to assemble.",
)
@click.option("-p", "--path", "path", help="Override the path to the item list.")
@click.option(
    "--isolate",
    is_flag=True,
    help="Assemble every item that can be, and list the malformed ones.",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def inspect_cmd(
    file: Path, kind: str, path: str | None, isolate: bool, as_json: bool
) -> None:
    """Assemble the items of a captured response document.

    \b
    Examples:
      ytmparse inspect liked_songs.json -k library-song
      ytmparse inspect artist.json -k related-artist -p "..items"
      ytmparse inspect albums.json -k library-album --isolate
    """
    console = Console()
    list_kind = LIST_KINDS[kind]
    document = load_document(file)
    assembler = list_kind.assembler
    if list_kind.needs_clock:
        assembler = partial(assembler, now=datetime.now(UTC))
    if list_kind.needs_default_creator:
        default_creator = get_settings().default_creator_name
        assembler = partial(assembler, default_creator=default_creator)
    list_path = path or list_kind.path
    where = list_kind.where

    try:
        if isolate:
            result = assemble_each(document, list_path, assembler, where=where)
            entities, errors = result.items, result.errors
        else:
            entities = assemble_all(document, list_path, assembler, where=where)
            errors = []
    except YTParseError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e

    if as_json:
        dump_json(entities)
    else:
        print_entities(console, f"{kind} ({len(entities)})", entities)
    print_errors(Console(stderr=True), errors)


@main.command(name="streams")
@click.argument("file", type=click.Path(exists=True, path_type=Path), metavar="FILE")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def streams_cmd(file: Path, as_json: bool) -> None:
    """Classify the adaptive streams of a captured player response.

    \b
    Examples:
      ytmparse streams player.json
      ytmparse streams player.json --json
    """
    console = Console()
    document = load_document(file)
    try:
        data = select_streaming_data(document, datetime.now(UTC))
    except YTParseError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e

    if as_json:
        json.dump(data.model_dump(mode="json"), sys.stdout, indent=2)
        sys.stdout.write("\n")
    else:
        print_streams(console, data)


@main.command(name="library")
@click.argument("surface", type=click.Choice(LIBRARY_SURFACES), metavar="SURFACE")
@click.option(
    "--cookies",
    type=click.Path(exists=True, path_type=Path),
    help="Path to cookies.txt for authentication.",
)
@click.option(
    "--isolate",
    is_flag=True,
    help="Skip malformed items instead of failing.",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def library_cmd(
    surface: str, cookies: Path | None, isolate: bool, as_json: bool
) -> None:
    """Fetch and assemble a library surface of the signed-in account.

    SURFACE is one of: songs, albums, artists, subscriptions, playlists,
    podcasts, episodes.

    \b
    Examples:
      ytmparse library songs --cookies cookies.txt
      ytmparse library playlists --isolate --json
    """
    console = Console()
    settings = get_settings()
    config = settings.parser_config
    if isolate:
        config = replace(config, batch_policy=BatchPolicy.ISOLATE)

    try:
        transport = YTMusicTransport(
            config=settings.transport_config,
            cookies_path=cookies or settings.cookies_file,
        )
        service = LibraryService(transport, config)
        entities = getattr(service, f"get_{surface}")()
    except YTParseError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e
    except Exception as e:
        logger.exception("Unexpected error")
        raise click.ClickException(f"Unexpected error: {e}") from e

    if as_json:
        dump_json(entities)
    else:
        print_entities(console, f"Library {surface} ({len(entities)})", entities)


if __name__ == "__main__":
    main()
