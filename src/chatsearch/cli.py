"""Typer CLI for chatsearch — search and paginate commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from result import Err

from chatsearch.config import Config
from chatsearch.data.snapshot import StoreSnapshot, load_snapshot
from chatsearch.models.search import ChatResultsView, LoadMoreDirection, SearchQuery, SearchTier
from chatsearch.services.actions import RecordingActions
from chatsearch.services.container import ServiceContainer

app = typer.Typer(
    name="chatsearch",
    help="Chat search results over a snapshot of the client stores.",
    no_args_is_help=True,
)

SnapshotOption = Annotated[
    Path | None,
    typer.Option("--snapshot", help="Path to a store snapshot JSON file"),
]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load(config: Config, snapshot_path: Path | None) -> StoreSnapshot:
    loaded = load_snapshot(snapshot_path or config.snapshot_path)
    if isinstance(loaded, Err):
        typer.echo(f"Error: {loaded.err_value}", err=True)
        raise typer.Exit(code=1)
    return loaded.ok_value


@app.command()
def search(
    query: Annotated[str, typer.Argument(help="Search text")] = "",
    date: Annotated[str | None, typer.Option("--date", help="Date hint")] = None,
    snapshot: SnapshotOption = None,
    show_more_local: Annotated[
        bool, typer.Option("--show-more-local", help="Expand the chats section")
    ] = False,
    show_more_global: Annotated[
        bool, typer.Option("--show-more-global", help="Expand the global section")
    ] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print the view as JSON")] = False,
    verbose: VerboseOption = False,
) -> None:
    """Print the composite search view for a query."""
    _configure_logging(verbose)
    config = Config()
    container = ServiceContainer.create(config, _load(config, snapshot))
    service = container.search_service
    if show_more_local:
        service.toggle_show_more(SearchTier.LOCAL)
    if show_more_global:
        service.toggle_show_more(SearchTier.GLOBAL)

    result = service.search(SearchQuery(text=query or None, date=date))
    if isinstance(result, Err):
        typer.echo(f"Error: {result.err_value}", err=True)
        raise typer.Exit(code=1)

    view = result.ok_value
    if as_json:
        typer.echo(view.model_dump_json(indent=2))
        return
    _print_view(view)


@app.command()
def paginate(
    query: Annotated[str, typer.Argument(help="Search text")],
    events: Annotated[int, typer.Option("--events", help="Backward boundary events to fire")] = 1,
    snapshot: SnapshotOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Fire backward scroll boundary events and report the fetches issued."""
    _configure_logging(verbose)
    config = Config()
    actions = RecordingActions()
    container = ServiceContainer.create(config, _load(config, snapshot), actions=actions)
    service = container.search_service
    service.search(SearchQuery(text=query))

    issued = sum(
        1 for _ in range(events) if service.handle_load_more(LoadMoreDirection.BACKWARDS)
    )
    typer.echo(f"{issued} of {events} boundary events issued a message search request")
    for record in actions.records:
        typer.echo(f"  {record.name} {record.payload}")


def _print_view(view: ChatResultsView) -> None:
    if view.is_default:
        typer.echo("No active search: showing recent contacts.")
        return
    if view.date_suggestion:
        typer.echo(f"Date: {view.date_suggestion}")
    if view.nothing_found:
        typer.echo("No results.")
        return

    for window, heading in (
        (view.local_results, "Chats and contacts"),
        (view.global_results, "Global search"),
    ):
        if not window.total_count:
            continue
        suffix = f" ({len(window.items)} of {window.total_count})" if window.can_toggle else ""
        typer.echo(f"{heading}{suffix}")
        for chat_id in window.items:
            typer.echo(f"  {chat_id}")

    if view.messages:
        typer.echo("Messages")
        for found in view.messages:
            typer.echo(f"  [{found.chat.display_name}] {found.summary_text}")
