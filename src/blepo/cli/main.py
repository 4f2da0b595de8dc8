"""Main CLI interface for blepo."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click
from rich.markup import escape
from rich.panel import Panel

from blepo import __version__
from blepo.cli.utils import (
    MARK_WATCHED,
    PROMPT_TEXT,
    QUIT,
    console,
    create_spinner,
    display_error_summary,
    display_failures,
    display_queue,
    display_success_message,
    parse_choice,
)
from blepo.domain.exceptions import BlepoError, ConfigurationError, SelectionError
from blepo.domain.models.queue import VideoQueue
from blepo.infrastructure.config.yaml_provider import DEFAULT_CONFIG_PATH
from blepo.infrastructure.container import (
    Container,
    create_container,
    create_http_client,
    get_build_queue_use_case,
    get_configuration_provider,
    get_player,
    get_validate_config_use_case,
    get_watch_video_use_case,
)
from blepo.infrastructure.logging_config import configure_logging


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="blepo")
@click.option(
    "--config",
    "-c",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="BLEPO_CONFIG",
    default=str(DEFAULT_CONFIG_PATH),
    help="Path to configuration file",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
@click.pass_context
def cli(ctx: click.Context, config: Path, verbose: bool) -> None:
    """
    blepo - watch new uploads from your YouTube subscriptions.

    Lists recent, unwatched videos from the configured channels (Shorts
    excluded) and plays the one you pick. Runs `watch` when no command
    is given.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config
    ctx.obj["verbose"] = verbose

    if ctx.invoked_subcommand is None:
        ctx.invoke(watch)


@cli.command()
@click.pass_context
def watch(ctx: click.Context) -> None:
    """Show unwatched videos and pick one to play."""
    container = _load_container(ctx)
    verbose = ctx.obj["verbose"]

    try:
        get_player(container).check_dependencies()
        queue = asyncio.run(_build_queue(container))
    except BlepoError as e:
        _fail(e, verbose)

    _display_queue_with_failures(queue)
    if queue.is_empty:
        return

    try:
        _prompt_loop(container, queue)
    except BlepoError as e:
        _fail(e, verbose)


@cli.command(name="list")
@click.pass_context
def list_videos(ctx: click.Context) -> None:
    """Print unwatched videos without prompting."""
    container = _load_container(ctx)

    try:
        queue = asyncio.run(_build_queue(container))
    except BlepoError as e:
        _fail(e, ctx.obj["verbose"])

    _display_queue_with_failures(queue)


@cli.command()
@click.pass_context
def validate(ctx: click.Context) -> None:
    """Validate configuration and check that external tools are installed."""
    container = _load_container(ctx)
    config_provider = get_configuration_provider(container)

    console.print(Panel(
        "[blue]🔍 Configuration Validation[/blue]\n"
        f"Checking {ctx.obj['config_path']}...",
        title="Validation",
        border_style="blue"
    ))

    settings = config_provider.get_fetch_settings()
    console.print(f"✅ Found {len(config_provider.get_channels())} configured channels")
    console.print(f"✅ Fetch window: {config_provider.get_fetch_window().days} days")
    console.print(f"✅ Data directory: {config_provider.get_data_dir()}")
    console.print(f"✅ Player: {config_provider.get_player_command()}")
    console.print(f"✅ yt-dlp: {settings.ytdlp_path}")
    console.print(f"✅ Shorts detection: {'on' if settings.detect_shorts else 'off'}")

    errors = get_validate_config_use_case(container).execute()
    if errors:
        display_error_summary(errors)
        sys.exit(1)

    display_success_message("Configuration is valid")


def _load_container(ctx: click.Context) -> Container:
    """Load configuration and set up logging, exiting on configuration errors."""
    verbose = ctx.obj["verbose"]
    container = create_container(ctx.obj["config_path"])

    try:
        config_provider = get_configuration_provider(container)
    except ConfigurationError as e:
        console.print(f"[red]❌ Configuration Error:[/red] {escape(str(e))}")
        sys.exit(1)

    configure_logging(config_provider.get_logging_config(), verbose)
    if verbose:
        console.print(f"[dim]Using configuration: {ctx.obj['config_path']}[/dim]")
    return container


async def _build_queue(container: Container) -> VideoQueue:
    """Fetch all channels behind a spinner, sharing one HTTP client."""
    async with create_http_client(container) as client:
        use_case = get_build_queue_use_case(container, client)
        with create_spinner() as progress:
            progress.add_task("Fetching videos...", total=None)
            return await use_case.execute()


def _display_queue_with_failures(queue: VideoQueue) -> None:
    display_queue(queue)
    if queue.batch.has_failures:
        console.print()
        display_failures(queue.batch)


def _prompt_loop(container: Container, queue: VideoQueue) -> None:
    """Read choices until a video is played or the user quits."""
    use_case = get_watch_video_use_case(container)

    while True:
        console.print()
        text = click.prompt(PROMPT_TEXT, default="", show_default=False)

        try:
            action, number = parse_choice(text)
            if action == QUIT:
                return
            video = queue.select(number)
        except (ValueError, SelectionError) as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            continue

        if action == MARK_WATCHED:
            use_case.mark_watched(video)
            console.print(f"[green]✅ Marked as watched:[/green] {escape(video.title)}")
            continue

        console.print(f"▶️  Playing: {escape(video.title)}")
        use_case.play(video)
        return


def _fail(error: BlepoError, verbose: bool) -> None:
    console.print(f"[red]❌ Error:[/red] {escape(str(error))}")
    if verbose and error.cause is not None:
        console.print(f"[dim]Caused by: {escape(repr(error.cause))}[/dim]")
    sys.exit(1)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
