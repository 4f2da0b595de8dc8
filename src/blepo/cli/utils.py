"""Utility functions for CLI operations."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from blepo.domain.models.fetching import FetchBatchResult
from blepo.domain.models.queue import VideoQueue
from blepo.domain.models.video import Video, VideoNumber

console = Console()

QUIT = "quit"
PLAY = "play"
MARK_WATCHED = "mark"

PROMPT_TEXT = "Enter number to play, w<number> to mark watched, q to quit"


def create_spinner() -> Progress:
    """Create a transient Rich spinner for the fetch phase."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    )


def format_published(video: Video) -> str:
    """Publish date as YYYY-MM-DD, prefixed with ``~`` when approximate."""
    date = video.published_at.strftime("%Y-%m-%d")
    return f"~{date}" if video.is_approximate else date


def create_queue_table(queue: VideoQueue, title: str = "Unwatched videos") -> Table:
    """Create a table listing the queue with its selection numbers."""
    table = Table(title=title)
    table.add_column("#", justify="right", style="bold")
    table.add_column("Published", style="dim", no_wrap=True)
    table.add_column("Channel", style="cyan")
    table.add_column("Title")

    for number, video in queue.numbered():
        table.add_row(
            str(number), format_published(video), escape(video.channel_name), escape(video.title)
        )

    return table


def display_queue(queue: VideoQueue) -> None:
    """Print the queue, or a notice when it is empty."""
    if queue.is_empty:
        console.print("[dim]No unwatched videos.[/dim]")
        return
    console.print(create_queue_table(queue))


def display_failures(batch: FetchBatchResult) -> None:
    """List every channel that could not be fetched."""
    for channel, error in batch.failures:
        console.print(f"[yellow]⚠️  {escape(channel.name)}:[/yellow] {escape(str(error))}")


def display_error_summary(errors: list[str]) -> None:
    """Display configuration or processing errors."""
    if not errors:
        return

    console.print(Panel(
        "\n".join(f"• {escape(error)}" for error in errors),
        title="[red]❌ Errors Found[/red]",
        border_style="red"
    ))


def display_success_message(message: str) -> None:
    """Display a success message."""
    console.print(Panel(
        f"[green]{message}[/green]",
        title="[green]✅ Success[/green]",
        border_style="green"
    ))


def parse_choice(text: str) -> tuple[str, VideoNumber | None]:
    """
    Parse a line typed at the queue prompt.

    ``q`` or an empty line quits, ``<n>`` plays video n and ``w<n>`` marks
    video n watched.

    Returns:
        Tuple of the action and the selected number (None for quit)

    Raises:
        ValueError: If the input is not one of the accepted forms
    """
    choice = text.strip().lower()
    if choice in ("", "q"):
        return QUIT, None

    action = PLAY
    if choice.startswith("w"):
        action = MARK_WATCHED
        choice = choice[1:].strip()

    if not choice.isdigit():
        raise ValueError(f"Invalid input: {text.strip()!r}")
    return action, VideoNumber(int(choice))
