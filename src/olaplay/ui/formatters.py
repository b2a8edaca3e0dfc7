"""
Display Formatters Module
Handles formatting and displaying of tracks and browse nodes.
"""

from typing import List, Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich.align import Align
from rich import box

from ..models.browse import MediaItem
from ..models.track import Track


class DisplayFormatters:
    """Formatters for displaying catalog contents."""

    def __init__(self, console: Console):
        self.console = console

    def create_header_panel(self, title: str, subtitle: Optional[str] = None) -> Panel:
        """Create a styled header panel."""
        header_text = Text(title, style="bold cyan")
        if subtitle:
            header_text.append(f"\n{subtitle}", style="dim")
        return Panel(
            Align.center(header_text),
            border_style="cyan",
            box=box.ROUNDED,
            padding=(1, 2)
        )

    def _print_header(self, title: str, count: int, noun: str):
        self.console.print()
        self.console.print(self.create_header_panel(
            title,
            f"{count} {noun}{'s' if count != 1 else ''}"
        ))
        self.console.print()

    def display_tracks(self, tracks: List[Track], title: str = "TRACKS"):
        """Display tracks in a table."""
        if not tracks:
            self.console.print("[bold red]✗[/bold red] No tracks found.")
            return

        self._print_header(f"🎵 {title}", len(tracks), "track")

        table = Table(
            show_header=True,
            header_style="bold magenta",
            box=box.ROUNDED,
            border_style="blue",
        )
        table.add_column("#", style="bold white", width=4, justify="center")
        table.add_column("Title", style="white", width=30)
        table.add_column("Artist", style="green", width=30, no_wrap=False)
        table.add_column("Genre", style="yellow", width=15)
        table.add_column("Id", style="dim", width=18)

        for index, track in enumerate(tracks, 1):
            table.add_row(
                str(index),
                track.title or "Unknown Title",
                track.artist or "Unknown Artist",
                track.genre or "-",
                track.id,
            )

        self.console.print(table)

    def display_track(self, track: Track, favorite: bool = False):
        """Display the details of a single track."""
        table = Table(show_header=False, box=box.SIMPLE)
        table.add_column("Field", style="bold cyan")
        table.add_column("Value", style="white")
        table.add_row("Id", track.id)
        table.add_row("Title", track.title)
        table.add_row("Artist", track.artist)
        table.add_row("Album", track.album or "-")
        table.add_row("Genre", track.genre or "-")
        table.add_row("Audio", track.audio_url)
        table.add_row("Cover", track.cover_image_url or "-")
        if track.has_artwork:
            table.add_row("Artwork", f"{len(track.art)} bytes (icon {len(track.icon)} bytes)")
        table.add_row("Favorite", "★" if favorite else "-")
        self.console.print(table)

    def display_media_items(self, media_id: str, items: List[MediaItem]):
        """Display the children of a browse node."""
        if not items:
            self.console.print(f"[bold red]✗[/bold red] Nothing to browse under {media_id}.")
            return

        self._print_header(f"📂 {media_id}", len(items), "item")

        table = Table(
            show_header=True,
            header_style="bold magenta",
            box=box.ROUNDED,
            border_style="blue",
        )
        table.add_column("", width=2, justify="center")
        table.add_column("Title", style="white", width=30)
        table.add_column("Subtitle", style="green", width=30)
        table.add_column("Media Id", style="dim")

        for item in items:
            marker = "▸" if item.is_browsable else "♪"
            table.add_row(marker, item.title, item.subtitle, item.media_id)

        self.console.print(table)
