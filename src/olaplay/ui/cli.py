"""
olaplay CLI Module
Command-line interface for syncing, searching and browsing the music catalog.
"""

import argparse
from typing import List, Optional

from rich.console import Console

from ..clients.ola_api import OlaPlayClient
from ..clients.sync_source import SyncSource
from ..core.config import PROJECT_NAME, PROJECT_VERSION, CATALOG_CONFIG, ERROR_MESSAGES
from ..core.logger import get_logger, setup_logging
from ..models.track import SearchField
from ..services.artwork import ArtworkLoader
from ..services.browse_tree import BrowseTreeBuilder
from ..services.catalog import MusicCatalog
from ..utils.media_id import MEDIA_ID_ROOT
from .formatters import DisplayFormatters

logger = get_logger("ui.cli")


class OlaPlayCLI:
    """Main CLI class for the music catalog."""

    def __init__(self, source: Optional[SyncSource] = None, console: Optional[Console] = None):
        """
        Initialize the CLI.

        Args:
            source: Sync source to load from; defaults to the Ola Play API
            console: Rich console for output
        """
        self.source = source
        self.console = console or Console()
        self.formatters = DisplayFormatters(self.console)

    def create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser."""
        parser = argparse.ArgumentParser(
            prog=PROJECT_NAME,
            description=f"{PROJECT_NAME} - Music Catalog v{PROJECT_VERSION}",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  %(prog)s list
  %(prog)s search artist "victor"
  %(prog)s track 3f2a9c0d1e4b5a67 --artwork
  %(prog)s --favorite 3f2a9c0d1e4b5a67 browse __PLAYLIST__
            """
        )

        parser.add_argument(
            '--version',
            action='version',
            version=f'{PROJECT_NAME} {PROJECT_VERSION}'
        )
        parser.add_argument(
            '--url',
            help='Base URL of the track API (default: configured BASE_URL)'
        )
        parser.add_argument(
            '--log-level',
            choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
            help='Logging level'
        )
        parser.add_argument(
            '--favorite', '-f',
            action='append',
            default=[],
            metavar='ID',
            help='Mark a track id as favorite (repeatable)'
        )

        subparsers = parser.add_subparsers(
            dest='mode',
            help='Available modes',
            required=True
        )

        subparsers.add_parser('list', help='List every track in the catalog')
        subparsers.add_parser('shuffle', help='List every track in random order')

        search_parser = subparsers.add_parser('search', help='Search tracks by one attribute')
        search_parser.add_argument(
            'field',
            choices=[field.value for field in SearchField],
            help='Attribute to search'
        )
        search_parser.add_argument('query', help='Text to look for (case-insensitive)')

        track_parser = subparsers.add_parser('track', help='Show a single track')
        track_parser.add_argument('track_id', help='Track id')
        track_parser.add_argument(
            '--artwork',
            action='store_true',
            help='Download the cover art and attach it to the track'
        )

        browse_parser = subparsers.add_parser('browse', help='List the children of a browse node')
        browse_parser.add_argument(
            'media_id',
            nargs='?',
            default=MEDIA_ID_ROOT,
            help=f'Media id to browse (default: {MEDIA_ID_ROOT})'
        )

        return parser

    def _load(self, catalog: MusicCatalog) -> bool:
        with self.console.status("[bold cyan]Syncing music catalog...[/bold cyan]", spinner="dots"):
            catalog.load_catalog()
            return catalog.wait_until_loaded(CATALOG_CONFIG["LOAD_WAIT_TIMEOUT"])

    def run(self, args: List[str] = None) -> int:
        """
        Run the CLI with given arguments.

        Returns:
            Process exit code
        """
        parser = self.create_parser()
        parsed_args = parser.parse_args(args)

        if parsed_args.log_level:
            setup_logging(parsed_args.log_level)

        source = self.source or OlaPlayClient(base_url=parsed_args.url)
        catalog = MusicCatalog(source)
        try:
            if not self._load(catalog):
                self.console.print(f"[bold red]✗[/bold red] {ERROR_MESSAGES['SYNC_FAILED']}")
                return 1

            for track_id in parsed_args.favorite:
                catalog.set_favorite(track_id, True)

            return self._dispatch(parsed_args, catalog)
        except KeyboardInterrupt:
            self.console.print("\n[yellow]⚠[/yellow] Operation cancelled by user.")
            return 1
        finally:
            catalog.shutdown()

    def _dispatch(self, parsed_args: argparse.Namespace, catalog: MusicCatalog) -> int:
        if parsed_args.mode == 'list':
            self.formatters.display_tracks(catalog.get_all_tracks(), "ALL SONGS")
        elif parsed_args.mode == 'shuffle':
            self.formatters.display_tracks(catalog.get_shuffled_tracks(), "SHUFFLED")
        elif parsed_args.mode == 'search':
            results = catalog.search(parsed_args.field, parsed_args.query)
            self.formatters.display_tracks(
                results, f"{parsed_args.field.upper()} MATCHING \"{parsed_args.query}\""
            )
        elif parsed_args.mode == 'track':
            return self._show_track(catalog, parsed_args.track_id, parsed_args.artwork)
        elif parsed_args.mode == 'browse':
            builder = BrowseTreeBuilder(catalog)
            self.formatters.display_media_items(
                parsed_args.media_id, builder.get_children(parsed_args.media_id)
            )
        return 0

    def _show_track(self, catalog: MusicCatalog, track_id: str, artwork: bool) -> int:
        if catalog.get_track(track_id) is None:
            self.console.print(
                f"[bold red]✗[/bold red] {ERROR_MESSAGES['TRACK_NOT_FOUND'].format(track_id=track_id)}"
            )
            return 1

        if artwork and not ArtworkLoader(catalog).fetch(track_id):
            self.console.print("[yellow]⚠[/yellow] Could not load artwork for this track.")

        self.formatters.display_track(catalog.get_track(track_id), catalog.is_favorite(track_id))
        return 0
