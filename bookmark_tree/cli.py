"""
BookmarkTree - CLI

Command-line interface for converting Netscape bookmarks exports to JSON.

Usage:
    python -m bookmark_tree.cli convert --file ~/bookmarks.html
    python -m bookmark_tree.cli stats --file ~/bookmarks.html
"""

import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import get_config
from .errors import BookmarkTreeError, DocumentParseError, DocumentReadError
from .netscape_parser import NetscapeParser
from .tree_builder import TreeBuilder

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def setup_logging(level: str, fmt: str) -> None:
    """Send log records to stderr so stdout only carries the JSON document"""
    logging.basicConfig(
        level=level.upper(),
        format=fmt,
        stream=sys.stderr,
        force=True,
    )


@contextmanager
def exit_on_error():
    """Print read, parse and build errors in red and exit with status 1"""
    try:
        yield
    except (FileNotFoundError, DocumentReadError) as e:
        err_console.print(f"[red]Error reading file:[/red] {escape(str(e))}")
        sys.exit(1)
    except DocumentParseError as e:
        err_console.print(f"[red]Error parsing HTML:[/red] {escape(str(e))}")
        sys.exit(1)
    except BookmarkTreeError as e:
        err_console.print(f"[red]Error building tree:[/red] {escape(str(e))}")
        sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--log-level", "-l",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (default: LOG_LEVEL or WARNING)"
)
def cli(log_level: Optional[str]):
    """BookmarkTree - Netscape bookmarks to JSON converter"""
    cfg = get_config()
    setup_logging(log_level or cfg.app.log_level, cfg.app.log_format)


@cli.command()
@click.option(
    "--file", "-f",
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the bookmarks HTML export file (default: BOOKMARKS_FILE or bookmarks.html)"
)
@click.option(
    "--indent", "-i",
    default=None,
    type=click.IntRange(min=0),
    help="Indent the JSON output by this many spaces (default: compact)"
)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail on duplicate folder titles or multiple root folders"
)
def convert(
    file: Optional[Path],
    indent: Optional[int],
    strict: bool,
):
    """
    Convert a bookmarks export into a JSON tree on stdout.

    Folders become objects with a "bookmarks" list, links carry a "url".
    """
    cfg = get_config()
    file = file or Path(cfg.input.bookmarks_file)
    indent = indent if indent is not None else cfg.output.json_indent
    strict = strict or cfg.output.strict_titles

    logger.info(f"Converting {file}")

    with exit_on_error():
        records = NetscapeParser(file, encoding=cfg.input.encoding).parse()
        builder = TreeBuilder(records, strict=strict)
        tree = builder.build()

    click.echo(tree.to_json(indent=indent))

    if builder.root is None:
        err_console.print("[red]Error:[/red] Root folder not found")
        sys.exit(1)


@cli.command()
@click.option(
    "--file", "-f",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the bookmarks HTML export file"
)
def stats(file: Path):
    """
    Show statistics about a bookmarks file without converting it.

    Useful for spotting duplicate folder titles and folders that would be
    dropped from the tree.
    """
    cfg = get_config()
    with exit_on_error():
        parser = NetscapeParser(file, encoding=cfg.input.encoding)
        stats = parser.get_stats()

    console.print(f"\n[bold blue]Bookmarks File Statistics[/bold blue]")
    console.print(f"File: {stats['file_path']}")
    console.print()

    table = Table(title="Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Count", justify="right", style="green")

    table.add_row("Folders in file", str(stats["total_folders"]))
    table.add_row("Links in file", str(stats["total_links"]))
    table.add_row("Folders in tree", str(stats["tree_folders"]))
    table.add_row("Links in tree", str(stats["tree_links"]))
    table.add_row("Root folders", str(len(stats["root_candidates"])))
    table.add_row("Merged duplicates", str(stats["merged"]))
    table.add_row("Unreachable folders", str(len(stats["unreachable"])))

    console.print(table)

    if not stats["root_found"]:
        console.print("[yellow]No root folder found in the bookmarks file.[/yellow]")

    if stats["duplicate_titles"]:
        console.print()
        console.print("[yellow]Duplicate folder titles:[/yellow]")
        for title, count in stats["duplicate_titles"].items():
            console.print(f"  - {escape(repr(title))} x{count}")

    unreachable = stats["unreachable"]
    if unreachable:
        console.print()
        console.print("[yellow]Folders not reachable from the root:[/yellow]")
        for folder in unreachable[:10]:
            console.print(
                f"  - {escape(repr(folder['title']))} (parent {escape(repr(folder['parent_title']))})"
            )
        if len(unreachable) > 10:
            console.print(f"  ... and {len(unreachable) - 10} more")


def main():
    """Entry point for the CLI"""
    cli()


if __name__ == "__main__":
    main()
