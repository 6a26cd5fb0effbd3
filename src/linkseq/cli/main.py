"""CLI entry point for linkseq.

Invoked as::

    linkseq [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m linkseq.cli.main

Commands
--------
bag        Add whitespace-separated tokens to a Bag and print it
queue      Enqueue tokens, dequeue on "-", and print what is left
kinds      List registered collection kinds
version    Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from linkseq.containers.base import LinkedCollection

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

DEQUEUE_TOKEN = "-"

OUTPUT_FORMATS = ["text", "render", "json", "yaml"]


def _read_tokens(path: str | None) -> list[str]:
    """Read whitespace-separated tokens from ``path`` or stdin, exiting on error."""
    if path is None or path == "-":
        text = sys.stdin.read()
    else:
        try:
            text = Path(path).read_text(encoding="utf-8")
        except FileNotFoundError:
            err_console.print(f"[red]Error:[/red] File not found: {path}")
            sys.exit(1)
        except OSError as exc:
            err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
            sys.exit(1)
    tokens = text.split()
    logger.debug("Read %d token(s) from %s", len(tokens), path or "<stdin>")
    return tokens


def _emit(text: str) -> None:
    """Print data output verbatim, with Rich markup and wrapping disabled."""
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def _emit_document(collection: "LinkedCollection[object]", output_format: str) -> None:
    from linkseq.serializer import CollectionSerializer

    serializer = CollectionSerializer()
    if output_format == "json":
        _emit(serializer.to_json(collection, indent=2))
    else:
        _emit(serializer.to_yaml(collection).rstrip("\n"))


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="linkseq")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Bag and Queue collections backed by singly linked chains."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from linkseq import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]linkseq[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# kinds command
# ---------------------------------------------------------------------------


@cli.command(name="kinds")
@click.option(
    "--entry-points",
    "load_entry_points",
    is_flag=True,
    default=False,
    help="Also load kinds declared by installed packages",
)
def kinds_command(load_entry_points: bool) -> None:
    """List registered collection kinds."""
    from linkseq.registry import container_registry

    if load_entry_points:
        container_registry.load_entrypoints()

    table = Table(title="Collection kinds")
    table.add_column("Kind", style="bold")
    table.add_column("Class")
    for name in container_registry.list_kinds():
        cls = container_registry.get(name)
        table.add_row(name, f"{cls.__module__}.{cls.__qualname__}")
    console.print(table)


# ---------------------------------------------------------------------------
# bag command
# ---------------------------------------------------------------------------


@cli.command(name="bag")
@click.argument("file", required=False, type=click.Path(exists=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default="text",
    help="How to print the final bag",
)
def bag_command(file: str | None, output_format: str) -> None:
    """Add every token to a Bag and print its contents.

    FILE holds whitespace-separated tokens; reads stdin when omitted or "-".

    \b
        echo "to be or not" | linkseq bag
        linkseq bag words.txt --format json
    """
    from linkseq import Bag

    bag: Bag[str] = Bag()
    for token in _read_tokens(file):
        bag.add(token)

    output_format = output_format.lower()
    if output_format == "text":
        _emit(f"size of bag = {bag.count}")
        for item in bag:
            _emit(item)
    elif output_format == "render":
        _emit(str(bag))
    else:
        _emit_document(bag, output_format)


# ---------------------------------------------------------------------------
# queue command
# ---------------------------------------------------------------------------


@cli.command(name="queue")
@click.argument("file", required=False, type=click.Path(exists=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default="text",
    help="How to print what is left on the queue",
)
def queue_command(file: str | None, output_format: str) -> None:
    """Enqueue tokens, dequeuing and printing one item for each "-".

    FILE holds whitespace-separated tokens; reads stdin when omitted or "-".
    A "-" on an empty queue prints nothing.

    \b
        echo "to be or not to - be - - that - - - is" | linkseq queue
    """
    from linkseq import Queue

    queue: Queue[str] = Queue()
    for token in _read_tokens(file):
        if token != DEQUEUE_TOKEN:
            queue.enqueue(token)
            continue
        if queue.is_empty():
            logger.debug("Ignoring %r on an empty queue", DEQUEUE_TOKEN)
            continue
        _emit(str(queue.dequeue()))

    output_format = output_format.lower()
    if output_format == "text":
        _emit(f"({queue.count} left on queue)")
    elif output_format == "render":
        _emit(str(queue))
    else:
        _emit_document(queue, output_format)


if __name__ == "__main__":
    cli()
