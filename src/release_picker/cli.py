"""CLI interface for release-picker."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from . import __version__, config
from .errors import Aborted, InputFailure, NoChanges
from .menu import Menu, print_results
from .results import ResultFormatError, dump_selection, load_result
from .types import Result

logger = logging.getLogger(__name__)

_err_console = None


def _error(msg: str) -> None:
    """Print to stderr with Rich markup support."""
    global _err_console
    if _err_console is None:
        _err_console = Console(stderr=True, highlight=False)
    _err_console.print(msg)


def _setup_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=debug)],
        force=True,
    )


def _resolve_verbosity(args, cfg: dict) -> int:
    if args.verbose is None:
        return config.get_verbosity(cfg)
    return config.clamp_verbosity(args.verbose)


def _load(source: str) -> Result:
    """Load a result set, exiting with a message on failure."""
    try:
        if source == "-":
            return load_result(sys.stdin)
        return load_result(Path(source))
    except (ResultFormatError, OSError) as e:
        logger.debug("Failed to load %s", source, exc_info=True)
        _error(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)


def cmd_show(args):
    """Print the result table without interaction."""
    cfg = config.load_config()
    result = _load(args.results)
    print_results(
        Console(highlight=False),
        result,
        _resolve_verbosity(args, cfg),
        theme=config.theme_from_config(cfg),
    )


def cmd_select(args):
    """Pick updates interactively and write the selection as JSON."""
    if args.results == "-":
        _error("[red]Error:[/red] select reads keys from the terminal; pass a file, not stdin.")
        sys.exit(1)

    cfg = config.load_config()
    result = _load(args.results)
    menu = Menu(
        result,
        _resolve_verbosity(args, cfg),
        console=Console(stderr=True, highlight=False),
        theme=config.theme_from_config(cfg),
    )

    try:
        selection = menu.run()
    except NoChanges as e:
        _error(escape(str(e)))
        return
    except (Aborted, InputFailure) as e:
        _error(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)

    total = sum(len(updates) for updates in selection.values())
    logger.debug("Selected %d update(s) across %d resource(s)", total, len(selection))

    text = dump_selection(selection)
    if args.output:
        output = Path(args.output)
        output.write_text(text + "\n")
        _error(f"Wrote {total} update(s) to [cyan]{escape(str(output))}[/cyan]")
    else:
        print(text)


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="release-picker",
        description="release-picker: Review and select pending container image updates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"release-picker {__version__}")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command")

    verbose_help = "Include skipped (-v) and ignored (-vv) resources"

    # show
    show_p = subparsers.add_parser("show", help="Print the result table")
    show_p.add_argument("results", help="Result set file (YAML or JSON), or - for stdin")
    show_p.add_argument("-v", "--verbose", action="count", default=None, help=verbose_help)
    show_p.set_defaults(func=cmd_show)

    # select
    select_p = subparsers.add_parser("select", help="Interactively select updates to release")
    select_p.add_argument("results", help="Result set file (YAML or JSON)")
    select_p.add_argument("-v", "--verbose", action="count", default=None, help=verbose_help)
    select_p.add_argument("-o", "--output", help="Write the selection here instead of stdout")
    select_p.set_defaults(func=cmd_select)

    return parser


def main(argv: list[str] | None = None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.debug)

    try:
        if hasattr(args, "func"):
            args.func(args)
        else:
            parser.print_help()
    except KeyboardInterrupt:
        print()
        sys.exit(130)
