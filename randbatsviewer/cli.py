"""Command-line front door for randbatsviewer.

Parses CLI options, configures logging, and loads the catalog. Then either
prints candidates / one rendered entry, or dispatches into the interactive
selector runtime.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from platformdirs import user_log_dir

from .catalog import DEFAULT_DATA_URL, load_catalog
from .errors import DataLoadFailure, RandbatsViewerError
from .render import detail_lines
from .runtime import run_selector
from .runtime.config import APP_NAME, load_data_url, load_theme_name
from .selector import SelectorController
from .ui_theme import available_theme_names, normalize_theme_name, resolve_theme

LOG_FILENAME = "randbatsviewer.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def _default_log_path() -> Path:
    return Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME


def configure_logging(level: str, log_file: Path | None) -> None:
    """Send log records to a file; the terminal belongs to the UI."""
    path = log_file if log_file is not None else _default_log_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        logging.basicConfig(filename=str(path), level=level.upper(), format=LOG_FORMAT)
    except OSError:
        logging.basicConfig(handlers=[logging.NullHandler()], level=level.upper())


def _normalize_base_url(url: str) -> str:
    return url if url.endswith("/") else url + "/"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse Pokemon Showdown random battle movesets in the terminal."
    )
    parser.add_argument("--url", default=None, help=f"Data base URL (default: {DEFAULT_DATA_URL}).")
    parser.add_argument("--category", default=None, help="Battle format to select on startup.")
    parser.add_argument("--query", default="", help="Initial search text.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--style", default=None, help="Pygments style name for structured values.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--list", action="store_true", help="Print matching entries for --category and exit.")
    parser.add_argument("--render", metavar="ENTRY", help="Print the detail view for ENTRY and exit.")
    parser.add_argument("--log-file", type=Path, default=None, help="Log file path.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: WARNING).",
    )
    return parser


def _load_controller(base_url: str) -> SelectorController:
    try:
        return SelectorController(load_catalog(base_url))
    except DataLoadFailure as exc:
        return SelectorController(exc)


def list_entries(controller: SelectorController, category: str, query: str) -> str:
    """Return matching entry names for ``category``/``query``, one per line."""
    controller.select_category(category)
    step = controller.set_query(query)
    return "".join(f"{name}\n" for name in step.state.candidates)


def render_entry(
    controller: SelectorController,
    category: str,
    entry: str,
    theme_name: str,
    no_color: bool,
    style: str | None,
) -> str:
    """Return the rendered detail view for one entry.

    Raises ``SystemExit`` when the entry is not part of ``category``.
    """
    controller.select_category(category)
    if entry not in controller.entry_names(category):
        raise SystemExit(f"Entry not found in {category}: {entry}")
    controller.pick(entry)
    selection = controller.current_selection()
    assert selection is not None
    theme = resolve_theme(theme_name, no_color)
    residue_style = None if no_color else (style or theme.residue_style)
    return "".join(f"{line}{theme.reset}\n" for line in detail_lines(selection, theme, residue_style))


def main() -> None:
    """Parse CLI arguments and run one non-interactive command or the TUI."""
    args = build_parser().parse_args()
    configure_logging(args.log_level, args.log_file)

    base_url = _normalize_base_url(args.url or load_data_url() or DEFAULT_DATA_URL)
    theme_name = normalize_theme_name(args.theme or load_theme_name())
    interactive = args.render is None and not args.list

    if not interactive and args.category is None:
        raise SystemExit("--list and --render require --category.")

    if interactive:
        sys.stderr.write("Loading...\n")
        sys.stderr.flush()
    controller = _load_controller(base_url)

    try:
        if args.list:
            if controller.load_error is not None:
                raise SystemExit(str(controller.load_error))
            sys.stdout.write(list_entries(controller, args.category, args.query))
            return
        if args.render is not None:
            if controller.load_error is not None:
                raise SystemExit(str(controller.load_error))
            no_color = args.no_color or not sys.stdout.isatty()
            sys.stdout.write(render_entry(controller, args.category, args.render, theme_name, no_color, args.style))
            return

        if controller.usable and args.category is not None and args.category not in controller.categories:
            raise SystemExit(f"Unknown category: {args.category}")
        run_selector(
            controller,
            theme_name,
            no_color=args.no_color,
            residue_style=args.style,
            category=args.category,
            query=args.query,
        )
    except RandbatsViewerError as exc:
        logger.error("%s", exc)
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
