"""
Command-line entry point for vimi.

Parses flags, resolves roots and configuration, then hands a single run to
the Launcher. Fatal errors are reported on stderr with exit status 1.
"""

import sys
import argparse
import logging
from typing import Iterable, Optional

import yaml
from pydantic import ValidationError

from . import __version__
from .config import load_config
from .errors import VimiError
from .launcher import Launcher
from .models.search_options import ItemType, RunPlan, SearchOptions
from .roots import resolve_roots


logger = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"depth must be >= 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vimi",
        description="Fuzzy-find and open files in Neovim.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help=(
            "Search roots, passed to the enumerator as given; blank roots are "
            "rejected (default: $PROJECT_DIR, $WORK_DIR, $ASSET_DIR, else .)"
        ),
    )
    parser.add_argument("-p", "--preview", action="store_true", help="Enable preview")
    parser.add_argument(
        "-f",
        "--dirs",
        action="store_true",
        help="Search directories instead of files and print the selection",
    )
    parser.add_argument(
        "-d",
        "--depth",
        type=_non_negative_int,
        default=0,
        help="Search depth (1 = non-recursive, 0 = unlimited)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the resolved commands as YAML without running the picker",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def render_plan(plan: RunPlan) -> str:
    """Render a run plan as a YAML document."""
    return yaml.safe_dump(plan.to_dict(), default_flow_style=False, sort_keys=False)


def main(argv: Optional[Iterable[str]] = None, launcher: Optional[Launcher] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    setup_logging(args.verbose)
    
    try:
        if launcher is None:
            launcher = Launcher(config=load_config().config)
        
        try:
            options = SearchOptions(
                item_type=ItemType.DIRECTORY if args.dirs else ItemType.FILE,
                depth=args.depth,
                roots=resolve_roots(args.paths, env_vars=launcher.config.root_env_vars),
            )
        except ValidationError as e:
            parser.error(f"invalid search options: {e.errors()[0]['msg']}")
        
        if args.dry_run:
            sys.stdout.write(render_plan(launcher.plan(options, preview=args.preview)))
            return 0
        
        return launcher.run(options, preview=args.preview)
    except VimiError as e:
        logger.debug(f"Run aborted: {e!r}")
        print(f"vimi: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
