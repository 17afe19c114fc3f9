"""Signpost CLI: inspect and exercise a router from the shell.

Entry point registered as ``signpost`` in ``pyproject.toml``::

    [project.scripts]
    signpost = "signpost.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``signpost`` command."""
    parser = argparse.ArgumentParser(
        prog="signpost",
        description="Signpost: framework-agnostic URL routing.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log routing decisions to stderr")
    subparsers = parser.add_subparsers(dest="command")

    # -- signpost routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument("router", help="Import string (e.g. myapp.urls:router)")
    routes_parser.add_argument("--headers", action="store_true", help="Print a header row")

    # -- signpost match ---------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Match a path against a router")
    match_parser.add_argument("router", help="Import string (e.g. myapp.urls:router)")
    match_parser.add_argument("path", help="Request path (e.g. /entries/1916)")
    match_parser.add_argument("-m", "--method", default=None, help="Request method (e.g. GET)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        from signpost.cli._logging import enable_debug_logging

        enable_debug_logging()

    if args.command == "routes":
        from signpost.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from signpost.cli._match import run_match

        run_match(args)
