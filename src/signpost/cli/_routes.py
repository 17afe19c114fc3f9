"""``signpost routes``: list registered routes."""

import argparse
import sys

from signpost.cli._resolve import resolve_router


def run_routes(args: argparse.Namespace) -> None:
    """Resolve ``args.router`` and print its route table."""
    try:
        router = resolve_router(args.router)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not len(router):
        print("No routes registered.")
        return

    sys.stdout.write(router.render(headers=args.headers))
