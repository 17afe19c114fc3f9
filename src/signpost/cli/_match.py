"""``signpost match``: resolve one path and print the result as JSON.

Exits 1 and reports the status (404 or 405) when nothing matches.
"""

import argparse
import json
import sys

from signpost.cli._resolve import resolve_router
from signpost.errors import HTTP_METHOD_NOT_ALLOWED


def run_match(args: argparse.Namespace) -> None:
    try:
        router = resolve_router(args.router)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    result = router.match(args.path, args.method)
    if result is None:
        line = f"{router.error}: no route for {args.method or '*'} {args.path}"
        if router.error == HTTP_METHOD_NOT_ALLOWED:
            allowed = router.allowed_methods() or []
            line += f" (allowed: {', '.join(allowed)})"
        print(line, file=sys.stderr)
        raise SystemExit(1)

    payload = {"route": result.route.name, "payload": dict(result)}
    print(json.dumps(payload, indent=2, default=str))
