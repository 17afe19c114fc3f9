"""Locate the Router a CLI command works on."""

import importlib
import logging

from signpost.routing.router import Router

logger = logging.getLogger("signpost.cli")

DEFAULT_ATTRIBUTE = "router"


def resolve_router(target: str) -> Router:
    """Import ``module[:attribute]`` and return the Router it names.

    *attribute* defaults to ``router``, so ``"myapp.urls"`` means
    ``myapp.urls.router``.  A callable that is not itself a Router is
    taken to be a zero-argument router factory and called once.

    Raises:
        ModuleNotFoundError, AttributeError: *target* does not exist.
        TypeError: *target* is not a Router, or its factory failed.
    """
    module_name, _, attribute = target.partition(":")
    obj = getattr(importlib.import_module(module_name), attribute or DEFAULT_ATTRIBUTE)

    if not isinstance(obj, Router) and callable(obj):
        logger.debug("Building router from factory %s", target)
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Router factory {target!r} failed: {exc}"
            raise TypeError(msg) from exc

    if isinstance(obj, Router):
        return obj
    msg = f"{target!r} is a {type(obj).__name__}, expected a signpost Router"
    raise TypeError(msg)
