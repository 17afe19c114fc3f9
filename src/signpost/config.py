"""Router configuration.

RouterConfig is a frozen dataclass: immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from collections.abc import Callable
from dataclasses import dataclass

from signpost.inflect import pluralize as _default_pluralize


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(name_separator=".", table_format="simple")
        router = Router(config=config)
    """

    # Templates
    default_pattern: str = r"[^/]+?"  # {name}
    format_pattern: str = r"[^.\s/]+?"  # {.format}
    format_name: str = "format"

    # Composition
    name_separator: str = "_"  # scope("admin").add("users") -> "admin_users"
    controller_marker: str = "."  # ".users" appends to the inherited controller

    # Resources
    pluralize: Callable[[str], str] = _default_pluralize

    # Reporting (any tabulate table format)
    table_format: str = "plain"
