"""Path template parsing.

A template is literal text interleaved with ``{...}`` placeholders::

    "/entries/{year}"            -> [Literal("/entries/"), Placeholder("year")]
    "/entry/{year:\\d+}/foo"     -> constrained placeholder, then a literal
    "/dl/{file}{.format}"        -> ... plus the optional ``.format`` suffix

Each placeholder is ``name[:pattern]``.  A missing pattern defaults to
``RouterConfig.default_pattern`` (one or more non-``/`` characters, non-greedy).
The reserved ``{.format}`` placeholder binds to ``format``, defaults to
``RouterConfig.format_pattern``, and is optional together with its leading dot.
"""

import re
from dataclasses import dataclass
from enum import Enum

from signpost.config import RouterConfig
from signpost.errors import DuplicatePlaceholder, InvalidPlaceholderName, InvalidPlaceholderPattern

_PLACEHOLDER_SPLIT = re.compile(r"\{([^}]+)\}")

_DEFAULT_CONFIG = RouterConfig()


class PlaceholderKind(Enum):
    PLAIN = "plain"
    FORMAT_SUFFIX = "format_suffix"


@dataclass(frozen=True, slots=True)
class Literal:
    """Literal template text, matched verbatim."""

    text: str


@dataclass(frozen=True, slots=True)
class Placeholder:
    """A named, pattern-constrained template variable."""

    name: str
    pattern: str
    optional: bool = False
    kind: PlaceholderKind = PlaceholderKind.PLAIN

    @property
    def prefix(self) -> str:
        """Literal text that must precede the value (``.`` for format suffixes)."""
        return "." if self.kind is PlaceholderKind.FORMAT_SUFFIX else ""

    def fragment(self, group_name: str) -> str:
        """Regex fragment capturing this placeholder as *group_name*."""
        unit = f"(?:{re.escape(self.prefix)}(?P<{group_name}>{self.pattern}))"
        return f"{unit}?" if self.optional else unit

    def accepts(self, value: str) -> bool:
        """True if *value* satisfies the placeholder's constraint in full."""
        return re.fullmatch(self.pattern, value) is not None


Token = Literal | Placeholder


@dataclass(frozen=True, slots=True)
class Template:
    """A parsed path template."""

    path: str
    tokens: tuple[Token, ...]

    @property
    def placeholders(self) -> tuple[Placeholder, ...]:
        return tuple(t for t in self.tokens if isinstance(t, Placeholder))

    def capture_names(self, tag: str) -> tuple[tuple[str, str], ...]:
        """``(regex group name, placeholder name)`` pairs used by :meth:`fragment`.

        Placeholder names need not be valid Python identifiers and repeat
        across templates, so regex groups get synthetic ``{tag}_{n}`` names.
        """
        return tuple((f"{tag}_{i}", p.name) for i, p in enumerate(self.placeholders))

    def fragment(self, tag: str) -> str:
        """Regex for the whole template, without anchors."""
        parts: list[str] = []
        index = 0
        for token in self.tokens:
            if isinstance(token, Literal):
                parts.append(re.escape(token.text))
            else:
                parts.append(token.fragment(f"{tag}_{index}"))
                index += 1
        return "".join(parts)


def parse_template(path: str, config: RouterConfig = _DEFAULT_CONFIG) -> Template:
    """Parse a template string into literal and placeholder tokens.

    Raises ``InvalidPlaceholderName`` for an empty name or one containing
    ``/``, ``InvalidPlaceholderPattern`` for a constraint that does not
    compile, and ``DuplicatePlaceholder`` when a name is used twice.
    """
    tokens: list[Token] = []
    seen: set[str] = set()
    format_spec = f".{config.format_name}"

    # re.split with one capture group alternates literal, placeholder, literal, ...
    for i, part in enumerate(_PLACEHOLDER_SPLIT.split(path)):
        if i % 2 == 0:
            if part:
                tokens.append(Literal(part))
            continue

        name, _, pattern = part.partition(":")
        if name == format_spec:
            placeholder = Placeholder(
                name=config.format_name,
                pattern=pattern or config.format_pattern,
                optional=True,
                kind=PlaceholderKind.FORMAT_SUFFIX,
            )
        else:
            if not name or "/" in name:
                msg = f"Invalid placeholder name {name!r} in route {path!r}"
                raise InvalidPlaceholderName(msg)
            placeholder = Placeholder(name=name, pattern=pattern or config.default_pattern)

        _check_pattern(placeholder, path)

        if placeholder.name in seen:
            msg = f"Placeholder {placeholder.name!r} redefined in route {path!r}"
            raise DuplicatePlaceholder(msg)
        seen.add(placeholder.name)
        tokens.append(placeholder)

    return Template(path=path, tokens=tuple(tokens))


def _check_pattern(placeholder: Placeholder, path: str) -> None:
    # Constraints are spliced into the combined matcher: they must compile
    # and must not name groups of their own.
    try:
        compiled = re.compile(placeholder.pattern)
    except re.error as exc:
        msg = (
            f"Invalid pattern {placeholder.pattern!r} for placeholder "
            f"{placeholder.name!r} in route {path!r}: {exc}"
        )
        raise InvalidPlaceholderPattern(msg) from exc
    if compiled.groupindex:
        msg = f"Pattern {placeholder.pattern!r} in route {path!r} must not define named groups"
        raise InvalidPlaceholderPattern(msg)
