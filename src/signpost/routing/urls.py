"""Reverse URL building from parsed templates."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, urlencode

from signpost.errors import InvalidPlaceholderValue, MissingRequiredParam
from signpost.routing.template import Literal, PlaceholderKind, Template

# Path characters left unescaped in placeholder values (RFC 3986 pchar plus "/").
_PATH_SAFE = "/:@!$&'()*+,;="


def build_url(template: Template, params: Mapping[str, Any], *, label: str | None = None) -> str:
    """Substitute *params* into *template* and return ``path[?query]``.

    Values are validated against their placeholder's pattern.  Parameters
    that do not name a placeholder become query-string pairs, in the order
    the caller supplied them.  An empty ``format`` contributes nothing.

    Example:
        >>> from signpost.routing.template import parse_template
        >>> build_url(parse_template("/entries/{year}"), {"year": "1916", "q": "abc"})
        '/entries/1916?q=abc'
    """
    label = label or template.path
    remaining = dict(params)
    parts: list[str] = []

    for token in template.tokens:
        if isinstance(token, Literal):
            parts.append(token.text)
            continue

        if token.name not in remaining:
            if not token.optional:
                msg = f"Required param {token.name!r} missing from url {label!r}"
                raise MissingRequiredParam(msg)
            continue

        raw = remaining.pop(token.name)
        value = "" if raw is None else str(raw)
        if token.kind is PlaceholderKind.FORMAT_SUFFIX and not value:
            continue
        if not token.accepts(value):
            msg = f"Invalid value {value!r} for param {token.name!r} in url {label!r}"
            raise InvalidPlaceholderValue(msg)
        parts.append(token.prefix + quote(value, safe=_PATH_SAFE))

    url = "".join(parts)
    if remaining:
        url = f"{url}?{urlencode(remaining, doseq=True, quote_via=quote)}"
    return url
