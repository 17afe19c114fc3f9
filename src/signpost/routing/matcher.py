"""Compiled matcher: every route group folded into one regex.

Each group becomes one named alternative of a single pattern::

    (?P<g0>/entries/(?:(?P<g0_0>[^/]+?)))|(?P<g1>/dl/...)

``fullmatch`` tries the alternatives left to right, so the earliest
registered group that consumes the whole path wins.  The enclosing
``g{n}`` group closes after everything nested inside it, which makes it
the match's ``lastindex``; that index identifies the group without
testing each alternative.
"""

import re
from collections.abc import Sequence

from signpost.routing.route import RouteGroup

_NEVER = re.compile(r"(?!)")


class CompiledMatcher:
    """Immutable lookup structure built from a snapshot of route groups.

    Usage::

        matcher = CompiledMatcher(router_groups)
        found = matcher.match("/entries/1916")
        if found is not None:
            group_index, params = found
    """

    __slots__ = ("_captures", "_index_by_group", "_pattern")

    def __init__(self, groups: Sequence[RouteGroup]) -> None:
        alternatives: list[str] = []
        captures: list[tuple[tuple[str, str], ...]] = []
        for i, group in enumerate(groups):
            tag = f"g{i}"
            alternatives.append(f"(?P<{tag}>{group.template.fragment(tag)})")
            captures.append(group.template.capture_names(tag))

        self._captures = tuple(captures)
        if alternatives:
            self._pattern = re.compile("|".join(alternatives))
            index = self._pattern.groupindex
            self._index_by_group = {index[f"g{i}"]: i for i in range(len(alternatives))}
        else:
            self._pattern = _NEVER
            self._index_by_group = {}

    def __len__(self) -> int:
        return len(self._captures)

    @property
    def pattern(self) -> str:
        return self._pattern.pattern

    def match(self, path: str) -> tuple[int, dict[str, str]] | None:
        """Return ``(group index, placeholder captures)`` or ``None``.

        Optional placeholders that did not participate are left out of
        the captures rather than mapped to an empty string.
        """
        found = self._pattern.fullmatch(path)
        if found is None:
            return None

        group_index = self._index_by_group[found.lastindex]  # type: ignore[index]
        params: dict[str, str] = {}
        for group_name, name in self._captures[group_index]:
            value = found.group(group_name)
            if value is not None:
                params[name] = value
        return group_index, params
