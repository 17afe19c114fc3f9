"""Default English pluralizer for resource collection names.

``Router.resource("message")`` needs a collection name when none is
given.  This covers the regular English rules plus a handful of
irregular nouns; swap it out through ``RouterConfig.pluralize`` when an
application needs something smarter.
"""

_IRREGULAR: dict[str, str] = {
    "child": "children",
    "foot": "feet",
    "goose": "geese",
    "man": "men",
    "mouse": "mice",
    "person": "people",
    "tooth": "teeth",
    "woman": "women",
}

_UNCHANGED = frozenset({"equipment", "information", "news", "series", "sheep", "species"})


def pluralize(word: str) -> str:
    """Return the plural of a singular English noun.

    Example:
        >>> pluralize("message")
        'messages'
        >>> pluralize("category")
        'categories'
        >>> pluralize("person")
        'people'
    """
    lower = word.lower()
    if not lower or lower in _UNCHANGED:
        return word
    if lower in _IRREGULAR:
        plural = _IRREGULAR[lower]
        return plural.capitalize() if word[0].isupper() else plural

    if lower.endswith(("s", "x", "z", "ch", "sh")):
        return word + "es"
    if lower.endswith("y") and len(lower) > 1 and lower[-2] not in "aeiou":
        return word[:-1] + "ies"
    if lower.endswith("fe"):
        return word[:-2] + "ves"
    if lower.endswith(("lf", "af")):
        return word[:-1] + "ves"
    return word + "s"
