import logging
import re

LOG = logging.getLogger(__name__)

# Word boundaries recognised when converting identifiers between cases.
_WORD_SEPARATORS = re.compile(r"[\s_.\-]+")

_IRREGULAR_PLURALS = {
    "person": "people",
    "child": "children",
    "goose": "geese",
    "mouse": "mice",
    "criterion": "criteria",
}
_IRREGULAR_SINGULARS = {plural: single for single, plural in _IRREGULAR_PLURALS.items()}

_O_ES_ENDINGS = {
    "hero",
    "potato",
    "tomato",
    "echo",
    "veto",
    "volcano",
    "tornado",
}

# Plurals ending in -ies whose singular ends in -ie.
_IE_PLURALS = ("movies", "cookies", "zombies", "rookies", "calories", "selfies", "brownies")

# Nouns that are the same in both forms.
_UNCOUNTABLE_ENDINGS = ("series", "species", "news")

# Singular nouns ending in -s that pluralize with -es.
_S_ES_SINGULARS = ("alias", "status", "bus", "campus", "census", "bonus", "canvas", "atlas")

# Stems of Greek nouns ending in -is that pluralize to -es.
_IS_ES_STEMS = (
    "analys",
    "paralys",
    "synops",
    "diagnos",
    "prognos",
    "hypothes",
    "parenthes",
    "thes",
    "cris",
    "emphas",
)

# Endings of -ives plurals whose singular keeps the -ive.
_IVE_ENDINGS = ("tives", "hives", "rives", "sives")


def upper_camel(name: str) -> str:
    """Convert an identifier to UpperCamelCase.

    Separators (underscore, dash, dot and whitespace) are dropped and the
    letter following them is capitalized. Runs of capitals are lowered after
    their first letter, so ``orderId``, ``order_id``, ``OrderID`` and
    ``ORDER_ID`` all become ``OrderId``.
    """
    return "".join(_camel_word(word) for word in _WORD_SEPARATORS.split(name) if word)


def _camel_word(word: str) -> str:
    chars = [word[0].upper()]
    for previous, char in zip(word, word[1:]):
        chars.append(char.lower() if previous.isupper() and char.isupper() else char)
    return "".join(chars)


def lower_camel(name: str) -> str:
    """Convert an identifier to lowerCamelCase."""
    camel = upper_camel(name)
    return camel[:1].lower() + camel[1:]


def snake_to_upper_camel(name: str) -> str:
    """UpperCamelCase of the lowercased name, ``USER_ID`` becomes ``UserId``."""
    return upper_camel(name.lower())


def joinstr(first: str, second: str) -> str:
    return first + second


def _replace_suffix(name: str, length: int, suffix: str) -> str:
    return f"{name[: len(name) - length]}{suffix}"


def _match_case(original: str, replacement: str) -> str:
    if original[:1].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement


def pluralize(name: str) -> str:
    """Pluralize the last word of an identifier.

    Follows English pluralization rules and keeps the casing of the
    original name, so ``itemId`` becomes ``itemIds``.
    """
    _attr = name.lower()

    if _attr in _IRREGULAR_PLURALS:
        return _match_case(name, _IRREGULAR_PLURALS[_attr])

    # Words ending in -is change to -es
    if _attr.endswith("is"):
        return _replace_suffix(name, 2, "es")

    # Words ending in -us change to -i
    if _attr.endswith("us"):
        return _replace_suffix(name, 2, "i")

    # Words ending in -on change to -a
    if _attr.endswith("on"):
        return _replace_suffix(name, 2, "a")

    # Words ending in sibilant sounds (s, sh, ch, x) add -es
    if _attr.endswith(("s", "sh", "ch", "x", "zz")):
        return f"{name}es"

    # Words ending in -z double the z and add -es
    if _attr.endswith("z"):
        return f"{name}zes"

    # Words ending in consonant + y change y to ies
    if _attr.endswith("y") and len(_attr) > 1 and _attr[-2] not in "aeiou":
        return _replace_suffix(name, 1, "ies")

    # Words ending in -f or -fe change to -ves
    if _attr.endswith("fe"):
        return _replace_suffix(name, 2, "ves")
    if _attr.endswith("f"):
        return _replace_suffix(name, 1, "ves")

    if _attr in _O_ES_ENDINGS:
        return f"{name}es"

    return f"{name}s"


def singularize(name: str) -> str:
    """Singularize the last word of an identifier.

    The inverse of :func:`pluralize`, keeping the casing of the original
    name. Names that already look singular are returned unchanged.
    """
    _attr = name.lower()

    if _attr in _IRREGULAR_SINGULARS:
        return _match_case(name, _IRREGULAR_SINGULARS[_attr])

    if _attr.endswith(_UNCOUNTABLE_ENDINGS):
        return name

    # movies -> movie, cities -> city
    if _attr.endswith(_IE_PLURALS):
        return _replace_suffix(name, 1, "")
    if _attr.endswith("ies") and len(_attr) > 3:
        return _replace_suffix(name, 3, "y")

    # analyses -> analysis
    if _attr.endswith(tuple(f"{stem}es" for stem in _IS_ES_STEMS)):
        return _replace_suffix(name, 2, "is")

    # aliases -> alias, buses -> bus
    if _attr.endswith(tuple(f"{word}es" for word in _S_ES_SINGULARS)):
        return _replace_suffix(name, 2, "")

    if _attr.endswith(("sses", "shes", "ches", "xes", "zzes")):
        return _replace_suffix(name, 2, "")

    # archives -> archive, knives -> knife
    if _attr.endswith(_IVE_ENDINGS):
        return _replace_suffix(name, 1, "")
    if _attr.endswith("ives"):
        return _replace_suffix(name, 3, "fe")

    if _attr.endswith("lves"):
        return _replace_suffix(name, 3, "f")

    if _attr.endswith("oes") and _attr[:-2] in _O_ES_ENDINGS:
        return _replace_suffix(name, 2, "")

    # Already singular: status, class, analysis
    if _attr.endswith(("ss", "us", "is")):
        return name

    if _attr.endswith("s"):
        return _replace_suffix(name, 1, "")

    return name
