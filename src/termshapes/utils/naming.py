"""Name formatting helpers for alternate names and class tags.

Three pure string transforms:

- ``to_pascal_identifier`` turns a human label into a PascalCase fragment,
  e.g. ``"foo-ba r"`` -> ``"FooBaR"``.
- ``encode_alternate_element`` makes a content type name safe to embed in a
  ``__``-separated alternate name.
- ``html_classify`` turns arbitrary text into a lower-case, dash-separated
  CSS class name.
"""

import re

ALTERNATE_SEPARATOR = "__"

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")

# str.isspace() also accepts the ASCII information separators.
_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")


def to_pascal_identifier(name: str | None) -> str | None:
    """Convert a dash/whitespace delimited label into a PascalCase identifier.

    Dashes and whitespace are token boundaries and are dropped. The first
    character of the result and every character following a boundary are
    upper-cased when it has a single-character upper-case form; all other
    characters keep their case.

    Args:
        name: The label to convert.

    Returns:
        The identifier, or ``None`` when *name* is ``None`` or empty.

    Example:
        ```py
        >>> to_pascal_identifier("foo-ba r")
        'FooBaR'
        ```
    """
    if not name:
        return None

    next_is_upper = True
    result: list[str] = []
    for character in name:
        if character == "-" or _is_whitespace(character):
            next_is_upper = True
            continue
        if next_is_upper and len(upper := character.upper()) == 1:
            character = upper
        result.append(character)
        next_is_upper = False
    return "".join(result)


def _is_whitespace(character: str) -> bool:
    return character.isspace() and character not in _NOT_WHITESPACE


def encode_alternate_element(element: str) -> str:
    """Encode dashes and dots so they don't conflict in template file names.

    Dashes are expanded first (``-`` -> ``__``), then dots (``.`` -> ``_``).

    Args:
        element: An alternate name fragment, usually a content type name.

    Returns:
        The encoded fragment.
    """
    return element.replace("-", ALTERNATE_SEPARATOR).replace(".", "_")


def html_classify(text: str | None) -> str:
    """Render *text* as a lower-case, dash-separated CSS class name.

    Camel-case humps become separate words, any run of characters other than
    ASCII letters and digits becomes a single dash, and leading digits are
    dropped.

    Args:
        text: The text to classify.

    Returns:
        The class name; empty when *text* is ``None`` or blank.

    Example:
        ```py
        >>> html_classify("term-BlogPost")
        'term-blog-post'
        ```
    """
    if text is None or not text.strip():
        return ""

    result: list[str] = []
    previous_is_separator = False
    for character in _CAMEL_BOUNDARY.sub(" ", text):
        is_letter = character.isascii() and character.isalpha()
        is_digit = character.isascii() and character.isdigit()
        if is_letter or (is_digit and result):
            if previous_is_separator and result:
                result.append("-")
            result.append(character.lower())
            previous_is_separator = False
        else:
            previous_is_separator = True
    return "".join(result)
