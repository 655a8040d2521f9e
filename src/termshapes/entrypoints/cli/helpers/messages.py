"""Styled status lines for the termshapes CLI.

Lines go to stderr so rendered trees and JSON on stdout stay pipeable.
Warnings start with an emoji glyph, or an ASCII fallback when stderr cannot
encode it.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on the current stderr stream."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def caution_glyph() -> str:
    """Return "⚠️", or "[!]" when stderr cannot encode it."""
    emoji, fallback = ("⚠️", "[!]")  # pragma: no mutate
    if _supports_character(emoji):
        return emoji
    return fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to stderr.

    Example:
        ``⚠️  Nothing to render for alias 'alias:missing'.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)
