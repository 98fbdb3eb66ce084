"""Terminal message helpers for the Codeflix CLI.

Small helpers for rendering user-visible lines with emoji to ASCII fallbacks.
Messages write to stderr so stdout can remain machine-readable.
"""

import sys

import click


def _stderr_encoding() -> str:
    return getattr(sys.stderr, "encoding", None) or "ascii"


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr."""

    encoding = _stderr_encoding()
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(emoji: str, fallback: str) -> str:
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  Using the sequential id generator.``
    """
    click.secho(f"{_glyph('⚠️', '[!]')}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**.

    Example:
        ``✅  Category created.``
    """
    click.secho(f"{_glyph('✅', '[OK]')}  {msg}", fg="green", bold=True, err=True)
