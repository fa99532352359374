# ABOUTME: Text and name sanitization for generated Markdown and file paths.
# ABOUTME: Strips line separators from text and maps names to safe filenames.

import re

# Unicode LINE SEPARATOR and PARAGRAPH SEPARATOR
_LINE_SEPARATORS = re.compile("[\u2028\u2029]")

_UNSAFE_NAME_CHARS = re.compile(r"[^A-Za-z0-9_-]")


def _replacement(match: re.Match) -> str:
    return "__" if ord(match.group()) > 0xFFFF else "_"


def sanitize_text(text: str) -> str:
    """Remove Unicode line/paragraph separators from text."""
    return _LINE_SEPARATORS.sub("", text)


def sanitize_name(name: str) -> str:
    """Convert a display name to a safe file or directory name.

    Every character outside ``[A-Za-z0-9_-]`` is replaced with ``_``. Characters
    beyond the Basic Multilingual Plane (emoji, for example) count as two
    UTF-16 code units and become ``__``, so names match those written by
    JavaScript exporters of the same document. Distinct names may map to the same result; callers
    do not disambiguate.

    Args:
        name: The original display name.

    Returns:
        Sanitized name, one underscore per replaced UTF-16 code unit.
    """
    return _UNSAFE_NAME_CHARS.sub(_replacement, name)
