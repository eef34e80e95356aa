"""
filenames.py - Filename helpers for generated question files.

Generated files are named "NN. <question>.md", where NN is the question's
position plus the set's starting offset, zero-padded to two digits.
"""

import re

# Characters rejected by common filesystems (Windows being the strictest)
ILLEGAL_FILENAME_CHARS = '<>:"/\\|?*'

_ILLEGAL_RE = re.compile(r'[<>:"/\\|?*]')
_WHITESPACE_RE = re.compile(r"\s+")

MARKDOWN_EXT = ".md"


def sanitize_filename(name: str) -> str:
    """
    Delete filesystem-illegal characters from a name.

    Characters are removed, not replaced, so "a/b" becomes "ab". Nothing
    else is touched: case, whitespace and length are preserved.

        >>> sanitize_filename("What is the time complexity of map()?")
        'What is the time complexity of map()'
    """
    return _ILLEGAL_RE.sub("", name)


def format_ordinal(index: int, offset: int = 1) -> str:
    """
    Zero-padded ordinal for a zero-based list index.

        >>> format_ordinal(0)
        '01'
        >>> format_ordinal(99, 1)
        '100'
    """
    number = index + offset
    if number < 0:
        raise ValueError(f"Ordinal cannot be negative: {index} + {offset}")
    return f"{number:02d}"


def build_question_filename(index: int, question: str, offset: int = 1) -> str:
    """Filename for the question at a zero-based index."""
    return f"{format_ordinal(index, offset)}. {sanitize_filename(question)}{MARKDOWN_EXT}"


def render_question_stub(question: str) -> str:
    """Markdown body written for each question."""
    return f"# {question}\n\n"


def underscore_whitespace(name: str) -> str:
    """Replace each run of whitespace with a single underscore."""
    return _WHITESPACE_RE.sub("_", name)
