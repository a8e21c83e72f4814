from __future__ import annotations

import re

_R_NAME_PATTERN = re.compile(r"^(?:[A-Za-z]|\.(?![0-9]))[A-Za-z0-9._]*$")
_R_RESERVED_WORDS = frozenset(
    {
        "if",
        "else",
        "repeat",
        "while",
        "function",
        "for",
        "next",
        "break",
        "TRUE",
        "FALSE",
        "NULL",
        "Inf",
        "NaN",
        "NA",
        "NA_integer_",
        "NA_real_",
        "NA_character_",
        "in",
    }
)
_R_STRING_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def r_identifier(name: str) -> str:
    """Return `name` if it is a syntactic R name usable on the left of `<-`."""
    if not _R_NAME_PATTERN.match(name) or name in _R_RESERVED_WORDS:
        raise ValueError(f"Not a syntactic R name: {name!r}")
    return name


def r_string_literal(value: str) -> str:
    """
    Quote `value` as a single-quoted R string literal.

    Statements are evaluated verbatim by the interpreter, so every character that
    could terminate the literal is escaped.
    """
    if "\x00" in value:
        raise ValueError("R strings cannot contain NUL characters")
    escaped = "".join(_R_STRING_ESCAPES.get(char, char) for char in value)
    return f"'{escaped}'"
