# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Helpers for splicing values into Java string literals."""

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\b": "\\b",
    "\f": "\\f",
}


def escape_string_characters(value: str) -> str:
    """Escape ``value`` for use between the quotes of a Java string literal.

    Backslashes, double quotes and the usual control characters get their
    short escapes; any other control character becomes ``\\uXXXX``.
    """
    parts = []
    for ch in value:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ch < " " or ch == "\x7f":
            parts.append(f"\\u{ord(ch):04x}")
        else:
            parts.append(ch)
    return "".join(parts)


def file_path_literal(path: str) -> str:
    """Escaped test data path with forward slashes as separators."""
    return escape_string_characters(path.replace("\\", "/"))
