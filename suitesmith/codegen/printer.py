# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Line-oriented text emission with automatic indentation.

This module provides the Printer class used by the test generator to build
source text. Callers never see the indentation string; nesting is expressed
with push_indent()/pop_indent() or the indented() context manager.

Example:
    >>> p = Printer()
    >>> p.println("public class Foo {")
    >>> with p.indented():
    ...     p.print("public void testA()")
    ...     p.print_with_no_indent(" {")
    ...     p.println()
    >>> p.println("}")
    >>> text = p.getvalue()
"""

from contextlib import contextmanager
from typing import Any, Iterator

from suitesmith.errors import PrinterStateError


class Printer:
    """Text sink that tracks nesting depth and indents new lines.

    Two kinds of append exist: ``print``/``println`` start a new line at the
    current indentation, ``print_with_no_indent`` continues the current line.

    Attributes:
        depth: Current nesting level (0 at top level)
    """

    def __init__(self, indent_unit: str = "    "):
        """Initialize printer with empty buffer.

        Args:
            indent_unit: String for one indentation level (default: 4 spaces)
        """
        self._parts: list[str] = []
        self._indent_unit: str = indent_unit
        self._depth: int = 0

    @property
    def depth(self) -> int:
        return self._depth

    def push_indent(self) -> "Printer":
        """Increase indentation by one level."""
        self._depth += 1
        return self

    def pop_indent(self) -> "Printer":
        """Decrease indentation by one level.

        Raises:
            PrinterStateError: If there is no indentation to pop
        """
        if self._depth == 0:
            raise PrinterStateError("No indentation to pop")
        self._depth -= 1
        return self

    @contextmanager
    def indented(self) -> Iterator["Printer"]:
        """Context manager that indents everything emitted inside it.

        Example:
            >>> with p.indented():
            ...     p.println("runTest();")
        """
        self.push_indent()
        try:
            yield self
        finally:
            self.pop_indent()

    def print(self, *parts: Any) -> "Printer":
        """Start a new indented line without terminating it."""
        self._parts.append(self._indent_unit * self._depth)
        return self.print_with_no_indent(*parts)

    def print_with_no_indent(self, *parts: Any) -> "Printer":
        """Continue the current line: no indentation, no newline."""
        self._parts.extend(str(part) for part in parts)
        return self

    def println(self, *parts: Any) -> "Printer":
        """Emit an indented line and terminate it.

        Without parts only the line terminator is written, which either ends
        a line started with print() or produces an empty line. Empty lines
        never carry indentation.
        """
        if parts:
            self.print(*parts)
        self._parts.append("\n")
        return self

    def getvalue(self) -> str:
        """Return everything emitted so far."""
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.getvalue()
