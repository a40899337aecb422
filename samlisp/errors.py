"""
Parse errors raised by the samlisp front end.

Every failure to turn source text into a Script is a ParseError carrying
the location where it was detected.
"""

from typing import Optional


class ParseError(SyntaxError):
    """Base class for all parse failures."""

    def __init__(self, message: str, filename: str = "<input>",
                 line: int = 0, column: int = 0, position: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.filename = filename
        self.line = line
        self.lineno = line or None
        self.column = column
        # SyntaxError.offset is the 1-based column; the character index is kept apart
        self.offset = column or None
        self.position = position

    def __str__(self):
        if self.line:
            return f"{self.filename}:{self.line}:{self.column}: {self.message}"
        return f"{self.filename}: {self.message}"


class GrammarError(ParseError):
    """Input does not match the grammar (unexpected character, unclosed list, ...)."""


class NumericOverflowError(ParseError):
    """An integer literal does not fit in a signed 64-bit integer."""


class InternalInvariantError(RuntimeError):
    """A token matched a numeric pattern that the converter then rejected."""
