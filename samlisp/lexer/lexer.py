"""
samlisp Lexer - Tokenizes Lisp source code into tokens.

Handles:
- Parentheses (list delimiters)
- Symbols
- Floats (digits.digits) and integers (digits)
- The boolean literals true and false
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, List, Optional

from ..errors import GrammarError, InternalInvariantError, NumericOverflowError


INT64_MAX = 2 ** 63 - 1

# Characters that end a symbol; none of them may appear inside one.
SYMBOL_DELIMITERS = "()#"

BOOLEAN_LITERALS = {"true": True, "false": False}


class TokenType(Enum):
    """samlisp token types."""
    # Delimiters
    LPAREN = auto()      # (
    RPAREN = auto()      # )

    # Literals
    SYMBOL = auto()      # +, foo->bar, *special*
    FLOAT = auto()       # 3.14
    INTEGER = auto()     # 42
    BOOL = auto()        # true, false

    # End of file
    EOF = auto()


@dataclass
class Token:
    """Represents a single token."""
    type: TokenType
    value: Any
    line: int
    column: int
    offset: int = 0

    def __repr__(self):
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"


class Lexer:
    """Tokenizes samlisp source code."""

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []

    def error(self, message: str, line: Optional[int] = None,
              column: Optional[int] = None, position: Optional[int] = None,
              error_class=GrammarError):
        """Raise a lexer error with location information."""
        raise error_class(
            message,
            self.filename,
            self.line if line is None else line,
            self.column if column is None else column,
            self.pos if position is None else position,
        )

    def peek(self, offset: int = 0) -> Optional[str]:
        """Peek at character at current position + offset."""
        pos = self.pos + offset
        if pos < len(self.source):
            return self.source[pos]
        return None

    def advance(self) -> Optional[str]:
        """Consume and return current character."""
        if self.pos >= len(self.source):
            return None

        ch = self.source[self.pos]
        self.pos += 1

        if ch == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return ch

    def skip_whitespace(self):
        """Skip whitespace characters."""
        while self.peek() is not None and self.peek().isspace():
            self.advance()

    def at_delimiter(self) -> bool:
        """True at end of input, whitespace or a parenthesis."""
        ch = self.peek()
        return ch is None or ch.isspace() or ch in "()"

    def read_digits(self) -> str:
        chars = []
        while self.peek() is not None and self.peek() in "0123456789":
            chars.append(self.advance())
        return ''.join(chars)

    def read_number(self, line: int, col: int, start: int) -> Token:
        """Read a float (digits.digits) or an integer (digits).

        Maximal munch: the number must end at whitespace, a parenthesis or
        end of input, so `12x` and `3.` are errors rather than two tokens.
        """
        text = self.read_digits()
        is_float = False

        next_ch = self.peek(1)
        if self.peek() == '.' and next_ch is not None and next_ch in "0123456789":
            self.advance()  # .
            text += '.' + self.read_digits()
            is_float = True

        if not self.at_delimiter():
            self.error(
                f"Invalid numeric literal: {text + self.peek()!r} "
                "(a number must be followed by whitespace or a parenthesis)"
            )

        if is_float:
            try:
                return Token(TokenType.FLOAT, float(text), line, col, start)
            except ValueError as e:
                raise InternalInvariantError(
                    f"{self.filename}:{line}:{col}: float conversion failed for {text!r}"
                ) from e

        # Checked on digit count first: int() refuses very long digit strings
        significant = text.lstrip('0')
        if len(significant) > len(str(INT64_MAX)) or int(significant or '0') > INT64_MAX:
            shown = text if len(text) <= 40 else f"{text[:20]}... ({len(text)} digits)"
            self.error(f"Integer literal out of 64-bit range: {shown}", line, col, start,
                       error_class=NumericOverflowError)
        return Token(TokenType.INTEGER, int(significant or '0'), line, col, start)

    def read_symbol(self) -> str:
        """Read a symbol: a run of anything but whitespace, parentheses and #."""
        chars = []
        while self.peek() is not None and self.is_symbol_char(self.peek()):
            chars.append(self.advance())
        return ''.join(chars)

    def is_symbol_char(self, ch: str) -> bool:
        return not ch.isspace() and ch not in SYMBOL_DELIMITERS

    def tokenize(self) -> List[Token]:
        """Tokenize the entire source code."""
        while self.pos < len(self.source):
            self.skip_whitespace()

            if self.pos >= len(self.source):
                break

            ch = self.peek()
            line = self.line
            col = self.column
            start = self.pos

            if ch == '(':
                self.advance()
                self.tokens.append(Token(TokenType.LPAREN, '(', line, col, start))
            elif ch == ')':
                self.advance()
                self.tokens.append(Token(TokenType.RPAREN, ')', line, col, start))
            elif ch in "0123456789":
                self.tokens.append(self.read_number(line, col, start))
            elif ch.isdecimal():
                # Non-ASCII digits cannot start a symbol and are not numbers either
                self.error(f"Unexpected character: {ch!r}")
            elif self.is_symbol_char(ch):
                text = self.read_symbol()
                # Booleans are classified on the whole run: `truex` stays a symbol
                if text in BOOLEAN_LITERALS:
                    self.tokens.append(Token(TokenType.BOOL, BOOLEAN_LITERALS[text], line, col, start))
                else:
                    self.tokens.append(Token(TokenType.SYMBOL, text, line, col, start))
            else:
                self.error(f"Unexpected character: {ch!r}")

        # Add EOF token
        self.tokens.append(Token(TokenType.EOF, None, self.line, self.column, self.pos))
        return self.tokens


def tokenize(source: str, filename: str = "<input>") -> List[Token]:
    """Convenience function to tokenize samlisp source code."""
    lexer = Lexer(source, filename)
    return lexer.tokenize()
