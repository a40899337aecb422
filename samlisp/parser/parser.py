"""
samlisp Parser - Builds Abstract Syntax Tree from tokens.

Grammar:
    Script := Expr+
    Expr   := "(" Expr* ")" | Symbol | Float | Integer | Bool
"""

from typing import List, Optional, Tuple
from ..errors import GrammarError
from ..lexer import Token, TokenType
from .ast_nodes import *


class Parser:
    """Parses samlisp tokens into an Abstract Syntax Tree."""

    def __init__(self, tokens: List[Token], filename: str = "<input>"):
        if not tokens or tokens[-1].type != TokenType.EOF:
            raise ValueError("token stream must end with an EOF token")
        self.tokens = tokens
        self.filename = filename
        self.pos = 0
        self.current_token = self.tokens[0]

    def error(self, message: str, token: Optional[Token] = None):
        """Raise a parser error with location information."""
        token = token or self.current_token
        raise GrammarError(message, self.filename, token.line, token.column, token.offset)

    def advance(self) -> Token:
        """Consume and return current token."""
        token = self.current_token
        if self.pos < len(self.tokens) - 1:
            self.pos += 1
            self.current_token = self.tokens[self.pos]
        return token

    def expect(self, token_type: TokenType) -> Token:
        """Consume token of expected type or raise error."""
        if self.current_token.type != token_type:
            self.error(f"Expected {describe(token_type)}, got {describe_token(self.current_token)}")
        return self.advance()

    def parse(self) -> Script:
        """Parse the entire script: one or more expressions up to EOF."""
        if self.current_token.type == TokenType.EOF:
            self.error("Expected at least one expression, got end of input")

        expressions = []
        while self.current_token.type != TokenType.EOF:
            expressions.append(self.parse_expression())

        return Script(expressions)

    def parse_single(self) -> Expr:
        """Parse exactly one expression and require end of input after it."""
        expr = self.parse_expression()
        self.expect(TokenType.EOF)
        return expr

    def parse_expression(self) -> Expr:
        """Parse a single expression (list, symbol, float, integer or bool).

        Lists are assembled on an explicit stack of open parens so nesting
        depth is bounded by memory rather than by the recursion limit.
        """
        open_lists: List[Tuple[Token, List[Expr]]] = []

        while True:
            token = self.current_token

            if token.type == TokenType.LPAREN:
                self.advance()
                open_lists.append((token, []))
                continue

            if token.type == TokenType.RPAREN:
                if not open_lists:
                    self.error("Unexpected ')' with no list open")
                self.advance()
                start, items = open_lists.pop()
                node = ListNode(items, line=start.line, column=start.column)
            elif token.type == TokenType.EOF:
                if open_lists:
                    self.error("Unclosed list", open_lists[-1][0])
                self.error("Expected an expression, got end of input")
            else:
                node = self.parse_atom()

            if not open_lists:
                return node
            open_lists[-1][1].append(node)

    def parse_atom(self) -> Expr:
        """Parse a symbol or literal token."""
        token = self.advance()
        line = token.line
        col = token.column

        if token.type == TokenType.SYMBOL:
            return SymbolNode(token.value, line=line, column=col)
        elif token.type == TokenType.FLOAT:
            return FloatNode(token.value, line=line, column=col)
        elif token.type == TokenType.INTEGER:
            return IntegerNode(token.value, line=line, column=col)
        elif token.type == TokenType.BOOL:
            return BoolNode(token.value, line=line, column=col)

        self.error(f"Unexpected {describe_token(token)}", token)


def describe(token_type: TokenType) -> str:
    """Human-readable name for a token type in error messages."""
    return {
        TokenType.LPAREN: "'('",
        TokenType.RPAREN: "')'",
        TokenType.SYMBOL: "symbol",
        TokenType.FLOAT: "float",
        TokenType.INTEGER: "integer",
        TokenType.BOOL: "boolean",
        TokenType.EOF: "end of input",
    }[token_type]


def describe_token(token: Token) -> str:
    if token.type in (TokenType.LPAREN, TokenType.RPAREN, TokenType.EOF):
        return describe(token.type)
    return f"{describe(token.type)} {token.value!r}"
