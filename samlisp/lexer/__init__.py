"""samlisp Lexer - Tokenizes source text."""

from .lexer import Lexer, Token, TokenType, tokenize

__all__ = ['Lexer', 'Token', 'TokenType', 'tokenize']
