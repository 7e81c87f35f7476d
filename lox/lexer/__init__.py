"""
Lox Lexer Package

Implements the scanner for the Lox language: a single pass over the
source text that produces a flat list of classified tokens.

Key Features:
- Maximal-munch recognition of one and two character operators
- Reserved word lookup against a fixed, read-only keyword table
- Multi-line string literals and decimal number literals
- Error recovery: every lexical error is reported, none stops the scan

Author: xwest
"""

from .tokens import Token, TokenKind, SourceLocation, KEYWORDS
from .scanner import Scanner, scan, tokenize_string, tokenize_file
from .errors import Diagnostic, ErrorReporter, LexerError

__all__ = [
    "Scanner",
    "scan",
    "tokenize_string",
    "tokenize_file",
    "Token",
    "TokenKind",
    "SourceLocation",
    "KEYWORDS",
    "Diagnostic",
    "ErrorReporter",
    "LexerError",
]
