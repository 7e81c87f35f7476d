"""
Token definitions for the Lox scanner.

This module defines every token kind the scanner can produce:
- Single-character punctuation
- One or two character operators
- Literals (strings, numbers) and identifiers
- The sixteen reserved words
- The end-of-input marker

Author: xwest
"""

import math
from decimal import Decimal
from enum import Enum, auto
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional, Union


class TokenKind(Enum):
    """
    Enumeration of all token kinds in Lox.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Single-character punctuation
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    STAR = auto()                   # *
    SLASH = auto()                  # /

    # ========================================================================
    # One or two character operators
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=

    # ========================================================================
    # Literals
    # ========================================================================
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 42, 3.14
    IDENTIFIER = auto()             # variable_name

    # ========================================================================
    # Reserved words
    # ========================================================================
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input


def format_number(value: float) -> str:
    """
    Render a NUMBER literal in the classic Lox token-dump form.

    Plain decimals between 1e-3 and 1e7, otherwise scientific notation
    with the shortest mantissa: 1.0E21, 1.2345678E7, 1.0E-4.
    """
    if math.isinf(value):
        return "Infinity"
    if value == 0 or 1e-3 <= abs(value) < 1e7:
        return repr(value)

    _, digits, exponent = Decimal(repr(value)).normalize().as_tuple()
    mantissa = "".join(str(d) for d in digits)
    power = exponent + len(digits) - 1
    return f"{mantissa[0]}.{mantissa[1:] or '0'}E{power}"


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Only diagnostics carry a full location; tokens keep just the line.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of source

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a single lexeme recognized by the scanner.

    `literal` holds the decoded value: a float for NUMBER, the text between
    the quotes for STRING, and None for everything else.
    """
    kind: TokenKind
    lexeme: str                     # Raw text from source, empty for EOF
    literal: Optional[Union[float, str]]
    line: int                       # 1-based line of the lexeme's first character

    def __str__(self) -> str:
        if self.literal is None:
            literal = "null"
        elif isinstance(self.literal, float):
            literal = format_number(self.literal)
        else:
            literal = self.literal
        return f"{self.kind.name} {self.lexeme} {literal}"

    def __repr__(self) -> str:
        return (f"Token({self.kind.name}, {self.lexeme!r}, "
                f"{self.literal!r}, {self.line})")

    @property
    def is_literal(self) -> bool:
        """Check if this token carries a literal value."""
        return self.kind in {TokenKind.STRING, TokenKind.NUMBER}

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word."""
        return self.kind in RESERVED_KINDS

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.kind == TokenKind.IDENTIFIER


# Lookup tables used by the scanner. All of them are read-only after import.

KEYWORDS = MappingProxyType({
    "and": TokenKind.AND,
    "class": TokenKind.CLASS,
    "else": TokenKind.ELSE,
    "false": TokenKind.FALSE,
    "for": TokenKind.FOR,
    "fun": TokenKind.FUN,
    "if": TokenKind.IF,
    "nil": TokenKind.NIL,
    "or": TokenKind.OR,
    "print": TokenKind.PRINT,
    "return": TokenKind.RETURN,
    "super": TokenKind.SUPER,
    "this": TokenKind.THIS,
    "true": TokenKind.TRUE,
    "var": TokenKind.VAR,
    "while": TokenKind.WHILE,
})

RESERVED_KINDS = frozenset(KEYWORDS.values())

# '/' is not listed: it may open a comment, so the scanner handles it itself.
SINGLE_CHAR_TOKENS = MappingProxyType({
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "-": TokenKind.MINUS,
    "+": TokenKind.PLUS,
    ";": TokenKind.SEMICOLON,
    "*": TokenKind.STAR,
})

# Operators that become a two-character token when followed by '='.
# Maps the first character to (one-character kind, two-character kind).
EQUAL_SUFFIX_OPERATORS = MappingProxyType({
    "!": (TokenKind.BANG, TokenKind.BANG_EQUAL),
    "=": (TokenKind.EQUAL, TokenKind.EQUAL_EQUAL),
    "<": (TokenKind.LESS, TokenKind.LESS_EQUAL),
    ">": (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
})

WHITESPACE_CHARS = frozenset(" \t\r")
