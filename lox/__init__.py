"""
Lox Front End Package

The lexical analysis stage of a front end for the Lox scripting
language. Source text goes in, a list of tokens comes out; parsing
and evaluation live elsewhere.

Architecture:
    lox/
    ├── lexer/           # Tokens, diagnostics and the scanner
    └── cli.py           # lox-scan: run a file or an interactive prompt

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "xwest@users.noreply.github.com"
__license__ = "MIT"

from .lexer import Scanner, scan, Token, TokenKind, ErrorReporter

__all__ = [
    # Core classes
    "Scanner",
    "scan",
    "Token",
    "TokenKind",
    "ErrorReporter",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
