"""
Lox Scanner - turns source text into a flat list of tokens

A single left-to-right pass with at most two characters of lookahead.
Bad input never stops the scan: each problem is raised as a LexerError
where it is found, reported, and the loop carries on from the next
character so one pass shows every lexical error in the file.

Author: xwest
"""

from typing import List, Optional, Tuple

from .tokens import (
    Token, TokenKind, SourceLocation, KEYWORDS, SINGLE_CHAR_TOKENS,
    EQUAL_SUFFIX_OPERATORS, WHITESPACE_CHARS
)
from .errors import (
    Diagnostic, ErrorReporter, LexerError, create_unexpected_character_error,
    create_unterminated_string_error
)


def is_digit(char: str) -> bool:
    return '0' <= char <= '9'


def is_alpha(char: str) -> bool:
    return ('a' <= char <= 'z') or ('A' <= char <= 'Z') or char == '_'


def is_alphanumeric(char: str) -> bool:
    return is_alpha(char) or is_digit(char)


class Scanner:
    """
    Lox lexical analyzer.

    Holds the cursor over one source string: ``start`` marks the first
    character of the lexeme being scanned, ``current`` the next unread
    character, and ``line`` the line ``current`` is on. Tokens take
    ``start_line``, the line their first character was on.
    """

    def __init__(self, source: str, reporter: Optional[ErrorReporter] = None,
                 filename: str = "<string>"):
        """
        Initialize the scanner with source code.

        Args:
            source: Complete source text
            reporter: Receives every lexical error; a private one is made if omitted
            filename: Name used in diagnostic locations
        """
        self.source = source
        self.filename = filename
        self.reporter = reporter if reporter is not None else ErrorReporter(filename=filename)
        self.tokens: List[Token] = []
        self.start = 0
        self.current = 0
        self.line = 1
        self.start_line = 1

    def scan_tokens(self) -> List[Token]:
        """
        Scan the entire source.

        Returns:
            List of tokens, always ending with a single EOF token
        """
        self.tokens = []
        self.start = 0
        self.current = 0
        self.line = 1

        while not self._is_at_end():
            # Beginning of the next lexeme
            self.start = self.current
            self.start_line = self.line
            try:
                self._scan_token()
            except LexerError as e:
                # The offending text is already consumed, so just move on
                diagnostic = e.diagnostic
                self.reporter.report_error(diagnostic.line, diagnostic.message, diagnostic)

        self.tokens.append(Token(TokenKind.EOF, "", None, self.line))
        return self.tokens

    def _scan_token(self):
        char = self._advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
        elif char in EQUAL_SUFFIX_OPERATORS:
            single, double = EQUAL_SUFFIX_OPERATORS[char]
            self._add_token(double if self._match('=') else single)
        elif char == '/':
            if self._match('/'):
                # Comments run to the end of the line
                while self._peek() != '\n' and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenKind.SLASH)
        elif char in WHITESPACE_CHARS:
            pass
        elif char == '\n':
            self.line += 1
        elif char == '"':
            self._string()
        elif is_digit(char):
            self._number()
        elif is_alpha(char):
            self._identifier()
        else:
            raise create_unexpected_character_error(char, self._location(self.start))

    def _identifier(self):
        while is_alphanumeric(self._peek()):
            self._advance()

        text = self.source[self.start:self.current]
        self._add_token(KEYWORDS.get(text, TokenKind.IDENTIFIER))

    def _number(self):
        while is_digit(self._peek()):
            self._advance()

        # A '.' only belongs to the number when a digit follows it
        if self._peek() == '.' and is_digit(self._peek_next()):
            self._advance()
            while is_digit(self._peek()):
                self._advance()

        self._add_token(TokenKind.NUMBER, float(self.source[self.start:self.current]))

    def _string(self):
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == '\n':
                self.line += 1
            self._advance()

        if self._is_at_end():
            raise create_unterminated_string_error(self._location(self.current))

        self._advance()  # Closing quote

        # Trim the quotes; no escape processing
        self._add_token(TokenKind.STRING, self.source[self.start + 1:self.current - 1])

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is ``expected``."""
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return '\0'
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return '\0'
        return self.source[self.current + 1]

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def _advance(self) -> str:
        char = self.source[self.current]
        self.current += 1
        return char

    def _add_token(self, kind: TokenKind, literal=None):
        lexeme = self.source[self.start:self.current]
        self.tokens.append(Token(kind, lexeme, literal, self.start_line))

    def _location(self, offset: int) -> SourceLocation:
        """Location of ``offset`` reported on the current line."""
        line_start = self.source.rfind('\n', 0, offset) + 1
        return SourceLocation(self.filename, self.line, offset - line_start + 1, offset)


def scan(source: str, reporter: Optional[ErrorReporter] = None,
         filename: str = "<string>") -> List[Token]:
    """
    Scan a complete source string.

    Errors go to ``reporter``; pass one in to see them.
    """
    return Scanner(source, reporter, filename).scan_tokens()


def tokenize_string(source: str, filename: str = "<string>") -> Tuple[List[Token], List[Diagnostic]]:
    """
    Convenience function to scan a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        The tokens and every diagnostic reported while scanning
    """
    reporter = ErrorReporter(filename=filename)
    tokens = scan(source, reporter, filename)
    return tokens, list(reporter.diagnostics)


def tokenize_file(filepath: str) -> Tuple[List[Token], List[Diagnostic]]:
    """
    Convenience function to scan a source file.

    Args:
        filepath: Path to source file

    Returns:
        The tokens and every diagnostic reported while scanning

    Raises:
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)
