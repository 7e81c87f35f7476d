"""
Error handling for the Lox scanner.

Provides structured diagnostics with source location information,
recovery hints, and the reporter the scanner hands every lexical
error to. Nothing in here stops a scan: errors are collected so that
all of them can be shown after a single pass.

Author: xwest
"""

from typing import Optional, List, TextIO
from dataclasses import dataclass, field
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """
    One lexical error: what went wrong and where.

    Lox has no lexical warnings, so every diagnostic is an error.
    """
    message: str
    location: SourceLocation
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: List[str] = field(default_factory=list)

    @property
    def line(self) -> int:
        return self.location.line

    def __str__(self) -> str:
        header = f"error[{self.code}]" if self.code else "error"
        lines = [f"{header}: {self.message}", f"  --> {self.location}"]
        if self.help_text:
            lines.append(f"  help: {self.help_text}")
        lines.extend(f"    - {suggestion}" for suggestion in self.suggestions)
        return "\n".join(lines) + "\n"


class LexerError(Exception):
    """
    Raised inside the scan loop when a lexeme cannot be recognized.

    The scanner catches it, reports the attached diagnostic, and keeps
    going, so it never reaches callers of ``scan``.
    """

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    def __str__(self) -> str:
        return str(self.diagnostic)


class ErrorReporter:
    """
    Collects lexical errors for one caller.

    Replaces a process-wide "had error" flag: each scan (or each REPL
    line) gets a reporter the caller owns and can inspect or reset.
    When ``stream`` is given, every error is also written to it as
    ``[line N] Error: message``.
    """

    def __init__(self, stream: Optional[TextIO] = None, filename: str = "<string>"):
        self.stream = stream
        self.filename = filename
        self.diagnostics: List[Diagnostic] = []

    @property
    def had_error(self) -> bool:
        return bool(self.diagnostics)

    def report_error(self, line: int, message: str,
                     diagnostic: Optional[Diagnostic] = None) -> None:
        """
        Record an error at ``line``.

        The scanner also passes the full ``diagnostic`` it built; callers
        reporting by hand can leave it out.
        """
        if diagnostic is None:
            diagnostic = Diagnostic(
                message=message,
                location=SourceLocation(self.filename, line, 0, -1),
            )
        self.diagnostics.append(diagnostic)
        if self.stream is not None:
            self.stream.write(self.format(diagnostic) + "\n")

    def reset(self) -> None:
        """Forget everything reported so far."""
        self.diagnostics.clear()

    @staticmethod
    def format(diagnostic: Diagnostic) -> str:
        return f"[line {diagnostic.line}] Error: {diagnostic.message}"


class ErrorRecovery:
    """
    Hints for characters Lox does not accept.

    Mostly operators people bring over from other languages.
    """

    FOREIGN_OPERATORS = {
        '&': ['and'],
        '|': ['or'],
        "'": ['"'],
        '#': ['//'],
    }

    @staticmethod
    def suggest_alternatives(char: str) -> List[str]:
        """Suggest Lox spellings for a rejected character."""
        return list(ErrorRecovery.FOREIGN_OPERATORS.get(char, []))


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character.",
    "L002": "Unterminated string.",
}


def create_unexpected_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character that starts no lexeme."""
    suggestions = ErrorRecovery.suggest_alternatives(char)

    if suggestions:
        help_text = f"Lox spells this as: {', '.join(suggestions)}"
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in Lox source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(Diagnostic(
        message=ERROR_CODES["L001"],
        location=location,
        code="L001",
        help_text=help_text,
        suggestions=suggestions,
    ))


def create_unterminated_string_error(location: SourceLocation) -> LexerError:
    """Create an error for a string literal that never closes."""
    return LexerError(Diagnostic(
        message=ERROR_CODES["L002"],
        location=location,
        code="L002",
        help_text='String literals must be closed with a matching " quote.',
        suggestions=['Add a closing " quote'],
    ))
