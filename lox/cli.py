#!/usr/bin/env python3
"""
lox-scan: print the tokens of a Lox script
==========================================

Usage:
    lox-scan [script]

With a script path, scans the whole file and prints one token per line.
Without one, starts an interactive prompt and scans each line entered
until end of input (Ctrl-D).

Exit codes:
    0   success
    64  wrong number of arguments
    65  the script contained lexical errors
    66  the script could not be read
"""

import argparse
import sys
from typing import List, Optional

from .lexer import ErrorReporter, scan

EXIT_USAGE = 64
EXIT_DATA_ERROR = 65
EXIT_NO_INPUT = 66

USAGE = "Usage: lox-scan [script]"


def run(source: str, reporter: ErrorReporter, filename: str = "<stdin>") -> None:
    """Scan ``source`` and print its tokens."""
    for token in scan(source, reporter, filename):
        print(token)


def run_file(path: str) -> int:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            source = f.read()
    except OSError as e:
        print(f"Could not read {path}: {e.strerror}", file=sys.stderr)
        return EXIT_NO_INPUT

    reporter = ErrorReporter(stream=sys.stderr, filename=path)
    run(source, reporter, path)

    if reporter.had_error:
        return EXIT_DATA_ERROR
    return 0


def run_prompt() -> int:
    reporter = ErrorReporter(stream=sys.stderr, filename="<stdin>")

    while True:
        print("> ", end="", flush=True)
        line = sys.stdin.readline()
        # readline() returns '' only at end of input
        if not line:
            break
        run(line, reporter)
        # A mistake on one line should not poison the next
        reporter.reset()

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for lox-scan"""

    parser = argparse.ArgumentParser(
        prog="lox-scan",
        description="Print the tokens of a Lox script, or of each line typed at the prompt.",
        add_help=False,
    )
    parser.add_argument('script', nargs='*',
                        help='Path to a Lox script; omit to start the prompt')

    # Anything that looks like an option is still just a path
    args, extra = parser.parse_known_args(argv)
    scripts = args.script + extra

    if len(scripts) > 1:
        print(USAGE)
        return EXIT_USAGE
    if scripts:
        return run_file(scripts[0])
    return run_prompt()


if __name__ == "__main__":
    sys.exit(main())
