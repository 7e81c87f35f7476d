#!/usr/bin/env python3
"""
Main test runner for the Lox scanner.

Scans a small sample program as a smoke test, then runs the unit
test suite under tests/.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)

SAMPLE_PROGRAM = """
// Closures and classes, the usual tour
class Counter {
  init() { this.count = 0; }
  bump() { this.count = this.count + 1; return this.count; }
}

fun makeGreeting(name) {
  return "Hello, " + name + "!";
}

var c = Counter();
while (c.bump() <= 3) print makeGreeting("world");
if (c.count >= 4 and !false) print 12.5 / 2.0;
"""

BROKEN_PROGRAM = 'var ok = 1;\nvar bad = 2 @ 3;\nprint "never closed;\n'


def run_all_tests():
    """Run the smoke tests and the unit test suite."""

    print("Lox Scanner Test Suite")
    print("=" * 60)

    try:
        from lox.lexer import ErrorReporter, TokenKind, scan
        print("✅ Scanner modules imported successfully")
    except ImportError as e:
        print(f"❌ Failed to import scanner modules: {e}")
        return False

    print("Scanning sample program...")
    reporter = ErrorReporter()
    tokens = scan(SAMPLE_PROGRAM, reporter)
    if reporter.had_error:
        print(f"   ❌ Unexpected lexical errors: {len(reporter.diagnostics)}")
        for diagnostic in reporter.diagnostics:
            print(diagnostic)
        return False
    if tokens[-1].kind != TokenKind.EOF:
        print("   ❌ Token list does not end with EOF")
        return False
    keywords = sum(1 for t in tokens if t.is_keyword)
    print(f"   ✅ {len(tokens)} tokens, {keywords} reserved words, last line {tokens[-1].line}")

    print("Scanning program with errors...")
    reporter = ErrorReporter(stream=sys.stdout)
    tokens = scan(BROKEN_PROGRAM, reporter)
    if len(reporter.diagnostics) != 2:
        print(f"   ❌ Expected 2 errors, got {len(reporter.diagnostics)}")
        return False
    print(f"   ✅ Both errors reported, scan still produced {len(tokens)} tokens")
    print()

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=1).run(suite)
    if not result.wasSuccessful():
        return False

    print()
    print("🎉 All tests PASSED!")
    return True


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
