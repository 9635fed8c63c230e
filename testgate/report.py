"""Console status output for test runs."""

import os
import sys

GREEN = "\033[32m"
RED = "\033[31m"
RESET = "\033[0m"

BANNER = ("🧪", "[..]", "Running all tests...")
PASSED = ("✅", "[OK]", "All tests passed!")
FAILED = ("❌", "[FAIL]", "Some tests failed")


def use_color(stream=None):
    """Colour only on a tty (or under CI), and never when NO_COLOR is set."""
    stream = stream or sys.stdout
    if os.environ.get("NO_COLOR"):
        return False
    return stream.isatty() or bool(os.environ.get("CI"))


def _glyph(glyph, fallback, stream):
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        glyph.encode(encoding)
    except (UnicodeEncodeError, LookupError):
        return fallback
    return glyph


def format_line(message, color="", stream=None):
    stream = stream or sys.stdout
    glyph, fallback, text = message
    prefix = _glyph(glyph, fallback, stream)
    if color and use_color(stream):
        return f"{color}{prefix} {text}{RESET}"
    return f"{prefix} {text}"


def print_banner(stream=None):
    stream = stream or sys.stdout
    print(format_line(BANNER, stream=stream), file=stream, flush=True)


def print_result(result, stream=None):
    """Print the single pass/fail status line for an InvocationResult."""
    stream = stream or sys.stdout
    if result.succeeded:
        line = format_line(PASSED, GREEN, stream)
    else:
        line = format_line(FAILED, RED, stream)
    print(line, file=stream, flush=True)
