"""Engine error type and debug output."""

import sys


class EngineError(Exception):
    """Raised when the engine hits a condition it cannot continue from."""


def output_debug_text(text: str) -> None:
    """Write a line of debug text to the debug stream (standard error)."""
    sys.stderr.write(f"{text}\n")
    sys.stderr.flush()