"""
Info and warning notifications for the console.

Two kinds of info messages exist:
  - accessible: short, important lines that are shown in every mode. In
    accessibility mode the "[INFO]" tag is dropped so screen readers only
    read the message itself.
  - inaccessible: verbose, skimmable lines (e.g. one per processed file).
    They are shown only when accessibility mode is off, since a user whose
    terminal is read aloud cannot skip them.

Warnings go to stderr and are never suppressed; accessibility mode only
changes the tag from "Warning:" to the explicit "[WARNING]".
"""

from __future__ import annotations

import sys
from enum import Enum

from accessibility import is_accessible
from colors import Palette


class Importance(Enum):
    ACCESSIBLE = "accessible"
    INACCESSIBLE = "inaccessible"


def _importance(value):
    try:
        return Importance(value)
    except ValueError:
        raise ValueError(
            f"Unknown importance {value!r}. "
            f"Supported: {', '.join(i.value for i in Importance)}"
        ) from None


def format_info(message, accessible, importance=Importance.ACCESSIBLE, palette=None):
    """Return the info line to write, or None when it is suppressed."""
    importance = _importance(importance)
    if accessible:
        if importance is Importance.INACCESSIBLE:
            return None
        return f"{message}\n"
    p = palette or Palette()
    return f"{p.yellow}[INFO]{p.reset} {message}\n"


def format_warning(message, accessible, palette=None):
    p = palette or Palette()
    tag = "[WARNING]" if accessible else "Warning:"
    return f"{p.orange}{tag}{p.reset} {message}\n"


def _emit(sink, line):
    # One write per line so prefix and message are never split.
    sink.write(line)
    sink.flush()


class Reporter:
    """Notifier bound to an explicit accessibility mode and palette."""

    def __init__(self, accessible: bool, palette: Palette | None = None):
        self._accessible = bool(accessible)
        self._palette = palette if palette is not None else Palette()

    @classmethod
    def from_config(cls, config):
        return cls(config.accessible, config.palette())

    @property
    def accessible(self):
        return self._accessible

    def info(self, importance, message, sink=None):
        line = format_info(message, self._accessible, importance, self._palette)
        if line is None:
            return
        _emit(sink if sink is not None else sys.stdout, line)

    def info_accessible(self, message, sink=None):
        self.info(Importance.ACCESSIBLE, message, sink)

    def info_inaccessible(self, message, sink=None):
        self.info(Importance.INACCESSIBLE, message, sink)

    def warning(self, message):
        _emit(sys.stderr, format_warning(message, self._accessible, self._palette))


# --- Process-wide API (reads the committed accessibility mode) --------------

def _reporter(palette, stream):
    # Default colors follow the stream actually written to.
    if palette is None:
        palette = Palette.from_env((stream,))
    return Reporter(is_accessible(), palette)


def info(importance, message, sink=None, palette=None):
    """Print an info line to sink (stdout by default)."""
    if sink is None:
        sink = sys.stdout
    _reporter(palette, sink).info(importance, message, sink)


def info_accessible(message, sink=None, palette=None):
    info(Importance.ACCESSIBLE, message, sink, palette)


def info_inaccessible(message, sink=None, palette=None):
    info(Importance.INACCESSIBLE, message, sink, palette)


def warning(message, palette=None):
    """Print a warning line to stderr."""
    _reporter(palette, sys.stderr).warning(message)
