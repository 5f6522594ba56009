"""ANSI color constants shared across all modules."""

from __future__ import annotations

import os
import sys
from dotenv import load_dotenv

load_dotenv()

YELLOW = '\033[38;5;11m'        # info tag
ORANGE = '\033[38;2;255;165;0m'  # warning tag (true color)
RESET = '\033[39m'              # default foreground


def colors_enabled(streams=None):
    """Return False when NO_COLOR is set, TERM is dumb, or a stream is not a tty."""
    if 'NO_COLOR' in os.environ:
        return False
    if os.environ.get('TERM') == 'dumb':
        return False
    if streams is None:
        streams = (sys.stdout, sys.stderr)
    for stream in streams:
        isatty = getattr(stream, 'isatty', None)
        if isatty is None or not isatty():
            return False
    return True


class Palette:
    """Resolves color tokens at the point of use; disabled palettes yield ''."""

    def __init__(self, enabled=True):
        self._enabled = bool(enabled)

    @classmethod
    def from_env(cls, streams=None):
        return cls(colors_enabled(streams))

    @property
    def enabled(self):
        return self._enabled

    def _token(self, code):
        return code if self._enabled else ''

    @property
    def yellow(self):
        return self._token(YELLOW)

    @property
    def orange(self):
        return self._token(ORANGE)

    @property
    def reset(self):
        return self._token(RESET)

    def __repr__(self):
        return f"Palette(enabled={self._enabled})"
