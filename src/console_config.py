#!/usr/bin/env python3
"""
Console configuration for notifications.
Reads ACCESSIBLE and NO_COLOR from .env / the environment; explicit values
(usually from command line flags) take precedence.

Truthy ACCESSIBLE values: 1, true, yes (case insensitive)
"""

import logging
import os
from dotenv import load_dotenv

from accessibility import set_accessible
from colors import Palette, colors_enabled

load_dotenv()

logger = logging.getLogger(__name__)

TRUTHY = {'1', 'true', 'yes'}


def env_flag(name, default='0'):
    """Read a boolean switch from the environment."""
    return os.getenv(name, default).strip().lower() in TRUTHY


class ConsoleConfig:
    """Immutable accessibility/color settings, built once at startup."""

    def __init__(self, accessible=None, color=None):
        self._accessible = bool(env_flag('ACCESSIBLE') if accessible is None else accessible)
        self._color = bool(colors_enabled() if color is None else color)
        logger.debug("Resolved %r", self)

    @classmethod
    def from_args(cls, args):
        """Build from an argparse namespace carrying accessible / no_color."""
        color = False if getattr(args, 'no_color', False) else None
        return cls(accessible=getattr(args, 'accessible', None), color=color)

    @property
    def accessible(self):
        return self._accessible

    @property
    def color(self):
        return self._color

    def palette(self):
        return Palette(self._color)

    def apply(self):
        """Commit the accessibility mode process-wide and return self."""
        set_accessible(self._accessible)
        return self

    def __eq__(self, other):
        if not isinstance(other, ConsoleConfig):
            return NotImplemented
        return (self._accessible, self._color) == (other._accessible, other._color)

    def __hash__(self):
        return hash((self._accessible, self._color))

    def __repr__(self):
        return f"ConsoleConfig(accessible={self._accessible}, color={self._color})"
