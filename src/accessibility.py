"""
Process-wide accessibility mode.

The mode is committed once during startup (normally from the -A/--accessible
command line flag or the ACCESSIBLE environment variable) and read by every
notification afterwards. Reading it before it is committed is a programming
error.
"""

from __future__ import annotations

import logging
import threading

logger = logging.getLogger(__name__)


class AccessibilityNotSetError(RuntimeError):
    """Raised when the accessibility mode is read before it was committed."""


class AccessibilityAlreadySetError(RuntimeError):
    """Raised when the accessibility mode is committed a second time."""


class AccessibilityFlag:
    """Write-once boolean: set exactly once, then read from anywhere."""

    def __init__(self):
        self._value = None
        self._lock = threading.Lock()

    @property
    def is_set(self):
        return self._value is not None

    def set(self, value):
        with self._lock:
            if self._value is not None:
                raise AccessibilityAlreadySetError(
                    f"Accessibility mode already set to {self._value}"
                )
            self._value = bool(value)
        logger.debug("Accessibility mode set to %s", self._value)

    def get(self):
        value = self._value
        if value is None:
            raise AccessibilityNotSetError(
                "Accessibility mode read before it was set"
            )
        return value

    def __repr__(self):
        state = "unset" if self._value is None else self._value
        return f"AccessibilityFlag({state})"


ACCESSIBLE = AccessibilityFlag()


def set_accessible(value):
    """Commit the process-wide accessibility mode. Call once, before any report."""
    ACCESSIBLE.set(value)


def is_accessible():
    return ACCESSIBLE.get()
