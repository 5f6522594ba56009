"""Tests for the write-once accessibility flag."""

import threading

import pytest

import accessibility
from accessibility import (
    AccessibilityAlreadySetError,
    AccessibilityFlag,
    AccessibilityNotSetError,
)


class TestAccessibilityFlag:

    def test_get_before_set_fails(self):
        with pytest.raises(AccessibilityNotSetError):
            AccessibilityFlag().get()

    def test_not_set_is_runtime_error(self):
        assert issubclass(AccessibilityNotSetError, RuntimeError)
        assert issubclass(AccessibilityAlreadySetError, RuntimeError)

    @pytest.mark.parametrize("value", [True, False])
    def test_get_returns_set_value(self, value):
        f = AccessibilityFlag()
        f.set(value)
        assert f.get() is value
        assert f.get() is value

    def test_value_is_coerced_to_bool(self):
        f = AccessibilityFlag()
        f.set(1)
        assert f.get() is True

    def test_second_set_fails_and_keeps_value(self):
        f = AccessibilityFlag()
        f.set(False)
        with pytest.raises(AccessibilityAlreadySetError):
            f.set(True)
        with pytest.raises(AccessibilityAlreadySetError):
            f.set(False)
        assert f.get() is False

    def test_is_set(self):
        f = AccessibilityFlag()
        assert not f.is_set
        f.set(False)
        assert f.is_set

    def test_concurrent_set_only_one_wins(self):
        f = AccessibilityFlag()
        errors = []
        barrier = threading.Barrier(8)

        def worker(value):
            barrier.wait()
            try:
                f.set(value)
            except AccessibilityAlreadySetError as e:
                errors.append(e)

        threads = [threading.Thread(target=worker, args=(i % 2 == 0,)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(errors) == 7
        assert f.get() in (True, False)

    def test_repr(self):
        f = AccessibilityFlag()
        assert repr(f) == "AccessibilityFlag(unset)"
        f.set(True)
        assert repr(f) == "AccessibilityFlag(True)"


class TestProcessWideFlag:

    def test_module_helpers_use_process_flag(self, flag):
        with pytest.raises(AccessibilityNotSetError):
            accessibility.is_accessible()
        accessibility.set_accessible(True)
        assert flag.get() is True
        assert accessibility.is_accessible() is True

    def test_set_is_logged(self, flag, caplog):
        with caplog.at_level("DEBUG", logger="accessibility"):
            accessibility.set_accessible(False)
        assert "Accessibility mode set to False" in caplog.text
