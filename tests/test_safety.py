"""Tests for input guards."""

import logging

import pytest


class TestGuards:
    """Test guard decorators."""

    def test_guard_none(self):
        from exfunctions.safety import guard_none

        @guard_none()
        def shout(text):
            return text.upper()

        assert shout("hi") == "HI"
        assert shout(None) is None
        assert shout(text=None) is None
        assert shout("") == ""

    def test_guard_empty_default(self):
        from exfunctions.safety import guard_empty

        @guard_empty(default=0)
        def count(text):
            return len(text.split())

        assert count("a b") == 2
        assert count("") == 0
        assert count(None) == 0

    def test_guard_empty_passthrough(self):
        from exfunctions.safety import guard_empty, PASSTHROUGH

        @guard_empty(default=PASSTHROUGH)
        def exclaim(text):
            return text + "!"

        assert exclaim("") == ""
        assert exclaim(None) is None
        assert exclaim("hey") == "hey!"

    def test_guard_blank(self):
        from exfunctions.safety import guard_blank

        @guard_blank(default=0)
        def count(text):
            return len(text.split("."))

        assert count("a. b") == 2
        assert count("   ") == 0
        assert count("") == 0
        assert count(None) == 0

    def test_guard_logs_short_circuit(self, caplog):
        from exfunctions.text import left_of

        caplog.set_level(logging.DEBUG, logger="exfunctions.safety.guards")
        assert left_of("", "x") is None
        assert "left_of: empty input" in caplog.text

    def test_guard_keeps_metadata(self):
        from exfunctions.text import words

        assert words.__name__ == "words"
        assert "list of words" in words.__doc__

    @pytest.mark.parametrize("value,expected", [
        (None, True), ("", True), ("  \t", True), ("x", False), (" x ", False),
    ])
    def test_is_blank(self, value, expected):
        from exfunctions.safety import is_blank

        assert is_blank(value) is expected
