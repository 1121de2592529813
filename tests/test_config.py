"""Tests for configuration."""

import logging
import os

import pytest


class TestConfig:
    """Test Config defaults and helpers."""

    def test_defaults(self):
        from exfunctions.config import Config, DEFAULT_SSN_PATTERN

        config = Config()
        if "EXFUNCTIONS_SSN_PATTERN" not in os.environ:
            assert config.ssn_pattern == DEFAULT_SSN_PATTERN
        if "EXFUNCTIONS_NEWLINE" not in os.environ:
            assert config.newline == os.linesep

    def test_get_all_config_variables(self):
        from exfunctions.config import get_all_config_variables, config

        variables = get_all_config_variables()
        assert set(variables) == {
            "EXFUNCTIONS_URL_PATTERN",
            "EXFUNCTIONS_PHONE_PATTERN",
            "EXFUNCTIONS_SSN_PATTERN",
            "EXFUNCTIONS_HTML_TAG_PATTERN",
            "EXFUNCTIONS_LINE_BREAK_PATTERN",
            "EXFUNCTIONS_NEWLINE",
            "EXFUNCTIONS_LOG_LEVEL",
        }
        assert variables["EXFUNCTIONS_LOG_LEVEL"] == config.log_level

    def test_patterns_come_from_config(self):
        from exfunctions.config import config
        from exfunctions.patterns import get_pattern

        assert get_pattern("contact.url").pattern == config.url_pattern
        assert get_pattern("html.tag").pattern == config.html_tag_pattern

    def test_setup_logging(self):
        from exfunctions.config import setup_logging

        setup_logging("debug")
        assert logging.getLogger().handlers
