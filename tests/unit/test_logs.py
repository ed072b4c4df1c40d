"""Unit tests for memoria.bot.logs module."""

import logging

from memoria.bot.logs import format_user_log, user_log


class TestFormatUserLog:
    """Tests for format_user_log function."""

    def test_includes_command_author_channel(self, make_message):
        """Should prefix the text with command, author and channel."""
        line = format_user_log(make_message("!hm_search"), "asked search help", "!hm_search")

        assert line == "[!hm_search] alice@#images: asked search help"

    def test_appends_context_as_json(self, make_message):
        """Should append the context as sorted JSON."""
        line = format_user_log(
            make_message("!hm_search rowi"), "no image found", "!hm_search", {"query": "rowi", "page": 0}
        )

        assert line.endswith(' {"page": 0, "query": "rowi"}')

    def test_handles_unserializable_context(self, make_message):
        """Should stringify values JSON cannot encode."""
        line = format_user_log(make_message("x"), "failed", "!hm_search", {"error": ValueError("boom")})

        assert "boom" in line


class TestUserLog:
    """Tests for user_log function."""

    def test_info_by_default(self, make_message, caplog):
        """Should log at INFO when no level is given."""
        with caplog.at_level(logging.INFO, logger="memoria.bot"):
            user_log(make_message("!hm_search"), "asked search help", "!hm_search")

        assert caplog.records[-1].levelno == logging.INFO
        assert "asked search help" in caplog.records[-1].getMessage()

    def test_error_level(self, make_message, caplog):
        """Should log at ERROR for error-class events."""
        with caplog.at_level(logging.INFO, logger="memoria.bot"):
            user_log(make_message("x"), "bad arguments: empty query", "!hm_search", "error", {"args": {}})

        assert caplog.records[-1].levelno == logging.ERROR
