"""Unit tests for memoria.cli module."""

import pytest
from memoria.cli import main


class TestCli:
    """Tests for the CLI entry point."""

    def test_no_command_prints_help(self, capsys):
        """Should print usage and succeed without a subcommand."""
        assert main([]) == 0
        assert "usage: memoria" in capsys.readouterr().out

    def test_version(self, capsys):
        """Should print the version and exit."""
        with pytest.raises(SystemExit) as exc:
            main(["--version"])

        assert exc.value.code == 0
        assert "memoria 1.0.0" in capsys.readouterr().out

    def test_config_masks_token(self, monkeypatch, capsys):
        """Should never print the Discord token."""
        monkeypatch.setattr("memoria.config.config.discord_token", "secret-token")

        assert main(["config"]) == 0

        out = capsys.readouterr().out
        assert "secret-token" not in out
        assert "token: ***" in out

    def test_search_prints_cards(self, monkeypatch, capsys, sample_image):
        """Should run the search command and print each card."""
        calls = []

        def fake_search(query, limit, page, _id, field_tags):
            calls.append((query, limit, page, _id, field_tags))
            return [sample_image]

        monkeypatch.setattr("memoria.bot.commands.search", fake_search)

        assert main(["search", "rowi", "--folder", "cmx_20"]) == 0

        out = capsys.readouterr().out
        assert "Rowi Beach Day" in out
        assert "Folder: cmx_20" in out
        assert calls == [("rowi", 5, 0, None, {"folder": "cmx_20"})]

    def test_search_without_text_prints_help(self, capsys):
        """Should print the help text for an empty search."""
        assert main(["search"]) == 0

        assert "!hm_search searches for images" in capsys.readouterr().out

    def test_search_without_results_fails(self, monkeypatch, capsys):
        """Should exit non-zero when nothing matches."""
        monkeypatch.setattr("memoria.bot.commands.search", lambda *args: [])

        assert main(["search", "nothing"]) == 1

        assert "no image found with such query" in capsys.readouterr().out

    def test_search_error_fails(self, monkeypatch, capsys):
        """Should exit non-zero and print the reason when the search fails."""

        def broken_search(*args):
            raise RuntimeError("database offline")

        monkeypatch.setattr("memoria.bot.commands.search", broken_search)

        assert main(["search", "rowi"]) == 1

        assert "reason: database offline" in capsys.readouterr().out
