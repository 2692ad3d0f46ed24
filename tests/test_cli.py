"""Tests for the versenotes CLI."""

import json
from pathlib import Path

from click.testing import CliRunner

from versenotes import __version__
from versenotes.__main__ import cli


FIXTURES_DIR = Path(__file__).parent / "fixtures"


class TestLookupCommand:
    def test_lookup_prints_passage(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--memory", "lookup", "Jn 3:16"])

        assert result.exit_code == 0, result.output
        assert "John 3:16" in result.output
        assert "For God so loved" in result.output

    def test_lookup_json(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--memory", "lookup", "John 3:16-17", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["formattedReference"] == "John 3:16-17"
        assert [v["verse"] for v in data["verses"]] == [16, 17]

    def test_lookup_invalid_reference(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--memory", "lookup", "Foo 1:1"])

        assert result.exit_code == 1
        assert "Unknown book" in result.output

    def test_lookup_not_found(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--memory", "lookup", "John 999:1"])

        assert result.exit_code == 1
        assert "No verses found for John 999:1" in result.output

    def test_lookup_custom_corpus(self):
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "--memory",
                "--corpus",
                str(FIXTURES_DIR / "sample_corpus.json"),
                "lookup",
                "Jn 11:35",
            ],
        )

        assert result.exit_code == 0, result.output
        assert "Jesus wept." in result.output

    def test_bad_corpus_exits(self):
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["--memory", "--corpus", str(FIXTURES_DIR / "bad_corpus.json"), "lookup", "John 1:1"],
        )

        assert result.exit_code == 1
        assert "Error" in result.output


class TestStoreCommands:
    def test_init_reports_verse_count(self, tmp_path):
        runner = CliRunner()
        db_path = tmp_path / "verses.db"
        result = runner.invoke(cli, ["--db", str(db_path), "init"])

        assert result.exit_code == 0, result.output
        assert "43 verses available" in result.output
        assert db_path.exists()

    def test_reset_requires_confirmation(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(cli, ["--db", str(tmp_path / "verses.db"), "reset"])

        assert result.exit_code == 1
        assert "Refusing" in result.output

    def test_reset_then_reseed(self, tmp_path):
        runner = CliRunner()
        db = ["--db", str(tmp_path / "verses.db")]
        runner.invoke(cli, db + ["init"])

        result = runner.invoke(cli, db + ["reset", "--yes"])
        assert result.exit_code == 0, result.output
        assert "cleared" in result.output

        result = runner.invoke(cli, db + ["init"])
        assert "43 verses available" in result.output

    def test_cache_clear(self, tmp_path):
        runner = CliRunner()
        db = ["--db", str(tmp_path / "verses.db")]
        runner.invoke(cli, db + ["lookup", "John 3:16"])

        result = runner.invoke(cli, db + ["cache", "clear"])
        assert result.exit_code == 0, result.output
        assert "Removed 1 cached lookups" in result.output

    def test_cache_purge_keeps_fresh_entries(self, tmp_path):
        runner = CliRunner()
        db = ["--db", str(tmp_path / "verses.db")]
        runner.invoke(cli, db + ["lookup", "John 3:16"])

        result = runner.invoke(cli, db + ["cache", "purge"])
        assert result.exit_code == 0, result.output
        assert "Purged 0 expired lookups" in result.output


class TestOtherCommands:
    def test_books(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--memory", "books"])

        assert result.exit_code == 0, result.output
        assert "Genesis" in result.output
        assert "Revelation" in result.output

    def test_suggest(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--memory", "suggest", "I read Jn 3:16"])

        assert result.exit_code == 0, result.output
        assert "John 3:16" in result.output

    def test_suggest_nothing(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--memory", "suggest", "no reference here"])

        assert result.exit_code == 0, result.output
        assert "No suggestion" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output
