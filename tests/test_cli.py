"""
Tests for the inkwell CLI
"""

from unittest.mock import AsyncMock, patch

from click.testing import CliRunner

from inkwell import __version__
from inkwell.cli import cli


class TestCli:
    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_schema_prints_sdl(self):
        result = CliRunner().invoke(cli, ["schema"])

        assert result.exit_code == 0
        assert "authorsContacts: [AuthorContact]" in result.output
        assert "article(slug: String!): ArticleEntityResponse" in result.output

    def test_seed_reports_existing_content(self):
        with (
            patch("inkwell.database.init_database"),
            patch("inkwell.database.create_tables", new=AsyncMock()),
            patch("inkwell.database.get_async_session") as mock_session,
            patch("inkwell.database.seed_data.seed_demo_content", new=AsyncMock(return_value=False)),
        ):
            mock_session.return_value.__aenter__.return_value = AsyncMock()
            result = CliRunner().invoke(cli, ["seed"])

        assert result.exit_code == 0
        assert "already present" in result.output

    def test_seed_failure_exits_non_zero(self):
        with (
            patch("inkwell.database.init_database", side_effect=RuntimeError("no database")),
        ):
            result = CliRunner().invoke(cli, ["seed"])

        assert result.exit_code == 1
        assert "no database" in result.output
