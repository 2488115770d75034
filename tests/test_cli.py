from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from api_blueprint.cli import main

FIXTURES = Path(__file__).parent / "fixtures"


class TestCliRender:
    def test_render_to_stdout(self):
        runner = CliRunner()
        result = runner.invoke(main, [
            "render", str(FIXTURES / "widgets.yaml"),
            "--scheme", "https", "--host", "api.example.com",
        ])

        assert result.exit_code == 0
        assert result.output.startswith("FORMAT: 1A9\nHOST: https://api.example.com\n\n# Widgets\n")
        assert "## Widget list [/widgets]" in result.output
        assert "## Widget archive" not in result.output
        assert "# Group Admin" in result.output

    def test_render_to_file(self, tmp_path):
        output_file = tmp_path / "docs" / "widgets.apib"
        runner = CliRunner()
        result = runner.invoke(main, [
            "render", str(FIXTURES / "widgets.yaml"),
            "-o", str(output_file),
        ])

        assert result.exit_code == 0
        content = output_file.read_text(encoding="utf-8")
        assert content.startswith("FORMAT: 1A9\nHOST: http://localhost\n\n")

    def test_render_with_tag(self):
        runner = CliRunner()
        result = runner.invoke(main, ["render", str(FIXTURES / "widgets.yaml"), "--tag", "internal"])

        assert result.exit_code == 0
        assert "# Group Admin" in result.output
        assert "# Group Core" not in result.output

    def test_render_uses_settings_defaults(self, monkeypatch):
        monkeypatch.setenv("API_BLUEPRINT_SCHEME", "https")
        monkeypatch.setenv("API_BLUEPRINT_HOST", "docs.example.com")
        runner = CliRunner()
        result = runner.invoke(main, ["render", str(FIXTURES / "minimal.json")])

        assert result.exit_code == 0
        assert "HOST: https://docs.example.com\n" in result.output

    def test_render_invalid_document(self, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("resource_groups: []\n")
        runner = CliRunner()
        result = runner.invoke(main, ["render", str(bad)])

        assert result.exit_code == 1
        assert "invalid documentation tree" in result.output

    @patch("api_blueprint.cli.configure_logging")
    def test_log_level_option(self, mock_configure):
        runner = CliRunner()
        result = runner.invoke(main, ["--log-level", "debug", "render", str(FIXTURES / "minimal.json")])

        assert result.exit_code == 0
        mock_configure.assert_called_once_with("debug")


class TestCliGroups:
    def test_lists_all_groups(self):
        runner = CliRunner()
        result = runner.invoke(main, ["groups", str(FIXTURES / "widgets.yaml")])

        assert result.exit_code == 0
        assert result.output == "Core [public, core]\nAdmin [internal]\n"

    def test_lists_tagged_groups(self):
        runner = CliRunner()
        result = runner.invoke(main, ["groups", str(FIXTURES / "widgets.yaml"), "--tag", "core"])

        assert result.exit_code == 0
        assert result.output == "Core [public, core]\n"
