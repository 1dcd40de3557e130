# Tests for gitfriend.cli
# CLI entry point using Click testing

from pathlib import Path
from unittest.mock import MagicMock, patch

import yaml
from click.testing import CliRunner

from gitfriend.cli import cli
from gitfriend.config.schema import PromptStyle, UpdateConfig
from gitfriend.output.prompts import TextPrompter


class TestCliBasics:
    """Tests for help and version."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Git-Friend" in result.output
        assert "--prompt-style" in result.output
        assert "Check or Configure Remote" in result.output

    @patch("gitfriend.cli.show_version")
    @patch("gitfriend.cli.get_repo_root")
    def test_version_does_not_need_a_repository(self, mock_root, mock_show, temp_home: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        mock_show.assert_called_once()
        assert isinstance(mock_show.call_args.args[1], UpdateConfig)
        mock_root.assert_not_called()

    @patch("gitfriend.cli.show_version")
    def test_version_with_invalid_config(self, mock_show, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text(yaml.dump({"prompts": {"style": "bogus"}}))

        runner = CliRunner()
        result = runner.invoke(cli, ["--version", "--config", str(path)])

        assert result.exit_code == 0
        assert "Invalid configuration" not in result.output
        assert mock_show.call_args.args[1] == UpdateConfig()


class TestCliStartup:
    """Tests for startup checks."""

    @patch("gitfriend.cli.get_repo_root", return_value=None)
    def test_not_a_repository(self, mock_root, temp_home: Path):
        runner = CliRunner()
        result = runner.invoke(cli, [])

        assert result.exit_code == 1
        assert "Not a git repository" in result.output

    def test_missing_explicit_config(self, temp_dir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(temp_dir / "missing.yaml")])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_invalid_config_value(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text(yaml.dump({"prompts": {"style": "wizard"}}))

        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(path)])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_init_config(self, temp_dir: Path):
        path = temp_dir / "gitfriend" / "config.yaml"
        runner = CliRunner()

        first = runner.invoke(cli, ["--init-config", "--config", str(path)])
        second = runner.invoke(cli, ["--init-config", "--config", str(path)])

        assert first.exit_code == 0
        assert "Created configuration" in first.output
        assert path.exists()
        assert second.exit_code == 0
        assert "already exists" in second.output


class TestCliSession:
    """Tests for starting the interactive session."""

    @patch("gitfriend.cli.Session")
    @patch("gitfriend.cli.get_repo_root", return_value=Path("/work/repo"))
    def test_runs_session_and_exits_with_its_code(self, mock_root, mock_session_cls, temp_home: Path):
        mock_session_cls.return_value.run.return_value = 130

        runner = CliRunner()
        result = runner.invoke(cli, [])

        assert result.exit_code == 130
        engine = mock_session_cls.call_args.args[0]
        assert engine.repository.path == Path("/work/repo")

    @patch("gitfriend.cli.Session")
    @patch("gitfriend.cli.get_repo_root", return_value=Path("/work/repo"))
    def test_prompt_style_option(self, mock_root, mock_session_cls, temp_home: Path):
        mock_session_cls.return_value.run.return_value = 0

        runner = CliRunner()
        result = runner.invoke(cli, ["--prompt-style", PromptStyle.TEXT.value])

        assert result.exit_code == 0
        prompter = mock_session_cls.call_args.args[1]
        assert isinstance(prompter, TextPrompter)

    @patch("gitfriend.cli.Session")
    @patch("gitfriend.cli.get_repo_root")
    def test_repo_option(self, mock_root, mock_session_cls, temp_dir: Path, temp_home: Path):
        mock_root.return_value = temp_dir
        mock_session_cls.return_value = MagicMock(run=MagicMock(return_value=0))

        runner = CliRunner()
        result = runner.invoke(cli, ["-C", str(temp_dir)])

        assert result.exit_code == 0
        mock_root.assert_called_once_with(temp_dir)

    @patch("gitfriend.cli.Session")
    @patch("gitfriend.cli.get_repo_root", return_value=Path("/work/repo"))
    def test_settings_from_config(self, mock_root, mock_session_cls, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text(yaml.dump({"workflow": {"confirm_destructive": False}}))
        mock_session_cls.return_value.run.return_value = 0

        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(path)])

        assert result.exit_code == 0
        engine = mock_session_cls.call_args.args[0]
        assert engine.settings.confirm_destructive is False
