"""
Unit tests for the 'init' command.
"""

from unittest.mock import patch

import yaml

from stackmap.cli.commands.initialize import init
from stackmap.core.catalog import Catalog


class TestInitCommand:
    """Test the init command."""

    def test_init_creates_config(self, runner, project_dir):
        result = runner.invoke(init)

        assert result.exit_code == 0
        assert "Initialized successfully" in result.output

        config_file = project_dir / ".stackmap/config.yaml"
        assert config_file.exists()
        config = yaml.safe_load(config_file.read_text())
        assert config["catalog"]["path"] == ".stackmap/seed.json"
        assert not (project_dir / ".stackmap/seed.json").exists()

    def test_init_demo_writes_catalog(self, runner, project_dir):
        result = runner.invoke(init, ["--demo"])

        assert result.exit_code == 0
        seed = project_dir / ".stackmap/seed.json"
        assert seed.exists()
        assert Catalog.load(seed).get_playbook("P_CRM_SIMPLE") is not None
        assert "stackmap explore" in result.output

    @patch("stackmap.cli.commands.initialize.Confirm.ask")
    def test_existing_config_declined(self, mock_confirm, runner, project_dir):
        config_file = project_dir / ".stackmap/config.yaml"
        config_file.parent.mkdir()
        config_file.write_text("search:\n  cap: 3\n")
        mock_confirm.return_value = False

        result = runner.invoke(init)

        assert result.exit_code == 0
        assert "Aborted" in result.output
        assert config_file.read_text() == "search:\n  cap: 3\n"

    @patch("stackmap.cli.commands.initialize.Confirm.ask")
    def test_force_skips_prompt(self, mock_confirm, runner, project_dir):
        config_file = project_dir / ".stackmap/config.yaml"
        config_file.parent.mkdir()
        config_file.write_text("search:\n  cap: 3\n")

        result = runner.invoke(init, ["--force"])

        assert result.exit_code == 0
        mock_confirm.assert_not_called()
        assert yaml.safe_load(config_file.read_text())["search"]["cap"] == 12
