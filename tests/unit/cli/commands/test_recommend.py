"""
Unit tests for the 'recommend' command.
"""

from unittest.mock import patch

from stackmap.cli.commands.recommend import recommend
from stackmap.core.demo import DemoManager

CRM_FLAGS = ["--app-type", "crm", "--auth", "--db", "--no-rag", "--budget", "low", "--level", "advanced"]


class TestRecommendCommand:

    def test_all_flags(self, runner, seed_path):
        result = runner.invoke(recommend, CRM_FLAGS)

        assert result.exit_code == 0
        assert "rule R3" in result.output
        assert "Primary stack: Lovable, Supabase" in result.output
        assert "Suggested playbook: P_CRM_SIMPLE" in result.output
        assert "Data leaks without RLS" in result.output

    def test_beginner_gets_builder(self, runner, seed_path):
        flags = ["--app-type", "saas", "--auth", "--db", "--no-rag", "--budget", "medium", "--level", "beginner"]
        result = runner.invoke(recommend, flags)

        assert result.exit_code == 0
        assert "rule R2" in result.output
        assert "1. Builder (Lovable/Bolt)" in result.output

    @patch("stackmap.cli.commands.recommend.Confirm.ask")
    @patch("stackmap.cli.commands.recommend.Prompt.ask")
    def test_interactive(self, mock_prompt, mock_confirm, runner, seed_path):
        mock_prompt.side_effect = ["agent", "high", "intermediate"]
        mock_confirm.side_effect = [False, True, True]

        result = runner.invoke(recommend)

        assert result.exit_code == 0
        assert mock_prompt.call_count == 3
        assert mock_confirm.call_count == 3
        assert "rule R4" in result.output

    @patch("stackmap.cli.commands.recommend.Prompt.ask")
    def test_only_missing_questions_asked(self, mock_prompt, runner, seed_path):
        mock_prompt.return_value = "advanced"
        flags = CRM_FLAGS[:-2]

        result = runner.invoke(recommend, flags)

        assert result.exit_code == 0
        mock_prompt.assert_called_once()

    def test_invalid_choice(self, runner, seed_path):
        result = runner.invoke(recommend, ["--app-type", "spaceship"])
        assert result.exit_code == 2

    def test_empty_rule_table(self, runner, project_dir):
        seed = DemoManager(project_dir).provision()
        seed.write_text('{"nodes": [], "edges": []}')

        result = runner.invoke(recommend, CRM_FLAGS)

        assert result.exit_code == 1
        assert "Decision rule table is empty" in result.output
