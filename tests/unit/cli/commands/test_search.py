"""
Unit tests for the 'search' command.
"""

import json

from stackmap.cli.commands.search import search


class TestSearchCommand:

    def test_matches(self, runner, seed_path):
        result = runner.invoke(search, ["crm"])

        assert result.exit_code == 0
        assert "P_CRM_SIMPLE" in result.output
        assert "CRM Simples" in result.output

    def test_too_short(self, runner, seed_path):
        result = runner.invoke(search, ["a"])
        assert result.exit_code == 0
        assert "at least 2 characters" in result.output

    def test_no_results(self, runner, seed_path):
        result = runner.invoke(search, ["zzzz"])
        assert result.exit_code == 0
        assert "No results for 'zzzz'" in result.output

    def test_custom_catalog(self, runner, seed_path, tmp_path):
        other = tmp_path / "elsewhere.json"
        seed_path.rename(other)

        result = runner.invoke(search, ["supabase", "-c", str(other)])

        assert result.exit_code == 0
        assert "T_SUPABASE" in result.output

    def test_undecodable_catalog(self, runner, project_dir):
        bad = project_dir / "bad.json"
        bad.write_bytes(b'{"nodes": [{"id": "\xff\xfe"}]}')

        result = runner.invoke(search, ["crm", "-c", str(bad)])

        assert result.exit_code == 1
        assert not isinstance(result.exception, UnicodeDecodeError)
        assert "Failed to load catalog" in result.output

    def test_summary_printed_verbatim(self, runner, project_dir):
        catalog = project_dir / "brackets.json"
        catalog.write_text(json.dumps({
            "nodes": [{"id": "T1", "name": "Tool", "type": "TOOL", "summary": "uses [/x] tags"}],
        }))

        result = runner.invoke(search, ["tool", "-c", str(catalog)])

        assert result.exit_code == 0
        assert "[/x]" in result.output
