"""
Unit tests for the 'stats' command.
"""

import json

from stackmap.cli.commands.stats import stats


class TestStatsCommand:

    def test_demo_catalog(self, runner, seed_path):
        result = runner.invoke(stats)

        assert result.exit_code == 0
        assert "Catalog Statistics" in result.output
        assert "Playbooks:  3" in result.output
        assert "BELONGS_TO" in result.output
        assert "Hierarchy is healthy" in result.output

    def test_reports_problems(self, runner, project_dir):
        catalog = project_dir / "broken.json"
        catalog.write_text(json.dumps({
            "nodes": [
                {"id": "A", "name": "A", "type": "LAYER", "level": 0},
                {"id": "B", "name": "B", "type": "LAYER", "level": 0},
            ],
            "edges": [
                {"from": "A", "to": "B", "relation": "BELONGS_TO"},
                {"from": "B", "to": "A", "relation": "BELONGS_TO"},
                {"from": "A", "to": "GHOST", "relation": "USES"},
            ],
        }))

        result = runner.invoke(stats, ["-c", str(catalog)])

        assert result.exit_code == 0
        assert "BELONGS_TO cycle" in result.output
        assert "Dangling edge: A -[USES]→ GHOST" in result.output
        assert "Hierarchy is healthy" not in result.output
