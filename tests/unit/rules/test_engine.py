"""
Unit tests for decision rule scoring and selection.
"""

import pytest

from stackmap.core.exceptions import EmptyRuleTableError
from stackmap.core.types import AnswerSet, DecisionRule
from stackmap.rules.engine import BUILDER_LABEL, RuleEngine, ScoringWeights


def answers(**overrides) -> AnswerSet:
    base = {
        "app_type": "crm",
        "needs_auth": True,
        "needs_db": True,
        "needs_rag": False,
        "budget": "low",
        "user_level": "advanced",
    }
    base.update(overrides)
    return AnswerSet(**base)


def rule(rule_id: str, condition: dict, primary=("Next.js",), tools=("Next.js",)) -> DecisionRule:
    return DecisionRule.model_validate({
        "id": rule_id,
        "if": condition,
        "then": {"primary_stack": list(primary), "tools_to_master": list(tools)},
    })


class TestScore:

    def test_weights(self):
        engine = RuleEngine([])
        full = rule("R", {"app_type": "crm", "needs_auth": True, "needs_db": True,
                          "needs_rag": False, "budget": "low"})
        assert engine.score(full, answers()) == 10 + 3 + 3 + 5 + 4

    def test_absent_fields_are_wildcards(self):
        engine = RuleEngine([])
        assert engine.score(rule("R", {}), answers()) == 0

    def test_mismatch_scores_nothing(self):
        engine = RuleEngine([])
        assert engine.score(rule("R", {"app_type": "saas", "needs_rag": True}), answers()) == 0

    def test_custom_weights(self):
        engine = RuleEngine([], weights=ScoringWeights(app_type=1))
        assert engine.score(rule("R", {"app_type": "crm"}), answers()) == 1


class TestSelectRule:

    def test_demo_crm(self, demo_catalog):
        engine = RuleEngine(demo_catalog.decision_rules)
        recommendation = engine.select_rule(answers())
        assert recommendation.rule.id == "R3"
        assert recommendation.score == 13

    def test_first_wins_on_tie(self):
        engine = RuleEngine([
            rule("A", {"app_type": "crm"}),
            rule("B", {"app_type": "crm"}),
        ])
        assert engine.select_rule(answers()).rule.id == "A"

    @pytest.mark.parametrize("order,expected", [
        (("TYPE", "MIXED"), "TYPE"),
        (("MIXED", "TYPE"), "MIXED"),
    ])
    def test_tie_across_different_fields(self, order, expected):
        candidates = {
            "TYPE": rule("TYPE", {"app_type": "crm"}),
            "MIXED": rule("MIXED", {"needs_auth": True, "needs_db": True, "budget": "low"}),
        }
        engine = RuleEngine([candidates[rule_id] for rule_id in order])

        assert engine.score(candidates["TYPE"], answers()) == 10
        assert engine.score(candidates["MIXED"], answers()) == 10
        recommendation = engine.select_rule(answers())
        assert recommendation.rule.id == expected
        assert recommendation.score == 10

    def test_higher_score_beats_order(self):
        engine = RuleEngine([
            rule("A", {"app_type": "crm"}),
            rule("B", {"app_type": "crm", "budget": "low"}),
        ])
        assert engine.select_rule(answers()).rule.id == "B"

    def test_nothing_matches_picks_first(self):
        engine = RuleEngine([rule("A", {"app_type": "saas"}), rule("R2", {"app_type": "agent"})])
        recommendation = engine.select_rule(answers())
        assert recommendation.rule.id == "A"
        assert recommendation.score == 0

    def test_empty_table(self):
        with pytest.raises(EmptyRuleTableError):
            RuleEngine([]).select_rule(answers())

    def test_fallback_rule(self):
        engine = RuleEngine([rule("A", {}), rule("R2", {})])
        assert engine._fallback_rule().id == "R2"

        engine = RuleEngine([rule("A", {}), rule("B", {})])
        assert engine._fallback_rule().id == "A"

    def test_deterministic(self, demo_catalog):
        engine = RuleEngine(demo_catalog.decision_rules)
        first = engine.select_rule(answers(user_level="beginner", app_type="saas"))
        second = engine.select_rule(answers(user_level="beginner", app_type="saas"))
        assert first == second


class TestAdjustForLevel:

    def test_beginner_gets_builder(self):
        r = rule("A", {"app_type": "crm"}, primary=("Next.js", "Postgres"), tools=("Next.js",))
        engine = RuleEngine([r])

        recommendation = engine.select_rule(answers(user_level="beginner"))

        assert recommendation.result.tools_to_master == (BUILDER_LABEL, "Next.js")
        # The rule table is left untouched
        assert r.outcome.tools_to_master == ("Next.js",)
        assert recommendation.rule.outcome.tools_to_master == ("Next.js",)

    def test_beginner_with_builder_in_stack(self):
        engine = RuleEngine([rule("A", {}, primary=("Lovable", "Supabase"), tools=("Lovable",))])
        result = engine.select_rule(answers(user_level="beginner")).result
        assert result.tools_to_master == ("Lovable",)

    def test_builder_match_is_case_insensitive(self):
        engine = RuleEngine([])
        assert engine.has_builder(["bolt.new"])
        assert engine.has_builder(["AI BUILDER"])
        assert not engine.has_builder(["Next.js", "Postgres"])

    def test_non_beginner_unchanged(self):
        engine = RuleEngine([rule("A", {}, primary=("Next.js",), tools=("Next.js",))])
        result = engine.select_rule(answers(user_level="intermediate")).result
        assert result.tools_to_master == ("Next.js",)

    def test_repeated_beginner_queries_do_not_accumulate(self):
        engine = RuleEngine([rule("A", {}, primary=("Next.js",), tools=("Next.js",))])
        for _ in range(3):
            result = engine.select_rule(answers(user_level="beginner")).result
        assert result.tools_to_master == (BUILDER_LABEL, "Next.js")
