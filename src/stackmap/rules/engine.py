"""
Decision Rule Engine.

Scores a flat, ordered table of DecisionRules against a complete AnswerSet
and produces a recommendation.

Scoring is additive over the rule's condition fields:

    app_type   10
    needs_rag   5
    budget      4
    needs_auth  3
    needs_db    3

A condition field the rule leaves unset is a wildcard and contributes 0.
Rules are visited in table order and the first rule reaching the highest
score wins, so table order is part of the contract whenever rules tie.
"""

import logging
from typing import List, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from ..core.exceptions import EmptyRuleTableError
from ..core.types import AnswerSet, DecisionRule, RuleOutcome

logger = logging.getLogger(__name__)

DEFAULT_RULE_ID = "R2"
BUILDER_KEYWORDS = ("builder", "lovable", "bolt")
BUILDER_LABEL = "Builder (Lovable/Bolt)"
BEGINNER_LEVEL = "beginner"


class ScoringWeights(BaseModel):
    """Points awarded per matching condition field."""
    app_type: int = 10
    needs_rag: int = 5
    budget: int = 4
    needs_auth: int = 3
    needs_db: int = 3

    model_config = ConfigDict(frozen=True)


class Recommendation(BaseModel):
    """
    The selected rule plus its level-adjusted outcome.

    ``result`` is a copy; ``rule.outcome`` is always the untouched table entry.
    """
    rule: DecisionRule
    result: RuleOutcome
    answers: AnswerSet
    score: int = 0

    model_config = ConfigDict(frozen=True)


class RuleEngine:
    """Matches wizard answers against the decision rule table."""

    def __init__(
        self,
        rules: Sequence[DecisionRule],
        weights: Optional[ScoringWeights] = None,
        default_rule_id: str = DEFAULT_RULE_ID,
        builder_keywords: Sequence[str] = BUILDER_KEYWORDS,
        builder_label: str = BUILDER_LABEL,
    ):
        self._rules: List[DecisionRule] = list(rules)
        self.weights = weights or ScoringWeights()
        self.default_rule_id = default_rule_id
        self.builder_keywords = tuple(k.lower() for k in builder_keywords)
        self.builder_label = builder_label

    @property
    def rules(self) -> List[DecisionRule]:
        return list(self._rules)

    def score(self, rule: DecisionRule, answers: AnswerSet) -> int:
        cond = rule.condition
        w = self.weights
        score = 0

        if cond.app_type and cond.app_type == answers.app_type:
            score += w.app_type
        if cond.needs_auth is not None and cond.needs_auth == answers.needs_auth:
            score += w.needs_auth
        if cond.needs_db is not None and cond.needs_db == answers.needs_db:
            score += w.needs_db
        if cond.needs_rag is not None and cond.needs_rag == answers.needs_rag:
            score += w.needs_rag
        if cond.budget and cond.budget == answers.budget:
            score += w.budget

        return score

    def best_rule(self, answers: AnswerSet) -> tuple[DecisionRule, int]:
        """
        Highest scoring rule, first-wins on ties.

        Raises:
            EmptyRuleTableError: The table has no rules.
        """
        if not self._rules:
            raise EmptyRuleTableError()

        best_rule: Optional[DecisionRule] = None
        best_score = -1

        for rule in self._rules:
            score = self.score(rule, answers)
            logger.debug(f"Rule {rule.id} scored {score}")
            if score > best_score:
                best_score = score
                best_rule = rule

        if best_rule is None:
            best_rule = self._fallback_rule()
            logger.warning(f"No rule selected, falling back to {best_rule.id}")

        return best_rule, max(best_score, 0)

    def select_rule(self, answers: AnswerSet) -> Recommendation:
        rule, score = self.best_rule(answers)
        result = self.adjust_for_level(rule.outcome, answers)
        logger.debug(f"Selected rule {rule.id} (score {score}) for app_type={answers.app_type}")
        return Recommendation(rule=rule, result=result, answers=answers, score=score)

    def adjust_for_level(self, outcome: RuleOutcome, answers: AnswerSet) -> RuleOutcome:
        """
        Tailor an outcome to the user's technical level.

        Beginners whose primary stack has no no-code builder get a builder
        prepended to ``tools_to_master``. Works on a deep copy; the input
        outcome is left as is.
        """
        adjusted = outcome.model_copy(deep=True)
        if answers.user_level != BEGINNER_LEVEL:
            return adjusted
        if self.has_builder(adjusted.primary_stack):
            return adjusted

        return adjusted.model_copy(
            update={"tools_to_master": (self.builder_label, *adjusted.tools_to_master)}
        )

    def has_builder(self, stack: Sequence[str]) -> bool:
        for entry in stack:
            lowered = entry.lower()
            if any(keyword in lowered for keyword in self.builder_keywords):
                return True
        return False

    def _fallback_rule(self) -> DecisionRule:
        for rule in self._rules:
            if rule.id == self.default_rule_id:
                return rule
        return self._rules[0]
