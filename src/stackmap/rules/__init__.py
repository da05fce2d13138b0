"""
Stack recommendation: decision rules, the questionnaire and prompt generation.
"""

from .engine import Recommendation, RuleEngine, ScoringWeights
from .prompts import find_playbook_for_answers, render_prompt, render_template
from .wizard import QUESTION_IDS, WIZARD_QUESTIONS, Question, QuestionOption, Wizard

__all__ = [
    "Recommendation", "RuleEngine", "ScoringWeights",
    "find_playbook_for_answers", "render_prompt", "render_template",
    "QUESTION_IDS", "WIZARD_QUESTIONS", "Question", "QuestionOption", "Wizard",
]
