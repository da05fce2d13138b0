"""
Prompt generation for playbooks.

A playbook's prompt generator carries a template with ``{{id}}``
placeholders. Rendering is best-effort: unknown or unfilled placeholders
become empty strings and rendering never raises.
"""

import re
from typing import Mapping, Optional, Sequence

from ..core.catalog import Catalog
from ..core.types import AnswerSet, Playbook

STACK_PLACEHOLDER = "stack_recomendada"

PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*([^{}\s]+)\s*\}\}")

# Wizard app types that have a dedicated playbook
APP_TYPE_TO_PLAYBOOK = {
    "landing": "P_LP_LEADS",
    "saas": "P_SAAS_MVP",
    "crm": "P_CRM_SIMPLE",
    "dashboard": "P_DASHBOARD",
    "agent": "P_AGENT_BUILDER",
    "automation": "P_EMAIL_AUTO",
    "bot_whatsapp": "P_BOT_WA",
}


def render_template(
    template: str,
    input_values: Mapping[str, Optional[str]],
    current_stack: Sequence[str] = (),
    stack_placeholder: str = STACK_PLACEHOLDER,
) -> str:
    """
    Substitute every ``{{ id }}`` in template.

    The reserved stack placeholder becomes the comma-joined current stack;
    any other id takes its value from input_values, or "" when absent.
    """
    stack_text = ", ".join(current_stack)

    def _substitute(match: re.Match) -> str:
        name = match.group(1)
        if name == stack_placeholder:
            return stack_text
        value = input_values.get(name)
        return "" if value is None else str(value)

    return PLACEHOLDER_PATTERN.sub(_substitute, template or "")


def render_prompt(
    playbook: Optional[Playbook],
    input_values: Mapping[str, Optional[str]],
    current_stack: Sequence[str] = (),
    stack_placeholder: str = STACK_PLACEHOLDER,
) -> str:
    """Render a playbook's prompt template. Playbooks without a generator render as ""."""
    if playbook is None or playbook.prompt_generator is None:
        return ""
    return render_template(
        playbook.prompt_generator.template,
        input_values,
        current_stack,
        stack_placeholder=stack_placeholder,
    )


def find_playbook_for_answers(catalog: Catalog, answers: AnswerSet) -> Optional[Playbook]:
    """The playbook suggested for the answers' app type, if the catalog has it."""
    playbook_id = APP_TYPE_TO_PLAYBOOK.get(answers.app_type)
    if playbook_id is None:
        return None
    return catalog.get_playbook(playbook_id)
