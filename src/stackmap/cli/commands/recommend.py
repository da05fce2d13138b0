"""
Recommend Command - Stack recommendation from the wizard questions.

Answers come from flags; any question left without a flag is asked
interactively, in wizard order.
"""

import logging
import sys
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, Prompt

from ...core.exceptions import StackmapError
from ...rules.wizard import Question, Wizard, get_question
from ..presentation import recommendation_group
from ..utils import catalog_option, echo_error, echo_info, load_session

logger = logging.getLogger(__name__)

console = Console()


def _choices(question_id: str):
    return [str(opt.value) for opt in get_question(question_id).options]


def _ask(question: Question):
    """Prompt for one wizard question and return the chosen option value."""
    console.print(f"\n[bold]{question.title}[/bold]")
    if question.subtitle:
        console.print(f"[dim]{question.subtitle}[/dim]")

    if all(isinstance(opt.value, bool) for opt in question.options):
        return Confirm.ask("Answer", default=False)

    for opt in question.options:
        console.print(f"  [cyan]{opt.value}[/cyan]  {opt.label} [dim]{opt.description}[/dim]")
    return Prompt.ask("Answer", choices=[str(opt.value) for opt in question.options])


@click.command()
@click.option("--app-type", type=click.Choice(_choices("app_type")), help="Kind of application")
@click.option("--auth/--no-auth", "needs_auth", default=None, help="Needs login and authentication")
@click.option("--db/--no-db", "needs_db", default=None, help="Needs a database")
@click.option("--rag/--no-rag", "needs_rag", default=None, help="Needs AI with memory (RAG)")
@click.option("--budget", type=click.Choice(_choices("budget")), help="Budget and pace")
@click.option("--level", "user_level", type=click.Choice(_choices("user_level")), help="Technical level")
@catalog_option
def recommend(app_type: Optional[str], needs_auth: Optional[bool], needs_db: Optional[bool],
              needs_rag: Optional[bool], budget: Optional[str], user_level: Optional[str],
              catalog_path: str) -> None:
    """
    Recommend a stack for your project.

    \b
    Examples:
      stackmap recommend
      stackmap recommend --app-type crm --auth --db --no-rag --budget low --level beginner
    """
    session = load_session(catalog_path)
    if session is None:
        sys.exit(1)

    provided = {
        "app_type": app_type,
        "needs_auth": needs_auth,
        "needs_db": needs_db,
        "needs_rag": needs_rag,
        "budget": budget,
        "user_level": user_level,
    }

    wizard = Wizard()
    try:
        while not wizard.finished:
            question = wizard.current_question
            value = provided.get(question.id)
            if value is None:
                value = _ask(question)
            wizard.answer(value)
            wizard.next()

        answers = wizard.to_answers()
        recommendation = session.select_rule(answers)
    except StackmapError as e:
        echo_error(str(e))
        sys.exit(1)

    rule = recommendation.rule
    logger.debug(f"Recommendation {rule.id} with score {recommendation.score}")

    click.echo()
    console.print(Panel.fit(f"🎯 [bold]Recommended stack[/bold] [dim](rule {escape(rule.id)})[/dim]", border_style="green"))
    console.print(recommendation_group(rule.explain, recommendation.result))

    playbook = session.suggested_playbook(answers)
    if playbook is not None:
        console.print(f"\n📘 Suggested playbook: [bold]{escape(playbook.id)}[/bold]")
        echo_info(f"Run 'stackmap prompt {playbook.id}' to generate a build prompt.")
