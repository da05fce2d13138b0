"""
Prompt Command - Render a playbook's build prompt.

The rendered prompt goes to stdout on its own so it can be piped or
copied; notes about unfilled inputs go to stderr.
"""

import sys
from typing import Dict, Tuple

import click

from ..utils import catalog_option, echo_error, echo_warning, load_session


def _parse_assignments(ctx, param, values: Tuple[str, ...]) -> Dict[str, str]:
    result = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"expected KEY=VALUE, got '{item}'", ctx=ctx, param=param)
        result[key.strip()] = value
    return result


@click.command()
@click.argument("playbook_id")
@click.option("-s", "--set", "input_values", multiple=True, callback=_parse_assignments,
              metavar="KEY=VALUE", help="Value for a prompt input (repeatable)")
@click.option("--stack", "stack", multiple=True, help="Tool in the current stack (repeatable)")
@catalog_option
def prompt(playbook_id: str, input_values: Dict[str, str], stack: Tuple[str, ...], catalog_path: str) -> None:
    """
    Render the prompt template of PLAYBOOK_ID.

    \b
    Example:
      stackmap prompt P_CRM_SIMPLE --set business="real estate" --stack Next.js --stack Postgres
    """
    session = load_session(catalog_path)
    if session is None:
        sys.exit(1)

    playbook = session.get_playbook(playbook_id)
    if playbook is None:
        echo_error(f"Playbook not found: {playbook_id}")
        sys.exit(1)

    generator = playbook.prompt_generator
    if generator is None:
        echo_warning(f"Playbook {playbook_id} has no prompt generator.")
        return

    missing = [i.id for i in generator.inputs if i.id not in input_values]
    if missing:
        click.echo(click.style(f"   Inputs left empty: {', '.join(missing)}", dim=True), err=True)

    click.echo(session.render_prompt(playbook_id, input_values, list(stack)))
