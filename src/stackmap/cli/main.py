"""
stackmap CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import logging

import click

from .commands import explore, init, path, prompt, recommend, search, show, stats


@click.group()
@click.version_option(package_name="stackmap")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """stackmap: Technology Taxonomy Explorer.

    Browse layers, categories, concepts, tools and playbooks as a graph
    that opens one level at a time, and get a stack recommendation from
    six questions.

    \b
    Quick Start:
      stackmap init --demo
      stackmap explore --expand L1_BACK
      stackmap search crm
      stackmap recommend
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register commands
main.add_command(init)
main.add_command(explore.explore)
main.add_command(show.show)
main.add_command(path.path)
main.add_command(search.search)
main.add_command(recommend.recommend)
main.add_command(prompt.prompt)
main.add_command(stats.stats)

if __name__ == "__main__":
    main()
