"""Subcommand modules for socialgraph.

Provides register_commands() which uses deferred imports to keep
``socialgraph --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from socialgraph.commands.demo import demo
    from socialgraph.commands.network import distance, friends, members, summary

    cli.add_command(distance)
    cli.add_command(members)
    cli.add_command(friends)
    cli.add_command(summary)
    cli.add_command(demo)
