"""Queries against a network loaded from an edge-list file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from socialgraph.services.network import NetworkService

if TYPE_CHECKING:
    from socialgraph.commands._context import AppContext

edges_option = click.option(
    "--edges",
    "edges_path",
    required=True,
    type=click.Path(path_type=Path, dir_okay=False),
    help="Edge list: 'member member' (a friendship) or 'member' per line.",
)


def examples(*lines: str) -> str:
    """Epilog for ``--help``; ``\\b`` keeps Click from rewrapping it."""
    return "\b\nExamples:\n" + "\n".join(f"  {line}" for line in lines)


@click.command(
    epilog=examples(
        "socialgraph distance alice bob --edges friends.txt",
        "socialgraph --json distance 1 6 --edges graph.txt",
        "socialgraph -q distance alice zoe --edges friends.txt",
    )
)
@click.argument("source")
@click.argument("target")
@edges_option
@click.pass_obj
def distance(app: AppContext, source: str, target: str, edges_path: Path) -> None:
    """Number of friendships on the shortest chain from SOURCE to TARGET.

    Prints -1 when no chain connects them.
    """
    network = app.load_network("distance", edges_path)
    a = app.parse_member("distance", source)
    b = app.parse_member("distance", target)
    app.emit(NetworkService(network).distance(a, b))


@click.command(epilog=examples("socialgraph members --edges friends.txt"))
@edges_option
@click.pass_obj
def members(app: AppContext, edges_path: Path) -> None:
    """List every member of the network."""
    service = NetworkService(app.load_network("members", edges_path))
    app.emit(service.members())


@click.command(
    epilog=examples(
        "socialgraph friends alice --edges friends.txt",
        "socialgraph -q friends alice --edges friends.txt",
    )
)
@click.argument("member")
@edges_option
@click.pass_obj
def friends(app: AppContext, member: str, edges_path: Path) -> None:
    """List MEMBER's direct friends."""
    service = NetworkService(app.load_network("friends", edges_path))
    app.emit(service.friends(app.parse_member("friends", member)))


@click.command(epilog=examples("socialgraph summary --edges friends.txt"))
@edges_option
@click.pass_obj
def summary(app: AppContext, edges_path: Path) -> None:
    """Count members and friendships."""
    service = NetworkService(app.load_network("summary", edges_path))
    app.emit(service.summary())
