"""``socialgraph demo``: the six-member example network, no input file needed."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from socialgraph.commands.network import examples
from socialgraph.infrastructure.edgelist import example_network
from socialgraph.services.network import NetworkService

if TYPE_CHECKING:
    from socialgraph.commands._context import AppContext


@click.command(epilog=examples("socialgraph demo", "socialgraph --json demo"))
@click.pass_obj
def demo(app: AppContext) -> None:
    """Distance from 1 to 6 and from 6 to 1 in the example network.

    \b
         1
        / \\
       2   3
      / \\
     4   5
      \\ /
       6
    """
    service = NetworkService(example_network())
    for source, target in ((1, 6), (6, 1)):
        app.emit(service.distance(source, target))
