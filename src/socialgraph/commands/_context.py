"""AppContext: the object ``@click.pass_obj`` hands to every command.

It owns the resolved settings, turns edge-list and argument problems into
``INVALID_INPUT`` results, and decides where a result is written.
"""

from __future__ import annotations

from collections.abc import Hashable
from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

import click

from socialgraph.config.logging import configure_logging
from socialgraph.infrastructure.edgelist import MEMBER_PARSERS, EdgeListError, load_edge_list
from socialgraph.output.formatters import OutputSettings, format_result
from socialgraph.services.result import ServiceResult
from socialgraph.services.telemetry import set_timing

if TYPE_CHECKING:
    from socialgraph.config.settings import SocialGraphSettings
    from socialgraph.infrastructure.graph.engine import SocialNetwork


class AppContext:
    def __init__(self, settings: SocialGraphSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        set_timing(settings.verbose)

    def load_network(self, op: str, path: Path) -> SocialNetwork[Hashable]:
        cfg = self.settings.network
        try:
            return load_edge_list(path, member_type=cfg.member_type, delimiter=cfg.delimiter)
        except EdgeListError as exc:
            self.fail_input(op, str(exc))

    def parse_member(self, op: str, token: str) -> Hashable:
        """Convert a command-line argument with the configured member type."""
        member_type = self.settings.network.member_type
        try:
            return MEMBER_PARSERS[member_type](token)
        except ValueError:
            self.fail_input(op, f"Invalid {member_type} member: {token!r}")

    def fail_input(self, op: str, message: str) -> NoReturn:
        failed = ServiceResult.failure(op, "INVALID_INPUT", message)
        click.echo(format_result(failed, settings=self.output), err=True)
        raise SystemExit(1)

    def emit(self, result: ServiceResult) -> None:
        """Write *result*: stdout on success, stderr plus exit status 1 on failure."""
        text = format_result(result, settings=self.output)
        click.echo(text, err=not result.ok)
        if not result.ok:
            raise SystemExit(1)
