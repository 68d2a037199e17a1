"""Edge-list loader — build a SocialNetwork from a plain-text file.

One record per line:

    alice bob      # friendship
    carol          # member without friends

``#`` starts a comment, blank lines are skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable
from pathlib import Path

from socialgraph.infrastructure.graph.engine import SocialNetwork

logger = logging.getLogger(__name__)

MEMBER_PARSERS: dict[str, Callable[[str], Hashable]] = {
    "str": str,
    "int": int,
}


class EdgeListError(ValueError):
    """Malformed or unreadable edge-list input."""


def parse_lines(
    lines: Iterable[str],
    *,
    member_type: str = "str",
    delimiter: str | None = None,
    source: str = "<input>",
) -> SocialNetwork[Hashable]:
    """Build a network from edge-list *lines*.

    Args:
        lines: Raw text lines, with or without trailing newlines.
        member_type: Key into :data:`MEMBER_PARSERS` used to convert tokens.
        delimiter: Token separator; ``None`` splits on any whitespace.
        source: Name used in error messages.
    """
    try:
        parse = MEMBER_PARSERS[member_type]
    except KeyError:
        msg = f"Unsupported member type '{member_type}'"
        raise EdgeListError(msg) from None
    if delimiter == "":
        raise EdgeListError("Edge-list delimiter must not be empty")

    network: SocialNetwork[Hashable] = SocialNetwork()
    for lineno, raw in enumerate(lines, start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        tokens = [t.strip() for t in line.split(delimiter) if t.strip()]
        if not tokens:
            continue
        if len(tokens) > 2:
            msg = f"{source}:{lineno}: expected 1 or 2 members, got {len(tokens)}"
            raise EdgeListError(msg)
        try:
            members = [parse(t) for t in tokens]
        except ValueError as exc:
            msg = f"{source}:{lineno}: invalid {member_type} member ({exc})"
            raise EdgeListError(msg) from exc

        if len(members) == 2:
            network.add_friendship(members[0], members[1])
        else:
            network.add_member(members[0])

    logger.debug(
        "Loaded %s: %d members, %d friendships",
        source,
        network.member_count,
        network.friendship_count,
    )
    return network


def load_edge_list(
    path: Path,
    *,
    member_type: str = "str",
    delimiter: str | None = None,
) -> SocialNetwork[Hashable]:
    """Read *path* and build a network from its records."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read edge list {path}: {exc.strerror or exc}"
        raise EdgeListError(msg) from exc
    return parse_lines(
        text.splitlines(),
        member_type=member_type,
        delimiter=delimiter,
        source=str(path),
    )


def example_network() -> SocialNetwork[int]:
    """The six-member sample graph.

         1
        / \\
       2   3
      / \\
     4   5
      \\ /
       6
    """
    network: SocialNetwork[int] = SocialNetwork()
    for first, second in ((1, 2), (1, 3), (2, 4), (2, 5), (4, 6), (5, 6)):
        network.add_friendship(first, second)
    return network
