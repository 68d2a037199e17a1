"""SocialNetwork — undirected friendship graph with shortest-hop queries.

Adjacency lives in a NetworkX ``Graph``, so friend-sets are symmetric and
duplicate-free by construction.  Members are never removed.

The hop count is a plain breadth-first search over the adjacency rather than
``nx.shortest_path_length``: visited members are marked when enqueued, and an
unreachable target yields ``-1`` instead of an exception.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Hashable, Iterator, Mapping
from types import MappingProxyType

import networkx as nx

logger = logging.getLogger(__name__)


class UnknownMemberError(LookupError):
    """Raised when a query names a member that was never added."""

    def __init__(self, members: tuple[Hashable, ...]) -> None:
        self.members = members
        names = ", ".join(repr(m) for m in members)
        super().__init__(f"Not a member of the social network: {names}")


class SocialNetwork[M: Hashable]:
    """Mutable friendship graph over any hashable member type."""

    def __init__(self) -> None:
        self._graph: nx.Graph[M] = nx.Graph()

    def __len__(self) -> int:
        return self._graph.number_of_nodes()

    def __contains__(self, member: object) -> bool:
        return member in self._graph

    def __iter__(self) -> Iterator[M]:
        return iter(self._graph)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_member(self, member: M) -> None:
        """Register *member* with no friends. No-op if already present."""
        self._graph.add_node(member)

    def add_friendship(self, first: M, second: M) -> None:
        """Register both members (if new) and link them symmetrically."""
        self._graph.add_edge(first, second)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def member_count(self) -> int:
        return self._graph.number_of_nodes()

    @property
    def friendship_count(self) -> int:
        return self._graph.number_of_edges()

    @property
    def members(self) -> frozenset[M]:
        return frozenset(self._graph)

    @property
    def friends(self) -> Mapping[M, frozenset[M]]:
        """Read-only snapshot of the adjacency: member -> friend-set."""
        return MappingProxyType(
            {member: frozenset(nbrs) for member, nbrs in self._graph.adjacency()}
        )

    def friends_of(self, member: M) -> frozenset[M]:
        """Return the friend-set of *member*.

        Raises:
            UnknownMemberError: If *member* was never added.
        """
        if member not in self._graph:
            raise UnknownMemberError((member,))
        return frozenset(self._graph.adj[member])

    # ------------------------------------------------------------------
    # Query
    # ------------------------------------------------------------------

    def shortest_path_length(self, source: M, target: M) -> int:
        """Minimum number of friendships linking *source* to *target*.

        Returns 0 when both are the same member and -1 when they lie in
        different connected components.

        Raises:
            UnknownMemberError: If either endpoint was never added.
        """
        missing = tuple(m for m in (source, target) if m not in self._graph)
        if missing:
            raise UnknownMemberError(missing)

        adj = self._graph.adj
        visited: set[M] = {source}
        queue: deque[tuple[M, int]] = deque([(source, 0)])

        while queue:
            member, distance = queue.popleft()
            if member == target:
                logger.debug("Reached %r from %r in %d hops", target, source, distance)
                return distance
            for friend in adj[member]:
                if friend not in visited:
                    visited.add(friend)
                    queue.append((friend, distance + 1))

        logger.debug("No chain from %r to %r (%d visited)", source, target, len(visited))
        return -1
