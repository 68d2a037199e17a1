"""NetworkService — hop-count and membership queries over a SocialNetwork.

Unknown members become ``UNKNOWN_MEMBER`` failures.  An unreachable pair is
not a failure: it succeeds with ``length == -1`` and ``reachable`` false.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Any

from socialgraph.infrastructure.graph.engine import UnknownMemberError
from socialgraph.services.base import BaseService
from socialgraph.services.result import ServiceResult
from socialgraph.services.telemetry import traced


def _sorted_members(members: Iterable[Hashable]) -> list[Any]:
    """Stable listing order that works for mixed member types."""
    return sorted(members, key=lambda m: (type(m).__name__, str(m)))


class NetworkService(BaseService):
    @traced
    def distance(self, source: Hashable, target: Hashable) -> ServiceResult:
        """Length of the shortest friendship chain from *source* to *target*."""
        try:
            length = self._network.shortest_path_length(source, target)
        except UnknownMemberError as exc:
            return self._unknown_member("distance", exc)
        return ServiceResult.success(
            "distance", source=source, target=target, length=length, reachable=length >= 0
        )

    @traced
    def members(self) -> ServiceResult:
        items = _sorted_members(self._network.members)
        return ServiceResult.success("members", count=len(items), items=items)

    @traced
    def friends(self, member: Hashable) -> ServiceResult:
        """Direct friends of *member*."""
        try:
            friend_set = self._network.friends_of(member)
        except UnknownMemberError as exc:
            return self._unknown_member("friends", exc)
        items = _sorted_members(friend_set)
        return ServiceResult.success("friends", member=member, count=len(items), items=items)

    @traced
    def summary(self) -> ServiceResult:
        return ServiceResult.success(
            "summary",
            members=self._network.member_count,
            friendships=self._network.friendship_count,
        )
