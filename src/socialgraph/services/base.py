"""BaseService — services are bound to one network and only read it."""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING

from socialgraph.services.result import ServiceResult

if TYPE_CHECKING:
    from socialgraph.infrastructure.graph.engine import SocialNetwork, UnknownMemberError


class BaseService:
    def __init__(self, network: SocialNetwork[Hashable]) -> None:
        self._network = network

    @staticmethod
    def _unknown_member(op: str, exc: UnknownMemberError) -> ServiceResult:
        # Members keep their native type so detail matches data.source/target.
        return ServiceResult.failure(op, "UNKNOWN_MEMBER", str(exc), missing=list(exc.members))
