"""Graph store and breadth-first query engine."""

from socialgraph.infrastructure.graph.engine import SocialNetwork, UnknownMemberError

__all__ = ["SocialNetwork", "UnknownMemberError"]
