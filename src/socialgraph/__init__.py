"""socialgraph — friendship graph with shortest-hop queries."""

__version__ = "0.1.0"
