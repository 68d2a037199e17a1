"""Infrastructure layer — graph store and edge-list input.

This layer depends on stdlib and third-party libs (NetworkX).
It must never import from services, commands, or output.
The service layer bridges between the graph store and the CLI.
"""
