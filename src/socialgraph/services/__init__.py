"""Service layer — network queries returning ServiceResult.

Services may import from the infrastructure layer.
They must never import from commands or output.
"""
