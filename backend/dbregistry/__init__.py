"""
Process-wide registry of heterogeneous databases declared by a schema list.
"""
from .services.database import DatabaseRegistry, load_schema

__all__ = ["DatabaseRegistry", "load_schema"]
