"""
Adapters - Query implementations the period scopes can filter.
"""

from .memory_query import MemoryQuery

__all__ = ["MemoryQuery"]
