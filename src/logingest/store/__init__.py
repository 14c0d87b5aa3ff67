"""
Storage for normalized logs.
"""

from logingest.store.memory import LogStore

__all__ = ["LogStore"]
