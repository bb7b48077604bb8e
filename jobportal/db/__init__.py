"""
Database module - EntityStore backends (memory, MongoDB, SQL).
"""
from jobportal.db.store import EntityStore, MemoryStore
from jobportal.db.stores import StoreSet, build_stores, memory_stores

__all__ = [
    "EntityStore",
    "MemoryStore",
    "StoreSet",
    "build_stores",
    "memory_stores"
]
