"""
Database package
"""
from transactions_api.db.base import Base
from transactions_api.db.session import STORAGE_ERRORS, engine, get_engine, ping

__all__ = [
    "STORAGE_ERRORS",
    "Base",
    "engine",
    "get_engine",
    "ping",
]
