"""
Database models
"""
from transactions_api.db.base import Base
from transactions_api.models.transaction import Transaction, transactions_table

__all__ = [
    "Base",
    "Transaction",
    "transactions_table",
]
