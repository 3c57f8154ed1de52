"""
CRUD operations for Transaction model

Every method checks out its own pooled connection and commits on exit,
so a write is durable before any follow-up read starts.
"""
from typing import Any, Dict

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncEngine

from transactions_api.models.transaction import transactions_table
from transactions_api.schemas.transaction import TransactionCreate, TransactionUpdate


class CRUDTransaction:
    """CRUD operations for Transaction"""

    async def get(self, engine: AsyncEngine, transaction_id: int) -> Dict[str, Any]:
        """
        Get transaction by ID

        Raises sqlalchemy.exc.NoResultFound if no row matches.
        """
        stmt = select(transactions_table).where(
            transactions_table.c.transaction_id == transaction_id
        )
        async with engine.connect() as conn:
            result = await conn.execute(stmt)
            return dict(result.mappings().one())

    async def create(self, engine: AsyncEngine, obj_in: TransactionCreate) -> int:
        """Insert new transaction and return the generated ID"""
        stmt = insert(transactions_table).values(**obj_in.insert_values())
        async with engine.begin() as conn:
            result = await conn.execute(stmt)
        return result.inserted_primary_key[0]

    async def update(
        self,
        engine: AsyncEngine,
        transaction_id: int,
        obj_in: TransactionUpdate
    ) -> int:
        """Update mutable fields; returns the number of matched rows"""
        stmt = (
            update(transactions_table)
            .where(transactions_table.c.transaction_id == transaction_id)
            .values(**obj_in.update_values())
        )
        async with engine.begin() as conn:
            result = await conn.execute(stmt)
        return result.rowcount

    async def delete(self, engine: AsyncEngine, transaction_id: int) -> int:
        """Delete transaction; returns the number of removed rows"""
        stmt = delete(transactions_table).where(
            transactions_table.c.transaction_id == transaction_id
        )
        async with engine.begin() as conn:
            result = await conn.execute(stmt)
        return result.rowcount


# Create instance
transaction = CRUDTransaction()
