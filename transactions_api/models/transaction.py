"""
Transaction model for financial transactions
"""
from datetime import date
from decimal import Decimal

from sqlalchemy import String, Index, Numeric, Date
from sqlalchemy.orm import Mapped, mapped_column

from transactions_api.db.base import Base


class Transaction(Base):
    """
    Transaction model

    account_id and child_category_id point at rows owned by other
    services; no foreign keys are declared here.
    """
    __tablename__ = "Transactions"

    # Primary key
    transaction_id: Mapped[int] = mapped_column(primary_key=True)

    # References (write-once)
    account_id: Mapped[int] = mapped_column(nullable=False)
    child_category_id: Mapped[int] = mapped_column(nullable=False)

    # Transaction details
    transaction_amount: Mapped[Decimal] = mapped_column(
        Numeric(precision=12, scale=2),
        nullable=False,
        comment="Transaction amount"
    )

    transaction_type: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="Debit/credit marker"
    )

    transaction_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        comment="Date of transaction"
    )

    transaction_description: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
    )

    __table_args__ = (
        Index("idx_transaction_account_id", "account_id"),
        Index("idx_transaction_child_category_id", "child_category_id"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return (
            f"<Transaction(transaction_id={self.transaction_id}, type={self.transaction_type}, "
            f"amount={self.transaction_amount}, date={self.transaction_date})>"
        )


# Core table used by the CRUD layer
transactions_table = Transaction.__table__
