"""
Transaction Pydantic schemas for request/response validation
"""
from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_serializer


class TransactionBase(BaseModel):
    """Fields that may change after creation"""
    transaction_amount: Decimal = Field(..., description="Transaction amount")
    transaction_type: str = Field(..., description="Debit/credit marker")
    transaction_date: date = Field(..., description="Date of transaction")
    transaction_description: str = Field(..., description="Free-text description")

    @field_serializer("transaction_amount")
    def serialize_amount(self, v: Decimal) -> float:
        """Render the amount as a JSON number"""
        return float(v)


class TransactionCreate(TransactionBase):
    """Schema for creating a new transaction"""
    transaction_id: Optional[int] = Field(None, description="Ignored on create")
    account_id: int = Field(..., description="Owning account")
    child_category_id: int = Field(..., description="Category")

    def insert_values(self) -> dict:
        """Column values for the INSERT statement"""
        return self.model_dump(exclude={"transaction_id"})


class TransactionUpdate(TransactionBase):
    """Schema for updating a transaction"""
    account_id: Optional[int] = Field(None, description="Ignored on update")
    child_category_id: Optional[int] = Field(None, description="Ignored on update")

    def update_values(self) -> dict:
        """Column values for the UPDATE statement (mutable fields only)"""
        return self.model_dump(include=set(TransactionBase.model_fields))


class TransactionResponse(TransactionBase):
    """Schema for API response"""
    transaction_id: int
    account_id: int
    child_category_id: int

    model_config = {"from_attributes": True}
