"""
Transaction API endpoints

Failures are reported as bare status codes; the underlying error is
only written to the log.
"""
import logging

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncEngine

from transactions_api.crud.transaction import transaction as crud_transaction
from transactions_api.db.session import STORAGE_ERRORS, get_engine
from transactions_api.schemas.transaction import (
    TransactionCreate,
    TransactionResponse,
    TransactionUpdate,
)

logger = logging.getLogger(__name__)

# Path IDs outside the INTEGER column range are rejected as client errors
INT32_MIN = -2**31
INT32_MAX = 2**31 - 1

router = APIRouter()


@router.post("",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED
    )
async def create_transaction(
    transaction_in: TransactionCreate,
    engine: AsyncEngine = Depends(get_engine)
):
    """
    Create new transaction

    Any transaction_id in the body is ignored; the stored row is read
    back and returned.
    """
    try:
        transaction_id = await crud_transaction.create(engine, obj_in=transaction_in)
    except STORAGE_ERRORS as e:
        logger.error(f"Failed to create transaction: {e}")
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    try:
        return await crud_transaction.get(engine, transaction_id=transaction_id)
    except STORAGE_ERRORS as e:
        logger.error(f"Failed to fetch transaction {transaction_id} after creation: {e}")
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.get("/{transaction_id}", response_model=TransactionResponse)
async def get_transaction(
    transaction_id: int = Path(..., ge=INT32_MIN, le=INT32_MAX, description="Transaction ID"),
    engine: AsyncEngine = Depends(get_engine)
):
    """
    Get specific transaction by ID
    """
    try:
        return await crud_transaction.get(engine, transaction_id=transaction_id)
    except STORAGE_ERRORS as e:
        logger.debug(f"Transaction {transaction_id} not returned: {e}")
        return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.put("/{transaction_id}", response_model=TransactionResponse)
@router.patch("/{transaction_id}", response_model=TransactionResponse)
async def update_transaction(
    *,
    transaction_id: int = Path(..., ge=INT32_MIN, le=INT32_MAX, description="Transaction ID"),
    transaction_in: TransactionUpdate,
    engine: AsyncEngine = Depends(get_engine)
):
    """
    Update transaction

    Only amount, type, date and description are written. Updating an
    unknown ID matches no rows and the read-back then answers 500.
    """
    try:
        await crud_transaction.update(engine, transaction_id=transaction_id, obj_in=transaction_in)
    except STORAGE_ERRORS as e:
        logger.error(f"Failed to update transaction {transaction_id}: {e}")
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    try:
        return await crud_transaction.get(engine, transaction_id=transaction_id)
    except STORAGE_ERRORS as e:
        logger.error(f"Failed to fetch transaction {transaction_id} after update: {e}")
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_transaction(
    transaction_id: int = Path(..., ge=INT32_MIN, le=INT32_MAX, description="Transaction ID"),
    engine: AsyncEngine = Depends(get_engine)
):
    """
    Delete transaction

    Deleting an unknown ID is not an error.
    """
    try:
        await crud_transaction.delete(engine, transaction_id=transaction_id)
    except STORAGE_ERRORS as e:
        logger.error(f"Failed to delete transaction {transaction_id}: {e}")
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
