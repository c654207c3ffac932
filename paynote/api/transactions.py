"""
Transaction API endpoints.

Thin layer: HTTP status codes and commit/rollback here, all
rules in TransactionService.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from paynote.api.auth import get_current_user
from paynote.errors import InternalError, NotFoundError, ValidationError
from paynote.models.base import get_db
from paynote.models.user import User
from paynote.services.transaction_service import TransactionService
from paynote.schemas.transaction import (
    MessageResponse,
    TransactionResponse,
    TransactionWrite,
)

router = APIRouter(prefix="/transactions", tags=["Transactions"])


def _commit(db: Session) -> None:
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise InternalError("Internal server error") from e


@router.post("", response_model=TransactionResponse, status_code=201)
def create_transaction(
    request: TransactionWrite,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Add a payment note."""
    service = TransactionService(db)
    try:
        txn = service.create(user.id, request)
        _commit(db)
        return txn
    except ValidationError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Get a single note, e.g. to prefill the edit form."""
    service = TransactionService(db)
    try:
        return service.get(transaction_id, user.id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{transaction_id}", response_model=TransactionResponse)
def update_transaction(
    transaction_id: str,
    request: TransactionWrite,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Replace a note's person, amount, purpose and type.

    Returns the updated note so clients can refresh their
    state from the response.
    """
    service = TransactionService(db)
    try:
        txn = service.update(transaction_id, user.id, request)
        _commit(db)
        return txn
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{transaction_id}", response_model=MessageResponse)
def delete_transaction(
    transaction_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Delete a note. There is no undo."""
    service = TransactionService(db)
    try:
        service.delete(transaction_id, user.id)
        _commit(db)
        return MessageResponse(message="Transaction deleted successfully")
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))
