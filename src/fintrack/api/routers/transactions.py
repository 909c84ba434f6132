"""Transaction endpoints."""

from fastapi import APIRouter, Depends

from fintrack.api.deps import get_transaction_service, get_query_service
from fintrack.api.schemas import (
    MessageResponse,
    TransactionCreateRequest,
    TransactionListRequest,
    TransactionOwnerRequest,
    TransactionUpdateRequest,
    TransactionBulkDeleteRequest,
    TransactionResponse,
    TransactionMutationResponse,
    TransactionDetailResponse,
    TransactionListResponse,
    TransactionBulkDeleteResponse,
)
from fintrack.services import (
    TransactionService,
    TransactionQueryService,
    TransactionCreate,
    TransactionUpdate,
)

router = APIRouter(tags=["transactions"])


@router.post("/addTransaction", response_model=TransactionMutationResponse)
def add_transaction(
    data: TransactionCreateRequest,
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionMutationResponse:
    """Record a new credit or expense for a user."""
    transaction = service.add_transaction(TransactionCreate(
        title=data.title,
        amount=data.amount,
        description=data.description,
        date=data.date,
        category=data.category,
        transaction_type=data.transaction_type,
        user_id=data.user_id,
    ))
    return TransactionMutationResponse(
        message="Transaction Added Successfully",
        transaction=TransactionResponse.model_validate(transaction),
    )


@router.post("/getTransaction", response_model=TransactionListResponse)
def list_transactions(
    data: TransactionListRequest,
    service: TransactionQueryService = Depends(get_query_service),
) -> TransactionListResponse:
    """
    List a user's transactions, newest first.

    ``frequency`` is a day count (default 7) or "custom" with
    ``startDate``/``endDate``; ``type`` is "credit", "expense" or "all".
    """
    transactions = service.list_transactions(
        user_id=data.user_id,
        transaction_type=data.type,
        frequency=data.frequency,
        start_date=data.start_date,
        end_date=data.end_date,
    )
    return TransactionListResponse(
        transactions=[TransactionResponse.model_validate(t) for t in transactions],
        count=len(transactions),
    )


@router.post("/getTransaction/{transaction_id}", response_model=TransactionDetailResponse)
def get_transaction(
    transaction_id: str,
    data: TransactionOwnerRequest,
    service: TransactionQueryService = Depends(get_query_service),
) -> TransactionDetailResponse:
    """Fetch one transaction owned by the user."""
    transaction = service.get_transaction(transaction_id, data.user_id)
    return TransactionDetailResponse(
        transaction=TransactionResponse.model_validate(transaction),
    )


@router.put("/updateTransaction/{transaction_id}", response_model=TransactionMutationResponse)
def update_transaction(
    transaction_id: str,
    data: TransactionUpdateRequest,
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionMutationResponse:
    """Update only the fields present in the body."""
    transaction = service.edit_transaction(
        transaction_id,
        TransactionUpdate(
            title=data.title,
            description=data.description,
            amount=data.amount,
            category=data.category,
            transaction_type=data.transaction_type,
            date=data.date,
        ),
        user_id=data.user_id,
    )
    return TransactionMutationResponse(
        message="Transaction Updated Successfully",
        transaction=TransactionResponse.model_validate(transaction),
    )


@router.post("/deleteTransaction/{transaction_id}", response_model=MessageResponse)
def delete_transaction(
    transaction_id: str,
    data: TransactionOwnerRequest,
    service: TransactionService = Depends(get_transaction_service),
) -> MessageResponse:
    """Delete one of the user's transactions."""
    service.delete_transaction(transaction_id, data.user_id)
    return MessageResponse(message="Transaction successfully deleted")


@router.post("/deleteMultipleTransactions", response_model=TransactionBulkDeleteResponse)
def delete_multiple_transactions(
    data: TransactionBulkDeleteRequest,
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionBulkDeleteResponse:
    """Delete the listed transactions that belong to the user."""
    deleted = service.delete_transactions(data.transaction_ids, data.user_id)
    return TransactionBulkDeleteResponse(
        message=f"Successfully deleted {deleted} transactions",
        deleted_count=deleted,
    )
