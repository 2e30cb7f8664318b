"""Session ledger endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, HTTPException, Path, Response, status

from salary_engine.api.dependencies import Engine, Ledger
from salary_engine.api.schemas import (
    ErrorResponse,
    LedgerEntryCreate,
    LedgerEntryResponse,
    LedgerListResponse,
)
from salary_engine.services.ledger import MissingEmployeeNameError

router = APIRouter(prefix="/ledger", tags=["ledger"])


@router.get("", response_model=LedgerListResponse)
async def list_entries(ledger: Ledger) -> LedgerListResponse:
    """List ledger entries, newest first."""
    return LedgerListResponse(
        items=[LedgerEntryResponse.model_validate(e) for e in ledger],
        total=len(ledger),
    )


@router.post(
    "",
    response_model=LedgerEntryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def add_entry(
    engine: Engine,
    ledger: Ledger,
    payload: LedgerEntryCreate,
) -> LedgerEntryResponse:
    """Calculate and freeze a breakdown for an employee."""
    payroll_input = payload.to_payroll_input()
    breakdown = engine.compute_breakdown(payroll_input)
    tiers = engine.compute_ssnit_tiers(breakdown.basic_pay)

    try:
        entry = ledger.add(payload.name, payroll_input, breakdown, tiers)
    except MissingEmployeeNameError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    return LedgerEntryResponse.model_validate(entry)


@router.delete(
    "/{entry_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def remove_entry(
    ledger: Ledger,
    entry_id: Annotated[UUID, Path()],
) -> Response:
    """Remove an entry from the ledger."""
    if not ledger.remove(entry_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Ledger entry not found",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
