from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from database import get_db
from schemas.ledger import LedgerEntry, LedgerEntryCreate, LedgerPaymentCreate, LedgerSummary
from crud import ledger as crud_ledger
from utils.exceptions import EmptyCart, PaymentExceedsBalance, ProductNotFound

router = APIRouter(prefix="/ledger", tags=["Ledger"])
logger = logging.getLogger("ledger")

STATUS_PATTERN = "^(all|cleared|pending)$"

@router.post("/", response_model=LedgerEntry, status_code=status.HTTP_201_CREATED)
def create_ledger_entry(entry: LedgerEntryCreate, db: Session = Depends(get_db)):
    try:
        return crud_ledger.create_ledger_entry(db=db, entry=entry)
    except (EmptyCart, ProductNotFound) as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.get("/", response_model=List[LedgerEntry])
def read_ledger_entries(
    search: Optional[str] = None,
    status: str = Query("all", pattern=STATUS_PATTERN),
    db: Session = Depends(get_db)
):
    return crud_ledger.get_ledger_entries(db=db, search=search, status=status)

@router.get("/summary", response_model=LedgerSummary)
def read_ledger_summary(
    search: Optional[str] = None,
    status: str = Query("all", pattern=STATUS_PATTERN),
    db: Session = Depends(get_db)
):
    """Totals billed, received and pending, plus received amounts per payment type."""
    return crud_ledger.get_ledger_summary(db=db, search=search, status=status)

@router.get("/{entry_id}", response_model=LedgerEntry)
def read_ledger_entry(entry_id: int, db: Session = Depends(get_db)):
    db_entry = crud_ledger.get_ledger_entry(db=db, entry_id=entry_id)
    if db_entry is None:
        raise HTTPException(status_code=404, detail="Ledger entry not found")
    return db_entry

@router.post("/{entry_id}/payments", response_model=LedgerEntry)
def add_ledger_payment(entry_id: int, payment: LedgerPaymentCreate, db: Session = Depends(get_db)):
    try:
        db_entry = crud_ledger.add_ledger_payment(db=db, entry_id=entry_id, payment=payment)
    except PaymentExceedsBalance as e:
        logger.warning(str(e))
        raise HTTPException(status_code=400, detail=str(e))
    if db_entry is None:
        raise HTTPException(status_code=404, detail="Ledger entry not found")
    return db_entry

@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_ledger_entry(entry_id: int, db: Session = Depends(get_db)):
    if not crud_ledger.delete_ledger_entry(db=db, entry_id=entry_id):
        raise HTTPException(status_code=404, detail="Ledger entry not found")
    logger.info(f"Ledger entry {entry_id} deleted")
