from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
import logging

from database import get_db
from schemas.inventory_in import InventoryIn, InventoryInCreate
from crud import inventory_in as crud_inventory_in
from utils.exceptions import InvalidDimension, InvalidQuantity, ProductNotFound, TransactionFailure

router = APIRouter(prefix="/inventory-in", tags=["Inventory In"])
logger = logging.getLogger("inventory_in")

@router.post("/", response_model=InventoryIn, status_code=status.HTTP_201_CREATED)
def create_inventory_in_entry(entry: InventoryInCreate, db: Session = Depends(get_db)):
    """Record a truck receipt; every line adds its boxes to stock."""
    if not entry.products:
        raise HTTPException(status_code=400, detail="At least one product line is required")
    try:
        return crud_inventory_in.create_inventory_in_entry(db=db, entry=entry)
    except (InvalidQuantity, InvalidDimension, ProductNotFound) as e:
        logger.warning(f"Stock-in rejected for truck {entry.truck_number}: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except TransactionFailure as e:
        raise HTTPException(status_code=500, detail=str(e))

@router.get("/", response_model=List[InventoryIn])
def read_inventory_in_entries(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    return crud_inventory_in.get_inventory_in_entries(db=db, skip=skip, limit=limit)

@router.get("/{entry_id}", response_model=InventoryIn)
def read_inventory_in_entry(entry_id: int, db: Session = Depends(get_db)):
    db_entry = crud_inventory_in.get_inventory_in_entry(db=db, entry_id=entry_id)
    if db_entry is None:
        raise HTTPException(status_code=404, detail="Stock-in entry not found")
    return db_entry
