from dataclasses import asdict
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import date
import logging

from database import get_db
from schemas.orders import Order, OrderCreate, OrderPreview, OrderPreviewRequest
from schemas.invoice import InvoiceData
from crud import orders as crud_orders
from utils.invoice import build_invoice_data
from utils.gst import OrderType
from utils.exceptions import (
    DivisionByZero,
    EmptyCart,
    InsufficientStock,
    InvalidDimension,
    InvalidQuantity,
    ProductNotFound,
    TransactionFailure,
)

router = APIRouter(prefix="/orders", tags=["Orders"])
logger = logging.getLogger("orders")

def _raise_http(e: Exception):
    if isinstance(e, (EmptyCart, InsufficientStock, InvalidQuantity, InvalidDimension, ProductNotFound)):
        logger.warning(f"Order rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    # DivisionByZero means a stored product has no area: an internal consistency bug
    logger.error(f"Order failed: {e}")
    raise HTTPException(status_code=500, detail=str(e))

@router.post("/", response_model=Order, status_code=status.HTTP_201_CREATED)
def create_order(order: OrderCreate, db: Session = Depends(get_db)):
    """Create a quotation or tax invoice. Tax invoices take the sold boxes out of stock."""
    try:
        return crud_orders.create_order(db=db, order=order)
    except (EmptyCart, InsufficientStock, InvalidQuantity, InvalidDimension, ProductNotFound, DivisionByZero, TransactionFailure) as e:
        _raise_http(e)

@router.post("/preview", response_model=OrderPreview)
def preview_order(request: OrderPreviewRequest, db: Session = Depends(get_db)):
    """Price and tax a cart without saving it."""
    try:
        totals = crud_orders.preview_order(
            db=db,
            items=request.items,
            order_type=request.order_type,
            client_state=request.client_state,
            is_reverse_charge=request.is_reverse_charge,
        )
    except (EmptyCart, InsufficientStock, InvalidQuantity, InvalidDimension, ProductNotFound, DivisionByZero) as e:
        _raise_http(e)

    tax = totals.tax
    return OrderPreview(
        lines=[asdict(line) for line in totals.lines],
        total_boxes=totals.total_boxes,
        total_sqft=totals.total_sqft,
        subtotal=totals.subtotal,
        gst_type=tax.gst_type,
        igst_amount=tax.igst_amount,
        cgst_amount=tax.cgst_amount,
        sgst_amount=tax.sgst_amount,
        total_amount=totals.grand_total,
        amount_in_words=totals.amount_in_words,
    )

@router.get("/", response_model=List[Order])
def read_orders(
    skip: int = 0,
    limit: int = 100,
    order_type: Optional[OrderType] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    search: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """Retrieve orders, newest first, with optional type/date/client filters."""
    return crud_orders.get_orders(
        db=db,
        skip=skip,
        limit=limit,
        order_type=order_type,
        start_date=start_date,
        end_date=end_date,
        search=search,
    )

@router.get("/{order_id}", response_model=Order)
def read_order(order_id: str, db: Session = Depends(get_db)):
    db_order = crud_orders.get_order(db=db, order_id=order_id)
    if db_order is None:
        raise HTTPException(status_code=404, detail="Order not found")
    return db_order

@router.get("/{order_id}/invoice", response_model=InvoiceData)
def read_order_invoice(order_id: str, db: Session = Depends(get_db)):
    """Everything the invoice template needs: order, lines, company and bank details, amount in words."""
    db_order = crud_orders.get_order(db=db, order_id=order_id)
    if db_order is None:
        raise HTTPException(status_code=404, detail="Order not found")
    return build_invoice_data(db_order)

@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_order(order_id: str, db: Session = Depends(get_db)):
    """Delete an order. Deleting a tax invoice puts its boxes back into stock."""
    try:
        deleted = crud_orders.delete_order(db=db, order_id=order_id)
    except TransactionFailure as e:
        _raise_http(e)
    if not deleted:
        raise HTTPException(status_code=404, detail="Order not found")
