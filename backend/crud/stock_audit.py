from sqlalchemy.orm import Session
from models.stock_audit import StockAudit
from typing import Optional
from datetime import date, datetime, time, timedelta
from models.audit_mixin import IST

def get_stock_audits(
    db: Session,
    product_id: int,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None
):
    query = db.query(StockAudit).filter(StockAudit.product_id == product_id)

    if start_date:
        query = query.filter(StockAudit.timestamp >= IST.localize(datetime.combine(start_date, time.min)))
    if end_date:
        # inclusive of the whole end day
        query = query.filter(StockAudit.timestamp < IST.localize(datetime.combine(end_date + timedelta(days=1), time.min)))

    return query.order_by(StockAudit.timestamp.asc(), StockAudit.id.asc()).all()


def add_stock_audit(
    db: Session,
    product_id: int,
    change_type: str,
    change_amount: int,
    old_quantity: int,
    new_quantity: int,
    order_id: Optional[str] = None,
    inventory_in_id: Optional[int] = None,
    note: Optional[str] = None
):
    """Stage a stock audit record in the caller's transaction (no commit)."""
    audit = StockAudit(
        product_id=product_id,
        change_type=change_type,
        change_amount=change_amount,
        old_quantity=old_quantity,
        new_quantity=new_quantity,
        order_id=order_id,
        inventory_in_id=inventory_in_id,
        note=note
    )
    db.add(audit)
    return audit
