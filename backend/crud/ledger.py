import logging
from decimal import Decimal
from typing import Optional
from sqlalchemy.orm import Session, selectinload
from models.ledger import LedgerEntry, LedgerPayment
from models.products import Product
from models.audit_mixin import now_ist
from schemas.ledger import LedgerEntryCreate, LedgerPaymentCreate, PAYMENT_TYPES
from utils.exceptions import EmptyCart, PaymentExceedsBalance, ProductNotFound
from utils.formatting import to_money
from utils.pricing import price_line

logger = logging.getLogger("ledger")

def _catalog_total(db: Session, entry: LedgerEntryCreate) -> Decimal:
    total = Decimal(0)
    for item in entry.products:
        product = db.query(Product).filter(Product.product_id == item.product_id).first()
        if product is None:
            raise ProductNotFound(item.product_id)
        total += price_line(product, item.quantity).total_price
    return to_money(total)

def get_ledger_entry(db: Session, entry_id: int):
    return db.query(LedgerEntry).options(selectinload(LedgerEntry.payments)).filter(LedgerEntry.id == entry_id).first()

def get_ledger_entries(db: Session, search: Optional[str] = None, status: str = "all"):
    query = db.query(LedgerEntry).options(selectinload(LedgerEntry.payments))
    if search:
        query = query.filter(LedgerEntry.client_name.ilike(f"%{search}%"))
    entries = query.order_by(LedgerEntry.created_at.desc(), LedgerEntry.id.desc()).all()

    if status == "cleared":
        return [entry for entry in entries if entry.pending_amount <= 0]
    if status == "pending":
        return [entry for entry in entries if entry.pending_amount > 0]
    return entries

def create_ledger_entry(db: Session, entry: LedgerEntryCreate):
    total_amount = entry.total_amount if entry.total_amount is not None else _catalog_total(db, entry)
    if total_amount <= 0:
        raise EmptyCart("Ledger entry needs products or a positive total amount.")

    db_entry = LedgerEntry(
        client_name=entry.client_name,
        order_id=entry.order_id,
        total_amount=to_money(total_amount),
        products=[item.model_dump() for item in entry.products],
    )
    db.add(db_entry)
    db.commit()
    db.refresh(db_entry)
    logger.info(f"Ledger entry {db_entry.id} created for '{db_entry.client_name}' ({db_entry.total_amount})")
    return db_entry

def add_ledger_payment(db: Session, entry_id: int, payment: LedgerPaymentCreate):
    db_entry = get_ledger_entry(db, entry_id)
    if db_entry is None:
        return None

    pending = db_entry.pending_amount
    if payment.amount > pending:
        raise PaymentExceedsBalance(entry_id, payment.amount, pending)

    db_payment = LedgerPayment(
        ledger_entry_id=entry_id,
        payment_type=payment.payment_type,
        amount=to_money(payment.amount),
        payment_date=payment.payment_date or now_ist().date(),
        note=payment.note,
    )
    db.add(db_payment)
    db.commit()
    db.refresh(db_entry)
    logger.info(f"{payment.payment_type} payment of {payment.amount} recorded against ledger entry {entry_id}")
    return db_entry

def delete_ledger_entry(db: Session, entry_id: int) -> bool:
    db_entry = get_ledger_entry(db, entry_id)
    if db_entry is None:
        return False
    db.delete(db_entry)
    db.commit()
    return True

def get_ledger_summary(db: Session, search: Optional[str] = None, status: str = "all"):
    entries = get_ledger_entries(db, search=search, status=status)
    received_by_type = {payment_type: Decimal(0) for payment_type in PAYMENT_TYPES}
    total_sales = total_received = total_pending = Decimal(0)

    for entry in entries:
        total_sales += entry.total_amount
        total_received += entry.amount_paid
        total_pending += entry.pending_amount
        for payment in entry.payments:
            received_by_type[payment.payment_type] = received_by_type.get(payment.payment_type, Decimal(0)) + payment.amount

    return {
        "total_sales": total_sales,
        "total_received": total_received,
        "total_pending": total_pending,
        "received_by_type": received_by_type,
    }
