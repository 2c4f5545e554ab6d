from decimal import Decimal
from sqlalchemy import Column, Integer, String, Text, Numeric, Date, ForeignKey, JSON
from sqlalchemy.orm import relationship
from database import Base
from models.audit_mixin import TimestampMixin

class LedgerEntry(Base, TimestampMixin):
    __tablename__ = "ledger_entries"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(String, nullable=True, index=True)
    client_name = Column(String, nullable=False, index=True)
    total_amount = Column(Numeric(14, 2), nullable=False)
    products = Column(JSON, nullable=True) # [{"product_id": 1, "quantity": 10}, ...]

    payments = relationship("LedgerPayment", back_populates="ledger_entry", cascade="all, delete-orphan")

    @property
    def amount_paid(self):
        return sum((payment.amount for payment in self.payments), Decimal(0))

    @property
    def pending_amount(self):
        return max(self.total_amount - self.amount_paid, Decimal(0))


class LedgerPayment(Base, TimestampMixin):
    __tablename__ = "ledger_payments"

    id = Column(Integer, primary_key=True, index=True)
    ledger_entry_id = Column(Integer, ForeignKey("ledger_entries.id", ondelete="CASCADE"), nullable=False)
    payment_type = Column(String, nullable=False) # "Cash", "Bank Transfer", "Cheque"
    amount = Column(Numeric(14, 2), nullable=False)
    payment_date = Column(Date, nullable=False)
    note = Column(Text, nullable=True)

    ledger_entry = relationship("LedgerEntry", back_populates="payments")
