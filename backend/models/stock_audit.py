from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from database import Base
from models.audit_mixin import now_ist

class StockAudit(Base):
    __tablename__ = "stock_audit"

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("products.product_id", ondelete="CASCADE"), nullable=False, index=True)
    change_type = Column(String, nullable=False)  # "sale", "return", "stock_in", "opening"
    change_amount = Column(Integer, nullable=False) # Positive or negative
    old_quantity = Column(Integer, nullable=False)
    new_quantity = Column(Integer, nullable=False)
    order_id = Column(String, nullable=True)
    inventory_in_id = Column(Integer, nullable=True)
    timestamp = Column(DateTime(timezone=True), default=now_ist)
    note = Column(String, nullable=True)

    product = relationship("Product", back_populates="audits")
