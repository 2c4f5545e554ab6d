from sqlalchemy import Column, String, Text, Numeric, Date, Boolean, Enum
from sqlalchemy.orm import relationship
from database import Base
from models.audit_mixin import TimestampMixin
from utils.gst import OrderType, GstType

class Order(Base, TimestampMixin):
    __tablename__ = "orders"

    order_id = Column(String, primary_key=True, index=True) # e.g. ORD-250612103045-4F2A
    order_type = Column(Enum(OrderType), default=OrderType.TAX_INVOICE, nullable=False)
    client_name = Column(String, nullable=False, index=True)
    client_phone = Column(String, nullable=False)
    client_address = Column(Text, nullable=False)
    client_state = Column(String, nullable=False)
    client_gst = Column(String, nullable=True)
    state_code = Column(String, nullable=True)
    vehicle_no = Column(String, nullable=True)
    eway_bill = Column(String, nullable=True)
    is_reverse_charge = Column(Boolean, default=False, nullable=False)
    order_date = Column(Date, nullable=False, index=True)

    # Derived from order_type/client_state/is_reverse_charge, persisted for audit and display
    gst_type = Column(Enum(GstType), default=GstType.NONE, nullable=False)
    subtotal = Column(Numeric(14, 2), default=0, nullable=False)
    igst_rate = Column(Numeric(5, 2), default=0, nullable=False)
    igst_amount = Column(Numeric(14, 2), default=0, nullable=False)
    cgst_rate = Column(Numeric(5, 2), default=0, nullable=False)
    cgst_amount = Column(Numeric(14, 2), default=0, nullable=False)
    sgst_rate = Column(Numeric(5, 2), default=0, nullable=False)
    sgst_amount = Column(Numeric(14, 2), default=0, nullable=False)
    total_amount = Column(Numeric(14, 2), default=0, nullable=False)

    # Relationships
    items = relationship("OrderItem", back_populates="order", cascade="all, delete-orphan")
