from sqlalchemy import Column, Integer, String, Date, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from database import Base
from models.audit_mixin import TimestampMixin

class InventoryIn(Base, TimestampMixin):
    """A truck receipt: one delivery of tiles into the godown."""
    __tablename__ = "inventory_in"

    id = Column(Integer, primary_key=True, index=True)
    truck_number = Column(String, nullable=False)
    date = Column(Date, nullable=False, index=True)

    items = relationship("InventoryInItem", back_populates="inventory_in", cascade="all, delete-orphan")


class InventoryInItem(Base):
    __tablename__ = "inventory_in_products"
    __table_args__ = (CheckConstraint('quantity > 0', name='ck_inventory_in_quantity_positive'),)

    id = Column(Integer, primary_key=True, index=True)
    inventory_in_id = Column(Integer, ForeignKey("inventory_in.id", ondelete="CASCADE"), nullable=False)
    # NULL once the product is deleted; product_label keeps the receipt readable
    product_id = Column(Integer, ForeignKey("products.product_id", ondelete="SET NULL"), nullable=True)
    product_label = Column(String, nullable=True)
    quantity = Column(Integer, nullable=False)

    inventory_in = relationship("InventoryIn", back_populates="items")
    product = relationship("Product")
