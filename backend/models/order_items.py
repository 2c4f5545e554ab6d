from sqlalchemy import Column, Integer, Numeric, ForeignKey, String
from sqlalchemy.orm import relationship
from database import Base

class OrderItem(Base):
    __tablename__ = "order_items"

    item_id = Column(Integer, primary_key=True, index=True)
    order_id = Column(String, ForeignKey("orders.order_id", ondelete="CASCADE"), nullable=False, index=True)
    # NULL once a product referenced only by quotations has been deleted
    product_id = Column(Integer, ForeignKey("products.product_id", ondelete="SET NULL"), nullable=True, index=True)
    boxes_sold = Column(Integer, nullable=False)
    price_per_sqft = Column(Numeric(14, 6), nullable=False) # effective rate at the time of sale
    sqft_per_box = Column(Numeric(14, 6), nullable=False)
    line_total = Column(Numeric(14, 2), nullable=False)

    # Relationships
    order = relationship("Order", back_populates="items")
    product = relationship("Product", back_populates="order_items")

    @property
    def total_sqft(self):
        return self.sqft_per_box * self.boxes_sold
