from sqlalchemy import Column, Integer, String, Numeric, Enum, CheckConstraint
from sqlalchemy.orm import relationship
from database import Base
from models.audit_mixin import TimestampMixin
from utils.units import DimensionUnit, area_per_box

class Product(Base, TimestampMixin):
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint('boxes_on_hand >= 0', name='ck_products_boxes_on_hand_non_negative'),
        CheckConstraint('tiles_per_box > 0', name='ck_products_tiles_per_box_positive'),
    )

    product_id = Column(Integer, primary_key=True, index=True)
    brand = Column(String, nullable=False, index=True)
    product_name = Column(String, nullable=False)
    hsn_code = Column(String, nullable=True)
    # Canonical dimensions in feet; every area/price calculation uses these
    tile_width = Column(Numeric(14, 6), nullable=False)
    tile_height = Column(Numeric(14, 6), nullable=False)
    # Dimensions as entered, kept for display
    tile_width_value = Column(Numeric(14, 4), nullable=True)
    tile_width_unit = Column(Enum(DimensionUnit), nullable=True)
    tile_height_value = Column(Numeric(14, 4), nullable=True)
    tile_height_unit = Column(Enum(DimensionUnit), nullable=True)
    tiles_per_box = Column(Integer, nullable=False)
    boxes_on_hand = Column(Integer, default=0, nullable=False)
    price_per_sqft = Column(Numeric(14, 2), nullable=False)

    # Relationships
    order_items = relationship("OrderItem", back_populates="product")
    audits = relationship("StockAudit", back_populates="product", cascade="all, delete-orphan")

    @property
    def area_per_box(self):
        return area_per_box(self.tile_width, self.tile_height, self.tiles_per_box)

    @property
    def label(self):
        return f"{self.brand} - {self.product_name}"
