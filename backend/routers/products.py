from datetime import date
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from database import get_db
from models.products import Product as ProductModel
from schemas.products import Product, ProductCreate, ProductUpdate
from schemas.stock_audit import StockAudit
from crud import products as crud_products
from crud import stock_audit as crud_stock_audit
from utils.exceptions import InvalidDimension, ProductInUse, TransactionFailure

router = APIRouter(prefix="/products", tags=["Products"])
logger = logging.getLogger("products")

@router.post("/", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(item: ProductCreate, db: Session = Depends(get_db)):
    """Add a tile to the catalog. Width and height may be entered in ft, mm or inch."""
    existing = db.query(ProductModel).filter(
        ProductModel.brand == item.brand, ProductModel.product_name == item.product_name
    ).first()
    if existing:
        raise HTTPException(status_code=400, detail="A product with this brand and name already exists")

    try:
        new_item = crud_products.create_product(db=db, item=item)
    except InvalidDimension as e:
        raise HTTPException(status_code=400, detail=str(e))
    logger.info(f"Product '{new_item.label}' (ID: {new_item.product_id}) created with {new_item.boxes_on_hand} boxes")
    return new_item

@router.get("/", response_model=List[Product])
def read_products(
    skip: int = 0,
    limit: int = 100,
    brand: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """Retrieve the catalog, optionally filtered by brand."""
    return crud_products.get_products(db=db, skip=skip, limit=limit, brand=brand)

@router.get("/{product_id}", response_model=Product)
def read_product(product_id: int, db: Session = Depends(get_db)):
    db_item = crud_products.get_product(db=db, product_id=product_id)
    if db_item is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return db_item

@router.patch("/{product_id}", response_model=Product)
def update_product(product_id: int, item: ProductUpdate, db: Session = Depends(get_db)):
    """Update catalog details. Stock is changed only by orders and stock-in receipts."""
    try:
        updated_item = crud_products.update_product(db=db, product_id=product_id, item=item)
    except InvalidDimension as e:
        raise HTTPException(status_code=400, detail=str(e))
    except TransactionFailure as e:
        raise HTTPException(status_code=500, detail=str(e))
    if updated_item is None:
        raise HTTPException(status_code=404, detail="Product not found")
    logger.info(f"Product '{updated_item.label}' (ID: {product_id}) updated")
    return updated_item

@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: int, db: Session = Depends(get_db)):
    """Delete a product. Products that appear on a tax invoice cannot be deleted."""
    try:
        deleted = crud_products.delete_product(db=db, product_id=product_id)
    except ProductInUse as e:
        logger.warning(str(e))
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except TransactionFailure as e:
        raise HTTPException(status_code=500, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=404, detail="Product not found")
    logger.info(f"Product ID {product_id} deleted")

@router.get("/{product_id}/audit", response_model=List[StockAudit])
def get_product_stock_history(
    product_id: int,
    db: Session = Depends(get_db),
    start_date: Optional[date] = Query(None, description="Start date for filtering stock history"),
    end_date: Optional[date] = Query(None, description="End date for filtering stock history")
):
    """
    Retrieve every stock change (sales, returns, stock-in) for a product.
    """
    db_item = crud_products.get_product(db=db, product_id=product_id)
    if db_item is None:
        raise HTTPException(status_code=404, detail="Product not found")

    return crud_stock_audit.get_stock_audits(
        db=db,
        product_id=product_id,
        start_date=start_date,
        end_date=end_date
    )
