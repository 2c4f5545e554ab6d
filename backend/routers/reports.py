from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session
from typing import Optional
from datetime import date
from io import BytesIO
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter
import pandas as pd
import logging

from database import get_db
from schemas.reports import DashboardStats, SalesReport, InventoryReport
from crud import reports as crud_reports

router = APIRouter(
    prefix="/reports",
    tags=["reports"],
)
logger = logging.getLogger("reports")

def _check_range(start_date: Optional[date], end_date: Optional[date]):
    if start_date and end_date and start_date > end_date:
        raise HTTPException(status_code=400, detail="Start date cannot be after the end date")

@router.get("/dashboard", response_model=DashboardStats)
def get_dashboard(db: Session = Depends(get_db)):
    return crud_reports.get_dashboard_stats(db)

@router.get("/sales", response_model=SalesReport)
def get_sales_report(
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    brand: Optional[str] = None,
    top: int = 5,
    db: Session = Depends(get_db)
):
    """Tax invoice sales in a date range, broken down by brand, with the best selling products."""
    _check_range(start_date, end_date)
    return crud_reports.get_sales_report(db, start_date=start_date, end_date=end_date, brand=brand, top=top)

@router.get("/sales/export")
def export_sales_report(
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    brand: Optional[str] = None,
    db: Session = Depends(get_db)
):
    _check_range(start_date, end_date)
    report = crud_reports.get_sales_report(db, start_date=start_date, end_date=end_date, brand=brand)

    invoice_rows = [
        {
            "Order ID": order.order_id,
            "Date": order.order_date,
            "Client": order.client_name,
            "State": order.client_state,
            "GST Type": order.gst_type.value,
            "Subtotal": float(order.subtotal),
            "IGST": float(order.igst_amount),
            "CGST": float(order.cgst_amount),
            "SGST": float(order.sgst_amount),
            "Total": float(order.total_amount),
        }
        for order in report["orders"]
    ]
    brand_rows = [
        {
            "Brand": row["brand"],
            "Boxes": row["boxes"],
            "Sq.ft": float(row["total_sqft"]),
            "Amount": float(row["amount"]),
        }
        for row in report["brand_sales"]
    ]

    # Create an in-memory Excel file
    excel_file = BytesIO()
    with pd.ExcelWriter(excel_file, engine="openpyxl") as writer:
        pd.DataFrame(invoice_rows, columns=[
            "Order ID", "Date", "Client", "State", "GST Type",
            "Subtotal", "IGST", "CGST", "SGST", "Total"
        ]).to_excel(writer, index=False, sheet_name="Invoices")
        pd.DataFrame(brand_rows, columns=["Brand", "Boxes", "Sq.ft", "Amount"]).to_excel(
            writer, index=False, sheet_name="By Brand"
        )

        bold_font = Font(bold=True)
        for ws in writer.book.worksheets:
            for cell in ws[1]:
                cell.font = bold_font
            for col_idx in range(1, ws.max_column + 1):
                ws.column_dimensions[get_column_letter(col_idx)].width = 16
    excel_file.seek(0)

    logger.info(f"Sales export generated with {len(invoice_rows)} invoice(s)")
    headers = {
        'Content-Disposition': 'attachment; filename="sales_report.xlsx"'
    }
    return StreamingResponse(excel_file, media_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet', headers=headers)

@router.get("/inventory", response_model=InventoryReport)
def get_inventory_report(low_stock_threshold: Optional[int] = None, db: Session = Depends(get_db)):
    """Current stock per product with value at catalog price and a low-stock flag."""
    return crud_reports.get_inventory_report(db, low_stock_threshold=low_stock_threshold)
