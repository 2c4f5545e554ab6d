from decimal import Decimal
from io import BytesIO

from openpyxl import load_workbook


def order(client, product_id, boxes, order_type="tax_invoice", state="Maharashtra", order_date="2025-06-12"):
    response = client.post("/orders/", json={
        "order_type": order_type,
        "client_name": "Asha Constructions",
        "client_phone": "9876543210",
        "client_address": "Pune",
        "client_state": state,
        "order_date": order_date,
        "items": [{"product_id": product_id, "boxes_sold": boxes}],
    })
    assert response.status_code == 201, response.text
    return response.json()


def seed(client, product_payload):
    kajaria = client.post("/products/", json=product_payload).json()
    somany = client.post("/products/", json={
        **product_payload, "brand": "Somany", "product_name": "Matt Grey", "price_per_sqft": "30", "boxes_on_hand": 8,
    }).json()
    order(client, kajaria["product_id"], 10)
    order(client, somany["product_id"], 2, state="Gujarat", order_date="2025-06-20")
    order(client, kajaria["product_id"], 50, order_type="quotation")
    return kajaria, somany


def test_dashboard(client, product_payload):
    seed(client, product_payload)

    stats = client.get("/reports/dashboard").json()

    # 90 boxes x 20 sq.ft x 50 + 6 boxes x 20 sq.ft x 30
    assert Decimal(stats["inventory_value"]) == Decimal("93600")
    assert stats["boxes_in_stock"] == 96
    assert stats["order_count"] == 3
    assert Decimal(stats["sales_revenue"]) == Decimal("11200")


def test_sales_report(client, product_payload):
    seed(client, product_payload)

    report = client.get("/reports/sales").json()

    assert report["order_count"] == 2
    assert Decimal(report["total_sales"]) == Decimal("13216")
    assert Decimal(report["total_tax"]) == Decimal("2016")
    assert Decimal(report["average_order_value"]) == Decimal("6608")
    assert [row["brand"] for row in report["brand_sales"]] == ["Kajaria", "Somany"]
    assert report["top_products"][0]["label"] == "Kajaria - Glossy White"
    assert report["top_products"][0]["boxes"] == 10


def test_sales_report_filters(client, product_payload):
    seed(client, product_payload)

    by_brand = client.get("/reports/sales", params={"brand": "Somany"}).json()
    by_date = client.get("/reports/sales", params={"start_date": "2025-06-15", "end_date": "2025-06-30"}).json()

    assert by_brand["order_count"] == 1
    assert [row["brand"] for row in by_brand["brand_sales"]] == ["Somany"]
    assert by_date["order_count"] == 1
    assert Decimal(by_date["total_sales"]) == Decimal("1416")
    assert client.get("/reports/sales", params={"start_date": "2025-07-01", "end_date": "2025-06-01"}).status_code == 400


def test_sales_export(client, product_payload):
    seed(client, product_payload)

    response = client.get("/reports/sales/export")

    assert response.status_code == 200
    assert "sales_report.xlsx" in response.headers["content-disposition"]
    workbook = load_workbook(BytesIO(response.content))
    invoices = workbook["Invoices"]
    assert invoices["A1"].value == "Order ID"
    assert invoices.max_row == 3
    assert workbook["By Brand"]["A2"].value == "Kajaria"


def test_inventory_report(client, product_payload):
    seed(client, product_payload)

    report = client.get("/reports/inventory").json()
    low = client.get("/reports/inventory", params={"low_stock_threshold": 100}).json()

    assert report["total_boxes"] == 96
    assert Decimal(report["total_value"]) == Decimal("93600")
    rows = {row["brand"]: row for row in report["products"]}
    assert rows["Somany"]["low_stock"] is True
    assert rows["Kajaria"]["low_stock"] is False
    assert Decimal(rows["Kajaria"]["total_sqft"]) == Decimal("1800")
    assert all(row["low_stock"] for row in low["products"])
