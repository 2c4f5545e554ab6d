from decimal import Decimal


def test_stock_in_existing_and_new_products(client, product_payload):
    existing = client.post("/products/", json=product_payload).json()

    response = client.post("/inventory-in/", json={
        "truck_number": " MH12AB1234 ",
        "date": "2025-06-10",
        "products": [
            {"product_id": existing["product_id"], "quantity": 25},
            {"new_product": {**product_payload, "product_name": "Wood Finish", "boxes_on_hand": 999}, "quantity": 40},
        ],
    })

    assert response.status_code == 201, response.text
    entry = response.json()
    assert entry["truck_number"] == "MH12AB1234"
    assert [item["quantity"] for item in entry["items"]] == [25, 40]
    assert entry["items"][1]["product_label"] == "Kajaria - Wood Finish"

    products = {p["product_name"]: p for p in client.get("/products/").json()}
    assert products["Glossy White"]["boxes_on_hand"] == 125
    # the received quantity is the only stock a new product starts with
    assert products["Wood Finish"]["boxes_on_hand"] == 40

    history = client.get(f"/products/{existing['product_id']}/audit").json()
    assert history[-1]["change_type"] == "stock_in"
    assert history[-1]["inventory_in_id"] == entry["id"]

    assert client.get(f"/inventory-in/{entry['id']}").json()["truck_number"] == "MH12AB1234"
    assert len(client.get("/inventory-in/").json()) == 1


def test_stock_in_rejects_bad_lines(client, product_payload):
    existing = client.post("/products/", json=product_payload).json()
    base = {"truck_number": "MH12AB1234", "date": "2025-06-10"}

    zero = client.post("/inventory-in/", json={**base, "products": [{"product_id": existing["product_id"], "quantity": 0}]})
    missing = client.post("/inventory-in/", json={**base, "products": [{"product_id": 999, "quantity": 5}]})
    empty = client.post("/inventory-in/", json={**base, "products": []})
    both = client.post("/inventory-in/", json={**base, "products": [
        {"product_id": existing["product_id"], "new_product": product_payload, "quantity": 5}
    ]})

    assert zero.status_code == 400
    assert missing.status_code == 400
    assert empty.status_code == 400
    assert both.status_code == 422
    assert client.get(f"/products/{existing['product_id']}").json()["boxes_on_hand"] == 100
    assert client.get("/inventory-in/").json() == []


def test_failed_line_rolls_back_whole_receipt(client, product_payload):
    existing = client.post("/products/", json=product_payload).json()

    response = client.post("/inventory-in/", json={
        "truck_number": "MH12AB1234",
        "date": "2025-06-10",
        "products": [
            {"product_id": existing["product_id"], "quantity": 10},
            {"new_product": {**product_payload, "product_name": "Bad", "tiles_per_box": 0}, "quantity": 5},
        ],
    })

    assert response.status_code == 400
    assert client.get(f"/products/{existing['product_id']}").json()["boxes_on_hand"] == 100
    assert len(client.get("/products/").json()) == 1
    assert client.get("/inventory-in/999").status_code == 404


def test_received_stock_can_be_sold(client, product_payload):
    product = client.post("/products/", json={**product_payload, "boxes_on_hand": 0}).json()
    client.post("/inventory-in/", json={
        "truck_number": "MH12AB1234",
        "date": "2025-06-10",
        "products": [{"product_id": product["product_id"], "quantity": 12}],
    })

    response = client.post("/orders/", json={
        "client_name": "Ravi",
        "client_phone": "9000000000",
        "client_address": "Nashik",
        "client_state": "Maharashtra",
        "order_date": "2025-06-12",
        "items": [{"product_id": product["product_id"], "boxes_sold": 12}],
    })

    assert response.status_code == 201
    assert Decimal(response.json()["total_amount"]) == Decimal("14160")
    assert client.get(f"/products/{product['product_id']}").json()["boxes_on_hand"] == 0
