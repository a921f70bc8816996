import pytest
from requests import ConnectionError as RequestsConnectionError

from app.domain.errors import CartItemNotFound
from app.services.cart_service import CartService

TEN_PACK = {"name": "10-pack", "price": "500"}


def add(client, user_id="u1", product_id="p1", quantity=1, package=TEN_PACK):
    return client.post(
        "/cart",
        json={
            "userId": user_id,
            "productId": product_id,
            "quantity": quantity,
            "selectedPackage": package,
        },
    )


# ----- service -----

def test_enrich_joins_live_product_fields(cart_service):
    cart = cart_service.add_item("u1", "p1", 2, TEN_PACK)

    assert cart[0]["productId"] == "p1"
    assert cart[0]["selectedPackage"] == {"name": "10-pack", "price": "500"}
    assert cart[0]["product"] == {
        "id": "p1",
        "name": "Paracetamol 500mg",
        "description": "Pain and fever relief tablets",
        "categoryId": "c-analgesics",
        "images": ["/images/paracetamol.png"],
        "rating": "4.70",
        "variants": [{"name": "10-pack", "price": "500"}],
        "inStock": True,
    }


def test_enrich_looks_up_each_product_once(cart_service, product_client):
    cart_service.add_item("u1", "p1", 1, TEN_PACK)
    cart_service.add_item("u1", "p1", 1, {"name": "20-pack", "price": "950"})
    product_client.calls.clear()

    cart_service.get_cart("u1")

    assert product_client.calls == ["p1"]


def test_missing_product_leaves_item_unenriched(cart_service):
    cart = cart_service.add_item("u1", "gone", 1, TEN_PACK)

    assert "product" not in cart[0]
    assert cart[0]["productId"] == "gone"


def test_product_lookup_failure_does_not_break_cart(store):
    class BrokenClient:
        def fetch_product(self, product_id):
            raise RequestsConnectionError("product-service down")

    svc = CartService(store=store, product_client=BrokenClient())
    cart = svc.add_item("u1", "p1", 1, TEN_PACK)

    assert len(cart) == 1
    assert "product" not in cart[0]


def test_update_to_zero_removes_item(cart_service, store):
    item_id = cart_service.add_item("u1", "p1", 2, TEN_PACK)[0]["id"]

    cart = cart_service.update_item("u1", item_id, 0)

    assert cart == []
    assert store.get("u1") == []


def test_update_negative_removes_item(cart_service, store):
    store.add("u1", "p2", 1, TEN_PACK)
    item_id = cart_service.add_item("u1", "p1", 2, TEN_PACK)[-1]["id"]

    cart = cart_service.update_item("u1", item_id, -3)

    assert [i["productId"] for i in cart] == ["p2"]


@pytest.mark.parametrize("quantity", [0, 4])
def test_update_unknown_item_raises_not_found(cart_service, quantity):
    with pytest.raises(CartItemNotFound):
        cart_service.update_item("u1", "cart-missing", quantity)


# ----- http -----

def test_get_cart_without_user_returns_empty_list(client):
    resp = client.get("/cart")
    assert resp.status_code == 200
    assert resp.json() == []


def test_post_cart_returns_enriched_cart(client):
    resp = add(client, quantity=2)

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["cart"][0]["quantity"] == 2
    assert body["cart"][0]["product"]["name"] == "Paracetamol 500mg"


def test_post_cart_merges_identical_variant(client):
    add(client, quantity=2)
    resp = add(client, quantity=3)

    cart = resp.json()["cart"]
    assert len(cart) == 1
    assert cart[0]["quantity"] == 5


def test_post_cart_validation_error(client):
    resp = add(client, quantity=0)

    assert resp.status_code == 400
    assert resp.json()["message"] == "Validation error"
    assert resp.json()["errors"][0]["loc"][-1] == "quantity"


def test_post_cart_missing_package(client):
    resp = client.post("/cart", json={"userId": "u1", "productId": "p1", "quantity": 1})
    assert resp.status_code == 400


def test_patch_cart_item_updates_quantity(client):
    item_id = add(client).json()["cart"][0]["id"]

    resp = client.patch(f"/cart/{item_id}", params={"userId": "u1"}, json={"quantity": 4})

    assert resp.status_code == 200
    assert resp.json()["cart"][0]["quantity"] == 4


def test_patch_cart_item_to_zero_removes_it(client):
    item_id = add(client).json()["cart"][0]["id"]

    resp = client.patch(f"/cart/{item_id}", params={"userId": "u1"}, json={"quantity": 0})

    assert resp.status_code == 200
    assert resp.json()["cart"] == []
    assert client.get("/cart", params={"userId": "u1"}).json() == []


def test_patch_unknown_item_is_404(client):
    resp = client.patch("/cart/cart-missing", params={"userId": "u1"}, json={"quantity": 2})

    assert resp.status_code == 404
    assert resp.json()["detail"]["code"] == "not_found"


def test_patch_other_users_item_is_404(client):
    item_id = add(client, user_id="a").json()["cart"][0]["id"]

    resp = client.patch(f"/cart/{item_id}", params={"userId": "b"}, json={"quantity": 2})

    assert resp.status_code == 404
    assert client.get("/cart", params={"userId": "a"}).json()[0]["quantity"] == 1


def test_delete_cart_item(client):
    item_id = add(client, product_id="p1").json()["cart"][0]["id"]
    add(client, product_id="p2")

    resp = client.delete(f"/cart/{item_id}", params={"userId": "u1"})
    again = client.delete(f"/cart/{item_id}", params={"userId": "u1"})

    assert resp.status_code == 200
    assert [i["productId"] for i in resp.json()["cart"]] == ["p2"]
    assert again.json() == resp.json()


def test_clear_cart_returns_204(client):
    add(client)

    resp = client.delete("/cart", params={"userId": "u1"})

    assert resp.status_code == 204
    assert resp.content == b""
    assert client.get("/cart", params={"userId": "u1"}).json() == []


def test_clear_cart_requires_user_id(client):
    assert client.delete("/cart").status_code == 400


def test_post_cart_rejects_non_decimal_package_price(client):
    resp = add(client, package={"name": "10-pack", "price": "abc"})

    assert resp.status_code == 400
    assert resp.json()["errors"][0]["loc"][-1] == "price"
    assert client.get("/cart", params={"userId": "u1"}).json() == []
