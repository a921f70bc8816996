# app/services/cart_service.py
from typing import Any, Dict, List

from requests import RequestException

from app.domain.errors import CartItemNotFound
from app.domain.schemas import CartLineItem, SelectedPackage
from app.services.cart_store import CartStore
from app.services.product_client import ProductClient
from app.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use case'y koszyka dla routerow.
    Store trzyma pozycje, tutaj jest polityka (quantity <= 0 => usun)
    i wzbogacanie pozycji o aktualne dane produktu do wyswietlenia.
    """

    def __init__(self, store: CartStore, product_client: ProductClient):
        self.store = store
        self.product_client = product_client

    #query
    def get_cart(self, user_id: str) -> List[Dict[str, Any]]:
        return self.enrich(self.store.get(user_id))

    #commands
    def add_item(
        self,
        user_id: str,
        product_id: str,
        quantity: int,
        selected_package: SelectedPackage | dict,
    ) -> List[Dict[str, Any]]:
        items = self.store.add(user_id, product_id, quantity, selected_package)
        return self.enrich(items)

    def update_item(self, user_id: str, item_id: str, quantity: int) -> List[Dict[str, Any]]:
        if quantity <= 0:
            # nie zostawiamy pozycji z iloscia 0
            if not any(i.id == item_id for i in self.store.get(user_id)):
                raise CartItemNotFound("Cart item not found")
            logger.info(f"Quantity {quantity} for item {item_id}, removing it from cart of user {user_id}")
            return self.enrich(self.store.remove(user_id, item_id))

        item = self.store.update(user_id, item_id, quantity)
        if item is None:
            raise CartItemNotFound("Cart item not found")

        logger.info(f"Item {item_id} in cart of user {user_id} set to quantity {quantity}")
        return self.get_cart(user_id)

    def remove_item(self, user_id: str, item_id: str) -> List[Dict[str, Any]]:
        return self.enrich(self.store.remove(user_id, item_id))

    def clear(self, user_id: str) -> None:
        self.store.clear(user_id)
        logger.info(f"Cart of user {user_id} cleared")

    def enrich(self, items: List[CartLineItem]) -> List[Dict[str, Any]]:
        products: Dict[str, dict | None] = {}
        out = []

        for item in items:
            if item.product_id not in products:
                products[item.product_id] = self._lookup(item.product_id)

            row = item.model_dump(by_alias=True)
            product = products[item.product_id]
            if product:
                row["product"] = product
            out.append(row)

        return out

    def _lookup(self, product_id: str) -> dict | None:
        try:
            product = self.product_client.fetch_product(product_id)
        except RequestException as e:
            logger.warning(f"Product lookup failed for {product_id}: {e}")
            return None

        if not product:
            logger.warning(f"Product {product_id} not found, cart item left without product data")
            return None

        return {
            "id": product.get("id"),
            "name": product.get("name"),
            "description": product.get("description"),
            "categoryId": product.get("category_id"),
            "images": product.get("images") or [],
            "rating": product.get("rating"),
            "variants": product.get("variants") or [],
            "inStock": product.get("in_stock"),
        }
