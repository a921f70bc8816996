# app/services/cart_store.py
import threading
import uuid
from contextlib import contextmanager
from typing import Dict, Iterator, List

from app.domain.schemas import CartLineItem, SelectedPackage
from app.utils.logging import get_logger

logger = get_logger(__name__)


class _UserLock:
    """Lock jednego usera + ile watkow go trzyma albo na niego czeka."""

    __slots__ = ("lock", "holders")

    def __init__(self):
        self.lock = threading.Lock()
        self.holders = 0


class CartStore:
    """
    Koszyk w pamieci procesu, kluczowany po user_id.

    - kolejnosc pozycji = kolejnosc dodania
    - max jedna pozycja na (product_id, selected_package.name), kolejne add zwieksza ilosc
    - lock per user: operacje jednego usera ida po kolei, rozni userzy sie nie blokuja
    - lock zyje tylko dopoki user ma koszyk albo ktos go trzyma, mapa lockow nie rosnie od odczytow
    - na zewnatrz oddajemy kopie, nikt nie modyfikuje stanu poza store
    - brak persystencji, restart procesu czysci wszystko
    """

    def __init__(self):
        self._carts: Dict[str, List[CartLineItem]] = {}
        self._locks: Dict[str, _UserLock] = {}
        self._locks_guard = threading.Lock()

    @contextmanager
    def _user_lock(self, user_id: str) -> Iterator[None]:
        with self._locks_guard:
            entry = self._locks.get(user_id)
            if entry is None:
                entry = self._locks[user_id] = _UserLock()
            entry.holders += 1

        try:
            with entry.lock:
                yield
        finally:
            with self._locks_guard:
                entry.holders -= 1
                # nikt nie czeka i nie ma koszyka => wpis niepotrzebny
                if entry.holders == 0 and user_id not in self._carts:
                    del self._locks[user_id]

    @staticmethod
    def _snapshot(items: List[CartLineItem]) -> List[CartLineItem]:
        return [i.model_copy(deep=True) for i in items]

    #query
    def get(self, user_id: str) -> List[CartLineItem]:
        with self._user_lock(user_id):
            return self._snapshot(self._carts.get(user_id, []))

    #commands
    def add(
        self,
        user_id: str,
        product_id: str,
        quantity: int,
        selected_package: SelectedPackage | dict,
    ) -> List[CartLineItem]:
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise ValueError("Quantity must be a positive integer")
        if not product_id:
            raise ValueError("productId is required")
        if not selected_package:
            raise ValueError("selectedPackage is required")

        package = SelectedPackage.model_validate(selected_package)

        with self._user_lock(user_id):
            items = self._carts.setdefault(user_id, [])

            existing = next(
                (
                    i for i in items
                    if i.product_id == product_id
                    and i.selected_package.name == package.name
                ),
                None,
            )

            if existing:
                logger.info(
                    f"Product {product_id} ({package.name}) already in cart of user {user_id}, "
                    f"quantity {existing.quantity} -> {existing.quantity + quantity}"
                )
                existing.quantity += quantity
            else:
                item = CartLineItem(
                    id=f"cart-{uuid.uuid4().hex}",
                    user_id=user_id,
                    product_id=product_id,
                    quantity=quantity,
                    selected_package=package,
                )
                items.append(item)
                logger.info(f"Added product {product_id} ({package.name}) to cart of user {user_id}")

            return self._snapshot(items)

    def update(self, user_id: str, item_id: str, quantity: int) -> CartLineItem | None:
        """
        Ustawia ilosc, nic wiecej. Nie usuwa przy quantity <= 0,
        ta decyzja nalezy do wolajacego (CartService).
        """
        with self._user_lock(user_id):
            for item in self._carts.get(user_id, []):
                if item.id == item_id:
                    item.quantity = quantity
                    return item.model_copy(deep=True)
            return None

    def remove(self, user_id: str, item_id: str) -> List[CartLineItem]:
        with self._user_lock(user_id):
            items = [i for i in self._carts.get(user_id, []) if i.id != item_id]
            if items:
                self._carts[user_id] = items
            else:
                # pusty koszyk = brak koszyka, lock tez pojdzie
                self._carts.pop(user_id, None)
            return self._snapshot(items)

    def clear(self, user_id: str) -> None:
        with self._user_lock(user_id):
            self._carts.pop(user_id, None)


# jeden koszyk na proces
cart_store = CartStore()
