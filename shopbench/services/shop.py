from __future__ import annotations

import time
from typing import Optional

from shopbench.cart.domain import Client, Product, ShoppingCart
from shopbench.services.pricing import derive_price
from shopbench.store.memory import KeyValueStore


def _now_millis() -> int:
    return int(time.time() * 1000)


class ShopService:
    """
    Write populates the store, destroy invalidates it, get only reads it.

    Clients are stored under their username and products under their
    product id, both in the same store; a lookup only answers with a
    record of the kind it asks for. Cart changes are read-modify-write
    on the client record; two concurrent changes to one cart may lose one.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    # ---------------- clients ----------------

    def get_client(self, username: str) -> Optional[Client]:
        value = self.store.get(username)
        return value if isinstance(value, Client) else None

    def add_client(self, username: str, name: str) -> Client:
        return self.store.put(username, Client(username, name, ShoppingCart()))

    def add_product_to_cart(self, username: str, client: Client, product: Product) -> Client:
        client.cart.add_product(product)
        return self.store.put(username, client)

    def remove_product_from_cart(self, username: str, client: Client, product: Product) -> Client:
        client.cart.remove_product(product)
        return self.store.put(username, client)

    def destroy_client(self, username: str) -> None:
        self.store.invalidate(username)

    # ---------------- products ----------------

    def get_product(self, product_id: str) -> Optional[Product]:
        value = self.store.get(product_id)
        return value if isinstance(value, Product) else None

    def create_product(self, product_id: str, name: str, amount: int) -> Product:
        product = Product(product_id, name, amount, _now_millis(), derive_price(product_id))
        return self.store.put(product_id, product)

    def destroy_product(self, product_id: str) -> None:
        self.store.invalidate(product_id)
