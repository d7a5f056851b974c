from __future__ import annotations

from dataclasses import dataclass, field

from shopbench.constants import PRODUCT_ID_SEPARATOR
from shopbench.utils.formatters import fixed, record


def product_key(username: str, sequence: int) -> str:
    return f"{username}{PRODUCT_ID_SEPARATOR}{sequence}"


@dataclass(frozen=True)
class Price:
    currency: str
    amount: float

    def __str__(self) -> str:
        return record("Price", currency=self.currency, amount=fixed(self.amount))


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    quantity: int
    timestamp: int  # epoch millis
    price: Price

    def __str__(self) -> str:
        return record(
            "Product",
            id=self.id,
            name=self.name,
            quantity=self.quantity,
            timestamp=self.timestamp,
            price=self.price,
        )


@dataclass
class ShoppingCart:
    """
    Counters only, products themselves live in the store under
    ``product_key(username, n)`` for n in ``range(next_product_id)``.
    next_product_id never goes back, so ids are not reused.
    """
    next_product_id: int = 0
    number_products: int = 0

    def add_product(self, product: Product) -> None:
        self.next_product_id += 1
        self.number_products += 1

    def remove_product(self, product: Product) -> None:
        if self.number_products > 0:
            self.number_products -= 1

    def product_keys(self, username: str) -> list[str]:
        return [product_key(username, i) for i in range(self.next_product_id)]

    def __str__(self) -> str:
        return record(
            "ShoppingCart",
            nextProductId=self.next_product_id,
            numberProducts=self.number_products,
        )


@dataclass
class Client:
    username: str
    name: str
    cart: ShoppingCart = field(default_factory=ShoppingCart)

    def __str__(self) -> str:
        return record("Client", username=self.username, name=self.name, cart=self.cart)
