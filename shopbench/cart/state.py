from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass, field

from shopbench.constants import CLIENT_PREFIX
from shopbench.services.pricing import PriceTable, StaticPriceTable
from shopbench.services.shop import ShopService
from shopbench.store.memory import InMemoryStore


@dataclass
class AppState:
    """Everything the cart service shares between requests."""

    store: InMemoryStore = field(default_factory=InMemoryStore)
    prices: PriceTable = field(default_factory=StaticPriceTable)

    def __post_init__(self) -> None:
        self.shop = ShopService(self.store)
        self._counter_lock = threading.Lock()
        self._client_count = itertools.count(1)

    def next_client_username(self) -> str:
        with self._counter_lock:
            n = next(self._client_count)
        return f"{CLIENT_PREFIX}{n}"

    def reset(self) -> None:
        self.store.clear()
        self.prices.clear()
        with self._counter_lock:
            self._client_count = itertools.count(1)
