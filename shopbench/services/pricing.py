from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Dict, Optional, Protocol

from shopbench.constants import CURRENCY, DEFAULT_PRICE
from shopbench.cart.domain import Price
from shopbench.utils.validators import is_decimal_id

logger = logging.getLogger(__name__)


def derive_price(product_id: str) -> Price:
    # synthetic benchmark data: numeric ids are priced at their own value
    if is_decimal_id(product_id):
        return Price(CURRENCY, float(int(product_id)))
    return Price(CURRENCY, DEFAULT_PRICE)


class PriceTable(Protocol):
    def get(self, product_id: int) -> Optional[float]: ...

    def __len__(self) -> int: ...

    def clear(self) -> None: ...

    def load_if_present(self, path: str | Path) -> bool: ...


class StaticPriceTable:
    """
    ``id,price`` pairs read from the static data file. Loaded once at
    startup; nothing reads prices from here when building products.
    """

    def __init__(self) -> None:
        self._prices: Dict[int, float] = {}

    def get(self, product_id: int) -> Optional[float]:
        return self._prices.get(product_id)

    def __len__(self) -> int:
        return len(self._prices)

    def clear(self) -> None:
        self._prices.clear()

    def load(self, path: str | Path) -> int:
        """
        Reads the file into the table and returns the number of entries.
        A malformed line stops the load; the error is logged and whatever
        was read before it stays in the table.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                for line in f:
                    line = line.strip()
                    if not line:
                        continue
                    pid, price = line.split(",")[:2]
                    self._prices[int(pid)] = float(price)
        except (OSError, ValueError):
            logger.exception("Failed to load static data from %s", path)
        return len(self._prices)

    def load_if_present(self, path: str | Path) -> bool:
        p = Path(path)
        if not p.is_file():
            logger.debug("No static data at %s", p)
            return False
        start = time.monotonic()
        self.load(p)
        took_ms = int((time.monotonic() - start) * 1000)
        logger.info("Took %s ms to load static data", took_ms)
        return True
