from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import PlainTextResponse

from shopbench.cart.domain import product_key
from shopbench.cart.state import AppState
from shopbench.config import settings
from shopbench.services.diagnostics import used_memory_kb
from shopbench.services.shop import ShopService
from shopbench.utils.formatters import bracketed
from shopbench.web.commands import ClientSaveCommand, ProductDeleteCommand, ProductSaveCommand

logger = logging.getLogger(__name__)

router = APIRouter(default_response_class=PlainTextResponse)


def _state(request: Request) -> AppState:
    return request.app.state.cart


def _shop(request: Request) -> ShopService:
    return _state(request).shop


# ---------------- diagnostics ----------------

@router.get("/memory")
def memory() -> str:
    return str(used_memory_kb())


# ---------------- cart ----------------
# registered before the client routes, /{cid} would match /cart

@router.post("/cart")
def add_product(request: Request, cmd: ProductSaveCommand) -> str:
    shop = _shop(request)
    client = shop.get_client(cmd.username)
    if client is None:
        return f"Error, no such client: {cmd}"

    pid = product_key(cmd.username, client.cart.next_product_id)
    product = shop.create_product(pid, cmd.name, cmd.amount)
    if product is None:
        return f"Error, unable to create product: {cmd}"

    shop.add_product_to_cart(client.username, client, product)
    return str(product)


@router.get("/cart/{cid}")
def get_products(request: Request, cid: str) -> str:
    shop = _shop(request)
    client = shop.get_client(cid)
    if client is None:
        return f"Error, no such client: {cid}"

    found = []
    for pid in client.cart.product_keys(cid):
        product = shop.get_product(pid)
        if product is not None:
            found.append(product)
    return bracketed(found)


@router.delete("/cart")
def remove_product(request: Request, cmd: ProductDeleteCommand) -> str:
    shop = _shop(request)
    client = shop.get_client(cmd.username)
    if client is None:
        return f"Error, no such client: {cmd}"

    product = shop.get_product(cmd.id)
    # only products in this client's own cart namespace
    if product is None or not cmd.id.startswith(product_key(cmd.username, "")):
        return f"Error, unable to find product: {cmd}"

    shop.remove_product_from_cart(cmd.username, client, product)
    shop.destroy_product(cmd.id)
    return cmd.id


# ---------------- clients ----------------

@router.post("/")
def add_client(request: Request, cmd: ClientSaveCommand) -> str:
    if cmd.username is None:
        cmd.username = _state(request).next_client_username()

    client = _shop(request).add_client(cmd.username, cmd.name)
    if client is None:
        return f"Error, unable to create client: {cmd}"

    logger.debug("Client %s added", client.username)
    return str(client)


@router.get("/{cid}")
def get_client(request: Request, cid: str) -> str:
    client = _shop(request).get_client(cid)
    if client is None:
        return f"Error, no such client: {cid}"
    return str(client)


@router.delete("/{cid}")
def remove_client(request: Request, cid: str) -> str:
    shop = _shop(request)
    client = shop.get_client(cid)
    if client is None:
        return cid

    for pid in client.cart.product_keys(cid):
        shop.destroy_product(pid)
    shop.destroy_client(cid)

    logger.debug("Client %s removed", cid)
    return cid


def create_app(state: Optional[AppState] = None, static_data_path: Optional[str] = None) -> FastAPI:
    app = FastAPI(title="Shopping Cart Benchmark")
    app.state.cart = state or AppState()
    prices_path = static_data_path or settings.static_data_path

    @app.on_event("startup")
    def _startup() -> None:
        app.state.cart.prices.load_if_present(prices_path)

    app.include_router(router)
    return app


app = create_app()
