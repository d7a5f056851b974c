import io

import pytest
from fastapi.testclient import TestClient
from odf.opendocument import OpenDocumentText
from odf.text import H, P
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from shopbench.cart.state import AppState
from shopbench.services.shop import ShopService
from shopbench.store.memory import InMemoryStore
from shopbench.web.main import create_app as create_cart_app
from shopbench.web.parser import create_app as create_parser_app


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def shop(store: InMemoryStore) -> ShopService:
    return ShopService(store)


@pytest.fixture
def cart_state() -> AppState:
    return AppState()


@pytest.fixture
def test_client(cart_state: AppState, tmp_path):
    """Cart service with a fresh state and no static price file."""
    app = create_cart_app(cart_state, static_data_path=str(tmp_path / "missing-static-data"))
    with TestClient(app) as client:
        yield client


@pytest.fixture
def parser_client():
    with TestClient(create_parser_app()) as client:
        yield client


@pytest.fixture
def sample_pdf() -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.setFont("Helvetica", 12)
    c.drawString(72, 750, "Hello benchmark")
    c.showPage()
    c.drawString(72, 750, "Second page")
    c.save()
    return buf.getvalue()


@pytest.fixture
def sample_odt() -> bytes:
    doc = OpenDocumentText()
    doc.text.addElement(H(outlinelevel=1, text="Shopping list"))
    doc.text.addElement(P(text="Bananas and apples"))
    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()
