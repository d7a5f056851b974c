"""
Component tests for the text extraction service

The PDF fixture is rendered with reportlab and the ODT fixture with odfpy,
then both go through the real DocumentTextExtractor.
"""
import io
import zipfile

import pytest
from fastapi.testclient import TestClient

from shopbench.constants import ODT_MEDIA_TYPE, PDF_MEDIA_TYPE
from shopbench.services.text_extractor import DocumentTextExtractor, TextExtractionError
from shopbench.web.parser import create_app


class TestExtractText:

    def test_pdf(self, parser_client: TestClient, sample_pdf: bytes):
        response = parser_client.post("/parse/text", content=sample_pdf, headers={"Content-Type": PDF_MEDIA_TYPE})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "Hello benchmark" in response.text
        assert "Second page" in response.text
        assert response.text.index("Hello benchmark") < response.text.index("Second page")

    def test_odt(self, parser_client: TestClient, sample_odt: bytes):
        response = parser_client.post("/parse/text", content=sample_odt, headers={"Content-Type": ODT_MEDIA_TYPE})

        assert response.status_code == 200
        assert response.text == "Shopping list\nBananas and apples"

    def test_unsupported_media_type(self, parser_client: TestClient):
        response = parser_client.post("/parse/text", content=b"hello", headers={"Content-Type": "text/plain"})

        assert response.status_code == 415
        assert response.text == "Unsupported media type: text/plain"

    def test_unknown_payload(self, parser_client: TestClient):
        response = parser_client.post(
            "/parse/text", content=b"not a document", headers={"Content-Type": PDF_MEDIA_TYPE}
        )

        assert response.status_code == 422
        assert response.text == "unsupported document format"

    def test_broken_zip(self, parser_client: TestClient):
        response = parser_client.post(
            "/parse/text", content=b"PK\x03\x04broken", headers={"Content-Type": ODT_MEDIA_TYPE}
        )

        assert response.status_code == 422
        assert response.text.startswith("unable to extract text")

    def test_malformed_odt(self, parser_client: TestClient, sample_odt: bytes):
        """Well-formed container, broken content.xml inside"""
        # Arrange
        buf = io.BytesIO()
        with zipfile.ZipFile(io.BytesIO(sample_odt)) as src, zipfile.ZipFile(buf, "w") as dst:
            for item in src.infolist():
                data = b"<not-closed" if item.filename == "content.xml" else src.read(item.filename)
                dst.writestr(item, data)

        # Act
        response = parser_client.post(
            "/parse/text", content=buf.getvalue(), headers={"Content-Type": ODT_MEDIA_TYPE}
        )

        # Assert
        assert response.status_code == 422
        assert response.text.startswith("unable to extract text")

    def test_injected_extractor(self):
        class Fixed:
            def get_text(self, stream):
                return "got %d bytes" % len(stream.read())

        with TestClient(create_app(Fixed())) as client:
            response = client.post("/parse/text", content=b"12345", headers={"Content-Type": PDF_MEDIA_TYPE})

        assert response.text == "got 5 bytes"


def test_warm_up_endpoint(parser_client: TestClient):
    response = parser_client.get("/parse/")

    assert response.status_code == 200
    assert response.text == "test"


class TestDocumentTextExtractor:

    def test_pdf_stream(self, sample_pdf: bytes):
        text = DocumentTextExtractor().get_text(io.BytesIO(sample_pdf))

        assert "Hello benchmark" in text

    def test_empty_stream(self):
        with pytest.raises(TextExtractionError, match="unsupported document format"):
            DocumentTextExtractor().get_text(io.BytesIO(b""))
