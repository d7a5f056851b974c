from __future__ import annotations

import io
import logging
import zipfile
from xml.sax import SAXException
from typing import BinaryIO, List, Protocol

from odf import teletype
from odf.namespaces import TEXTNS
from odf.opendocument import load as load_odf
from pypdf import PdfReader
from pypdf.errors import PyPdfError

from shopbench.constants import ODT_MEDIA_TYPE

logger = logging.getLogger(__name__)

PDF_MAGIC = b"%PDF"
ZIP_MAGIC = b"PK\x03\x04"

_ODF_BLOCKS = {(TEXTNS, "p"), (TEXTNS, "h")}


class TextExtractionError(ValueError):
    pass


class TextExtractor(Protocol):
    def get_text(self, stream: BinaryIO) -> str: ...


def _pdf_text(stream: BinaryIO) -> str:
    reader = PdfReader(stream)
    pages = [page.extract_text() or "" for page in reader.pages]
    return "\n".join(pages)


def _odf_blocks(node, out: List[str]) -> None:
    for child in node.childNodes:
        if getattr(child, "qname", None) in _ODF_BLOCKS:
            out.append(teletype.extractText(child))
        elif child.nodeType == child.ELEMENT_NODE:
            _odf_blocks(child, out)


def _odt_text(stream: BinaryIO) -> str:
    doc = load_odf(stream)
    if doc.mimetype != ODT_MEDIA_TYPE:
        raise TextExtractionError(f"not an OpenDocument text: {doc.mimetype}")
    lines: List[str] = []
    _odf_blocks(doc.text, lines)
    return "\n".join(lines)


class DocumentTextExtractor:
    """
    Plain text out of PDF (pypdf) and ODT (odfpy) payloads. The format is
    picked from the leading bytes, not from the declared content type.
    """

    def get_text(self, stream: BinaryIO) -> str:
        data = stream.read()
        head = data[:4]
        buf = io.BytesIO(data)
        try:
            if head == PDF_MAGIC:
                return _pdf_text(buf)
            if head == ZIP_MAGIC:
                return _odt_text(buf)
        except TextExtractionError:
            raise
        except (PyPdfError, zipfile.BadZipFile, SAXException, KeyError, ValueError, EOFError) as e:
            logger.warning("Text extraction failed: %s", e)
            raise TextExtractionError(f"unable to extract text: {e}") from e
        raise TextExtractionError("unsupported document format")
