from __future__ import annotations

import io
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.concurrency import run_in_threadpool

from shopbench.constants import PARSER_MEDIA_TYPES
from shopbench.services.text_extractor import DocumentTextExtractor, TextExtractionError, TextExtractor

logger = logging.getLogger(__name__)


def _media_type(request: Request) -> str:
    return request.headers.get("content-type", "").split(";")[0].strip().lower()


def create_app(extractor: Optional[TextExtractor] = None) -> FastAPI:
    app = FastAPI(title="Text Parser Benchmark")
    app.state.extractor = extractor or DocumentTextExtractor()

    @app.exception_handler(TextExtractionError)
    async def _extraction_failed(request: Request, exc: TextExtractionError) -> PlainTextResponse:
        return PlainTextResponse(str(exc), status_code=422)

    @app.post("/parse/text", response_class=PlainTextResponse)
    async def extract_text(request: Request):
        media_type = _media_type(request)
        if media_type not in PARSER_MEDIA_TYPES:
            return PlainTextResponse(f"Unsupported media type: {media_type or '-'}", status_code=415)

        body = await request.body()
        return await run_in_threadpool(app.state.extractor.get_text, io.BytesIO(body))

    # warm-up endpoint for measurements that don't send a payload
    @app.get("/parse/", response_class=PlainTextResponse)
    def hello() -> str:
        return "test"

    return app


app = create_app()
