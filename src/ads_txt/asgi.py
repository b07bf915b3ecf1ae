"""
FastAPI + Uvicorn ASGI application — the parser as an HTTP service.

The service never fetches ads.txt files itself: clients POST the file
contents and get the parsed report back.

  POST /parse?mode=strict|lenient   text/plain body → JSON report
  GET  /health                      liveness check
  GET  /info                        application metadata

Status codes for POST /parse:
  200 — lenient report (valid or not), or a strict parse that succeeded
  400 — body could not be decoded as text
  413 — body larger than api.max_body_bytes
  422 — strict parse rejected a line

200 carries the report; 400/413/422 carry {"error_code", "message"} plus
"line" when a line was rejected.

Entry point: uvicorn ads_txt.asgi:app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from railway import ErrorCode, FailureDescription

from ads_txt import __version__
from ads_txt.adapters.bytes_source import BytesAdsTxtSource
from ads_txt.config import AppSettings, ParseMode
from ads_txt.main import configure_structlog, parse_source
from ads_txt.report import failure_to_dict

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load settings once at startup; configuration errors abort startup."""
    try:
        settings = AppSettings()
    except Exception as e:
        log.error("asgi.startup_error", error=f"Configuration error: {e}")
        raise

    configure_structlog(settings.log_level)
    app.state.settings = settings
    log.info(
        "asgi.startup_complete",
        version=__version__,
        mode=settings.parse.mode,
        max_body_bytes=settings.api.max_body_bytes,
    )

    yield

    log.info("asgi.shutdown_complete")


app = FastAPI(
    title="ads-txt-parser",
    description="IAB ads.txt / app-ads.txt parser — records, variables and malformed-line report",
    version=__version__,
    lifespan=lifespan,
)


def _error_response(status_code: int, error: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=failure_to_dict(error))


def _body_too_large(size_bytes: int, limit: int) -> JSONResponse:
    log.warning("api.body_too_large", size_bytes=size_bytes, limit=limit)
    return _error_response(413, FailureDescription(ErrorCode.VALIDATION_ERROR, f"Body exceeds {limit} bytes"))


async def _read_body(request: Request, limit: int) -> bytes | JSONResponse:
    """
    Read the request body, giving up as soon as it passes `limit` bytes.

    A declared Content-Length over the limit is refused before any byte is
    read; chunked bodies are counted as they arrive.
    """
    declared = request.headers.get("content-length", "")
    if declared.isdigit() and int(declared) > limit:
        return _body_too_large(int(declared), limit)

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            return _body_too_large(len(body), limit)
    return bytes(body)


@app.post("/parse")
async def parse_endpoint(request: Request, mode: ParseMode | None = None) -> JSONResponse:
    """
    Parse the request body as an ads.txt file.

    Parsing runs in a worker thread.
    """
    settings: AppSettings = request.app.state.settings
    body = await _read_body(request, settings.api.max_body_bytes)
    if isinstance(body, JSONResponse):
        return body

    effective_mode: ParseMode = mode or settings.parse.mode
    source = BytesAdsTxtSource(body, encoding=settings.parse.encoding)
    result = await asyncio.to_thread(parse_source, source, effective_mode)

    if result.is_failure():
        error = result.error()
        status_code = 400 if isinstance(error, FailureDescription) else 422
        log.info("api.parse", mode=effective_mode, status=status_code, failure=str(error))
        return _error_response(status_code, error)

    report = result.value()
    log.info(
        "api.parse",
        mode=effective_mode,
        status=200,
        records=len(report.document.records),
        variables=len(report.document.variables),
        errors=len(report.errors),
    )
    return JSONResponse(status_code=200, content=report.to_dict())


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness check."""
    return {"status": "healthy"}


@app.get("/info")
async def info(request: Request) -> dict[str, Any]:
    settings: AppSettings = request.app.state.settings
    return {
        "name": "ads-txt-parser",
        "version": __version__,
        "default_mode": settings.parse.mode,
        "max_body_bytes": settings.api.max_body_bytes,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "ads_txt.asgi:app",
        host="0.0.0.0",
        port=8000,
        reload=False,
        log_level="info",
    )
