"""HTTP front end: POST a page URL, get its links back as JSON."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import ScraperConfig
from .errors import LinkScoutError, MethodError
from .pipeline import render_json, scrape_page

logger = logging.getLogger("linkscout")

BODY_METHODS = ("POST", "PUT", "PATCH")
ALL_METHODS = ("GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS")


async def _handle_error(request: Request, exc: Exception) -> PlainTextResponse:
    status_code = getattr(exc, "status_code", 500)
    logger.debug("%s %s failed with %s: %s", request.method, request.url.path, status_code, exc)
    return PlainTextResponse(f"{exc}\n", status_code=status_code)


async def _handle_http_error(request: Request, exc: StarletteHTTPException) -> Response:
    # 405s raised by the router for methods the route does not list.
    if exc.status_code == MethodError.status_code:
        return PlainTextResponse(
            f"{MethodError('Method not allowed')}\n",
            status_code=exc.status_code,
            headers=exc.headers,
        )
    return await http_exception_handler(request, exc)


def create_app(config: Optional[ScraperConfig] = None) -> FastAPI:
    app = FastAPI(title="linkscout")
    app.state.config = config or ScraperConfig()
    app.add_exception_handler(LinkScoutError, _handle_error)
    app.add_exception_handler(StarletteHTTPException, _handle_http_error)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.api_route("/parse", methods=list(ALL_METHODS))
    async def parse(request: Request) -> Response:
        """Extract the links of the page whose URL is the request body."""
        if request.method not in BODY_METHODS:
            raise MethodError("Method not allowed")
        body = await request.body()
        link = body.decode("utf-8", errors="replace")
        items = await run_in_threadpool(scrape_page, link, request.app.state.config)
        return Response(content=render_json(items), media_type="application/json")

    return app


app = create_app()
