from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from fastapi import Request, status
from fastapi.responses import JSONResponse, Response
from starlette.middleware.base import BaseHTTPMiddleware

from ..core.config import get_settings

logger = logging.getLogger(__name__)


class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests whose declared body is larger than ``MAX_REQUEST_BYTES``.

    The check runs on ``Content-Length`` before the body is read, so an
    oversized entry snapshot never reaches JSON decoding or validation.
    Bodies sent without a length header are not bounded here.
    """

    async def dispatch(  # type: ignore[override]
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        limit = get_settings().max_request_bytes
        declared = request.headers.get("content-length")
        if declared is not None:
            try:
                size = int(declared)
            except ValueError:
                return JSONResponse(
                    {"detail": "invalid content-length"},
                    status_code=status.HTTP_400_BAD_REQUEST,
                )
            if size > limit:
                logger.warning(
                    "request body too large",
                    extra={"extra_fields": {"content_length": size, "limit": limit}},
                )
                return JSONResponse(
                    {"detail": f"request body exceeds {limit} bytes"},
                    status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                )
        return await call_next(request)
