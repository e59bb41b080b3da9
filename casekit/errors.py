from __future__ import annotations

import json
import logging
from typing import Any, Dict

from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INVALID_INPUT = "Invalid input."


def error_response(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def _error_body(message: str) -> bytes:
    return json.dumps({"error": message}).encode("utf-8")


class ValidationNormalizeMiddleware:
    """Rewrite FastAPI 422 validation responses as 400 ``{"error": ...}``.

    Tools report their own failures as ``{"error": "<short message>"}`` with a
    400 status; this keeps request-validation failures in the same shape.
    """

    def __init__(self, app: Any, message: str = INVALID_INPUT) -> None:
        self.app = app
        self.message = message

    async def __call__(self, scope: Dict[str, Any], receive: Any, send: Any) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        rewriting = False

        async def send_wrapper(message: Dict[str, Any]) -> None:
            nonlocal rewriting
            if message["type"] == "http.response.start" and message.get("status") == 422:
                rewriting = True
                return
            if not rewriting:
                await send(message)
                return
            if message["type"] != "http.response.body" or message.get("more_body"):
                return

            logger.debug("Normalized 422 on %s", scope.get("path"))
            payload = _error_body(self.message)
            await send(
                {
                    "type": "http.response.start",
                    "status": 400,
                    "headers": [
                        (b"content-type", b"application/json"),
                        (b"content-length", str(len(payload)).encode("ascii")),
                    ],
                }
            )
            await send({"type": "http.response.body", "body": payload})

        await self.app(scope, receive, send_wrapper)
