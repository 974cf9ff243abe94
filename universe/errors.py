from __future__ import annotations

import json
from typing import Any, Dict, List, Tuple

INVALID_REQUEST_BODY = json.dumps(
    {"error": "Invalid input.", "kind": "invalid_request"}
).encode("utf-8")


class ValidationNormalizeMiddleware:
    """Turn FastAPI 422 request-validation responses into a short 400 error body."""

    def __init__(self, app: Any) -> None:
        self.app = app

    async def __call__(self, scope: Dict[str, Any], receive: Any, send: Any) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        rewriting = False

        async def send_wrapper(message: Dict[str, Any]) -> None:
            nonlocal rewriting
            if message["type"] == "http.response.start" and message.get("status") == 422:
                rewriting = True
                headers: List[Tuple[bytes, bytes]] = [
                    (key, value)
                    for key, value in message.get("headers", [])
                    if key.lower() not in {b"content-length", b"content-type"}
                ]
                headers.append((b"content-type", b"application/json"))
                headers.append((b"content-length", str(len(INVALID_REQUEST_BODY)).encode("latin-1")))
                await send({"type": "http.response.start", "status": 400, "headers": headers})
                return

            if rewriting and message["type"] == "http.response.body":
                if message.get("more_body"):
                    return
                await send({"type": "http.response.body", "body": INVALID_REQUEST_BODY})
                return

            await send(message)

        await self.app(scope, receive, send_wrapper)
