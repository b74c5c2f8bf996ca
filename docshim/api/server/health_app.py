"""ASGI application exposing a storage health check."""

import asyncio
import json
from typing import Any, Awaitable, Callable

from ..storage.errors import ConnectivityError
from ..storage.Storage import Storage

ASGIApp = Callable[[dict[str, Any], Callable[..., Awaitable[Any]], Callable[..., Awaitable[Any]]], Awaitable[None]]


def health_app(storage: Storage) -> ASGIApp:
    """Build an ASGI app answering ``GET /health`` from ``storage.health_check()``.

    Responds 200 ``{"ok": true}`` when the ping succeeds, 503 with the error
    when the database is unreachable, and 404 for any other request.
    """

    async def app(scope, receive, send) -> None:
        if scope["type"] == "lifespan":
            while True:
                message = await receive()
                if message["type"] == "lifespan.startup":
                    await send({"type": "lifespan.startup.complete"})
                elif message["type"] == "lifespan.shutdown":
                    await send({"type": "lifespan.shutdown.complete"})
                    return
        if scope["type"] != "http":
            return

        if scope["method"] != "GET" or scope["path"] != "/health":
            await _send_json(send, 404, {"ok": False, "error": "not found"})
            return
        try:
            await asyncio.to_thread(storage.health_check)
        except ConnectivityError as e:
            await _send_json(send, 503, {"ok": False, "error": str(e)})
            return
        await _send_json(send, 200, {"ok": True})

    return app


async def _send_json(send, status: int, payload: dict[str, Any]) -> None:
    body = json.dumps(payload).encode("utf-8")
    await send(
        {
            "type": "http.response.start",
            "status": status,
            "headers": [(b"content-type", b"application/json"), (b"content-length", str(len(body)).encode())],
        }
    )
    await send({"type": "http.response.body", "body": body})
