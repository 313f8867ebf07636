# portfolio/routing.py
from __future__ import annotations

import logging
from typing import Callable

from fastapi import HTTPException, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio.responses import fail
from portfolio.store import UniqueConstraintViolation

logger = logging.getLogger("portfolio.api")


class EnvelopeRoute(APIRoute):
    """Route class that turns unexpected handler errors into the failure envelope.

    Expected outcomes (HTTPException, validation errors) pass through to the
    app-level handlers. A unique-index collision becomes a 400, anything else a
    500 ``"Failed to <summary>"`` with the traceback logged.
    """

    def get_route_handler(self) -> Callable:
        original = super().get_route_handler()
        action = (self.summary or self.name.replace("_", " ")).lower()

        async def handler(request: Request) -> Response:
            try:
                return await original(request)
            except (HTTPException, StarletteHTTPException, RequestValidationError):
                raise
            except UniqueConstraintViolation as exc:
                return fail(400, exc.message)
            except Exception:
                logger.exception(
                    "request_failed",
                    extra={"action": action, "method": request.method, "path": request.url.path},
                )
                return fail(500, f"Failed to {action}")

        return handler
