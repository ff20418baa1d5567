"""
Request body parsing middleware.
"""

import json
import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)

MAX_BODY_SIZE = 100 * 1024


def is_json_content_type(content_type: str) -> bool:
    """Return True for application/json, ignoring parameters such as charset."""
    return content_type.split(";", 1)[0].strip().lower() == "application/json"


def _reject_constant(name):
    raise ValueError(f"{name} is not valid JSON")


def parse_json_body(body: bytes):
    """
    Parse a request body in strict mode.
    Only objects and arrays are accepted at the top level.
    """
    value = json.loads(body, parse_constant=_reject_constant)
    if not isinstance(value, (dict, list)):
        raise ValueError("JSON body must be an object or an array")
    return value


class JSONBodyMiddleware(BaseHTTPMiddleware):
    """
    Parse application/json request bodies for every route.
    The parsed value is stored on request.state.json_body. A malformed
    body is rejected with 400 and an oversized one with 413, before any
    route runs.
    """

    async def dispatch(self, request: Request, call_next):
        request.state.json_body = None

        if not is_json_content_type(request.headers.get("content-type", "")):
            return await call_next(request)

        content_length = request.headers.get("content-length", "")
        if content_length.isdigit() and int(content_length) > MAX_BODY_SIZE:
            return self._too_large(request)

        body = await request.body()
        if len(body) > MAX_BODY_SIZE:
            return self._too_large(request)

        if body:
            try:
                request.state.json_body = parse_json_body(body)
            except ValueError:
                logger.info("Rejected malformed JSON body on %s %s", request.method, request.url.path)
                return JSONResponse(status_code=400, content={"detail": "Malformed JSON body"})

        return await call_next(request)

    def _too_large(self, request: Request) -> JSONResponse:
        logger.info("Rejected oversized JSON body on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=413, content={"detail": "Request body too large"})
