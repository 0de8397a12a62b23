"""
JSON body parsing for routes that report their own error codes.

Routes read the body by hand instead of through a Pydantic model so
that a malformed body maps to ``invalid_json`` rather than a 422.
"""

from typing import Any

from starlette.requests import Request

from app.shared.errors.request_errors import InvalidJsonError


async def read_json_object(request: Request) -> dict[str, Any]:
    """Return the request body as a dict.

    Raises:
        InvalidJsonError: The body is not valid JSON or not an object.
    """
    try:
        payload = await request.json()
    except ValueError as exc:
        raise InvalidJsonError("body is not valid JSON") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("body is not a JSON object")
    return payload
