from collections.abc import Mapping
from typing import Optional

from rest_framework import status
from rest_framework.response import Response

DEFAULT_ERROR_STATUS = status.HTTP_400_BAD_REQUEST

ERROR_STATUS_MAP = {
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "METHOD_NOT_ALLOWED": status.HTTP_405_METHOD_NOT_ALLOWED,
    "UNSUPPORTED_MEDIA_TYPE": status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
    "SERVER_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "SERVICE_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def status_for_code(code: str) -> int:
    return ERROR_STATUS_MAP.get(code.strip().upper(), DEFAULT_ERROR_STATUS)


def error_response(
    code: str,
    message: str,
    http_status: Optional[int] = None,
    *,
    headers: Optional[Mapping[str, str]] = None,
) -> Response:
    """
    Return the API's error payload: ``{"error": "<message>"}``.

    Args:
        code: Machine-readable error identifier, used to pick the HTTP status.
        message: Short human-readable explanation sent to the client.
        http_status: Explicit HTTP status code overriding the code mapping.
        headers: Optional response headers to include alongside the payload.
    """

    if not isinstance(code, str):
        raise TypeError("error_response requires code to be a string")
    if not isinstance(message, str):
        raise TypeError("error_response requires message to be a string")

    code = code.strip()
    message = message.strip()

    if not code:
        raise ValueError("error_response requires a non-empty code")
    if not message:
        raise ValueError("error_response requires a non-empty message")

    status_code = int(http_status) if http_status is not None else status_for_code(code)

    if headers is not None and not isinstance(headers, Mapping):
        raise TypeError("error_response headers must be a mapping if provided")
    if not 100 <= status_code <= 599:
        raise ValueError("error_response status must be a valid HTTP status code")

    headers_dict = (
        {str(key): str(value) for key, value in headers.items()} if headers else None
    )

    return Response({"error": message}, status=status_code, headers=headers_dict)


def parse_path_id(value) -> Optional[int]:
    """Return ``value`` as an int, or ``None`` when the path segment is not an integer."""
    try:
        return int(str(value).strip())
    except ValueError:
        return None
