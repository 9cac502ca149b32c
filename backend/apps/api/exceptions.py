from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from django.utils.translation import gettext_lazy as _
from rest_framework import status
from rest_framework.exceptions import (
    MethodNotAllowed,
    NotFound,
    ParseError,
    UnsupportedMediaType,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from apps.api.utils import error_response
from apps.common import get_logger
from apps.common.repository import StoreError

logger = get_logger(__name__).bind(component="api", layer="exception")

STATUS_CODE_DEFAULTS: Dict[int, Tuple[str, str]] = {
    status.HTTP_400_BAD_REQUEST: ("VALIDATION_ERROR", _("Validation failed")),
    status.HTTP_404_NOT_FOUND: ("NOT_FOUND", _("Resource not found")),
    status.HTTP_405_METHOD_NOT_ALLOWED: ("METHOD_NOT_ALLOWED", _("Method not allowed")),
    status.HTTP_415_UNSUPPORTED_MEDIA_TYPE: (
        "UNSUPPORTED_MEDIA_TYPE",
        _("Unsupported media type"),
    ),
    status.HTTP_500_INTERNAL_SERVER_ERROR: (
        "SERVER_ERROR",
        _("Something went wrong"),
    ),
    status.HTTP_503_SERVICE_UNAVAILABLE: (
        "SERVICE_UNAVAILABLE",
        _("Service temporarily unavailable"),
    ),
}

STORAGE_ERROR_MESSAGE = "Storage unavailable"

# Headers from DRF's own responses that remain meaningful on the rewritten body.
_FORWARDED_HEADERS = ("Allow", "Retry-After")


class ApplicationError(Exception):
    """
    Domain-level application error meant to be raised from services or views.

    Args:
        code: Machine readable error code, mapped to an HTTP status.
        message: Human readable explanation returned to the client.
        status_code: Optional explicit HTTP status. If omitted, code mapping is used.
    """

    def __init__(self, code: str, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code

    def to_response(self) -> Response:
        return error_response(self.code, self.message, http_status=self.status_code)


def global_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """
    Central exception handler for DRF views returning ``{"error": message}`` bodies.
    """

    bound_logger = _bind_logger(context)

    if isinstance(exc, ApplicationError):
        bound_logger.info(
            "Handled application error",
            code=exc.code,
            status=exc.status_code,
        )
        return exc.to_response()

    if isinstance(exc, StoreError):
        bound_logger.error(
            "Storage failure",
            error=str(exc),
            exception=exc.__class__.__name__,
        )
        return error_response(
            "SERVER_ERROR",
            STORAGE_ERROR_MESSAGE,
            http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, DjangoValidationError):
        exc = ValidationError(_normalize_django_validation_error(exc))

    response = drf_exception_handler(exc, context)
    if response is not None:
        return _from_drf_exception(exc, response, bound_logger)

    bound_logger.exception("Unhandled exception bubbled to global handler")
    return error_response(
        "SERVER_ERROR",
        "Something went wrong",
        http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _bind_logger(context: Dict[str, Any]):
    log = logger
    view = context.get("view")
    request = context.get("request")
    if view:
        view_name = getattr(view, "__class__", type(view)).__name__
        log = log.bind(view=view_name)
    if request is not None:
        log = log.bind(
            method=getattr(request, "method", None),
            path=getattr(request, "path", None),
        )
    return log


def _from_drf_exception(
    exc: Exception, response: Response, bound_logger
) -> Response:
    status_code = response.status_code
    code, message = _normalize_payload(exc, response.data, status_code)
    headers = {
        name: response[name] for name in _FORWARDED_HEADERS if response.has_header(name)
    }

    if status_code >= 500:
        bound_logger.error(
            "Converted server error",
            code=code,
            status=status_code,
        )
    else:
        bound_logger.info("Converted API exception", code=code, status=status_code)

    return error_response(
        code,
        message,
        http_status=status_code,
        headers=headers or None,
    )


def _normalize_django_validation_error(exc: DjangoValidationError) -> Any:
    if hasattr(exc, "message_dict"):
        return exc.message_dict
    if hasattr(exc, "messages"):
        return list(exc.messages)
    return {"detail": getattr(exc, "message", "Validation failed")}


def _normalize_payload(exc: Exception, payload: Any, status_code: int) -> Tuple[str, str]:
    if isinstance(exc, ValidationError):
        return "VALIDATION_ERROR", _validation_message(payload)
    if isinstance(exc, ParseError):
        return "VALIDATION_ERROR", "Malformed request"
    if isinstance(exc, (NotFound, Http404)):
        return "NOT_FOUND", _extract_message(payload, "Resource not found", status_code)
    if isinstance(exc, MethodNotAllowed):
        return (
            "METHOD_NOT_ALLOWED",
            _extract_message(payload, "Method not allowed", status_code),
        )
    if isinstance(exc, UnsupportedMediaType):
        return (
            "UNSUPPORTED_MEDIA_TYPE",
            _extract_message(payload, "Unsupported media type", status_code),
        )

    code, default_message = STATUS_CODE_DEFAULTS.get(
        status_code,
        (
            "SERVER_ERROR" if status_code >= 500 else "UNKNOWN_ERROR",
            "Something went wrong" if status_code >= 500 else "Request failed",
        ),
    )
    return code, _extract_message(payload, str(default_message), status_code)


def _validation_message(payload: Any) -> str:
    """Collapse DRF's validation payload into one ``field: reason`` sentence."""
    if isinstance(payload, dict):
        for field, errors in payload.items():
            reason = _first_text(errors)
            if reason is None:
                continue
            if field in ("non_field_errors", "detail"):
                return reason
            return f"{field}: {reason}"
    reason = _first_text(payload)
    return reason or "Validation failed"


def _first_text(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        for item in value:
            text = _first_text(item)
            if text:
                return text
    if isinstance(value, dict):
        for item in value.values():
            text = _first_text(item)
            if text:
                return text
    return None


def _extract_message(payload: Any, fallback: str, status_code: int) -> str:
    if status_code >= 500:
        return str(STATUS_CODE_DEFAULTS[status.HTTP_500_INTERNAL_SERVER_ERROR][1])
    if isinstance(payload, str):
        return payload
    if isinstance(payload, dict):
        detail = payload.get("detail")
        if isinstance(detail, str):
            return detail
    if isinstance(payload, list) and payload and isinstance(payload[0], str):
        return payload[0]
    return fallback


__all__ = ["ApplicationError", "global_exception_handler", "STORAGE_ERROR_MESSAGE"]
