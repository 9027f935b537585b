"""Translate adapter errors into user-facing UseCaseError instances."""

from __future__ import annotations

from typing import Optional

from storeadmin.adapters.api_errors import (
    ApiClientError,
    ApiError,
    ApiServerError,
    ApiTimeoutError,
    extract_error_hint,
)
from storeadmin.domain.ports import UseCaseError


def map_api_error(
    exc: Exception,
    *,
    default_code: str,
    default_message: Optional[str] = None,
) -> UseCaseError:
    """Map adapter exceptions to stable UseCaseError codes.

    Args:
        exc: Exception raised by an adapter or a use case.
        default_code: Code used when ``exc`` is not an ``ApiError``.
        default_message: Message used when ``exc`` carries no text.

    Returns:
        UseCaseError: ``exc`` itself when already mapped, else a new error with
        the original HTTP status (if any) in ``meta["status"]``.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, ApiTimeoutError):
        return UseCaseError("REQUEST_TIMEOUT", "Request timed out. Check connection.")
    if isinstance(exc, ApiClientError):
        status = exc.status or 0
        hint = exc.hint or extract_error_hint(getattr(exc, "payload", None))
        meta = {"status": status}
        if status == 409:
            return UseCaseError(
                "RESOURCE_IN_USE",
                _compose_error_message("Resource is still in use", hint),
                meta=meta,
            )
        if status in (400, 422):
            return UseCaseError(
                "INVALID_PARAMS", _compose_error_message("Invalid parameters", hint), meta=meta
            )
        if status in (401, 403):
            return UseCaseError("AUTH_FAILED", "Auth failed / API key invalid.", meta=meta)
        if status == 404:
            return UseCaseError("NOT_FOUND", _compose_error_message("Not found", hint), meta=meta)
        label = f"Request failed (HTTP {status})" if status else "Request failed"
        return UseCaseError("REQUEST_FAILED", _compose_error_message(label, hint), meta=meta)
    if isinstance(exc, ApiServerError):
        return UseCaseError("SERVER_ERROR", "Server error, try again.", meta={"status": exc.status})
    if isinstance(exc, ApiError):
        return UseCaseError("API_ERROR", str(exc))

    message = default_message or str(exc) or "Unexpected error."
    return UseCaseError(default_code, message)


def _compose_error_message(base: str, hint: Optional[str]) -> str:
    hint_text = (hint or "").strip()
    if hint_text:
        return f"{base}: {hint_text}"
    if base.endswith("."):
        return base
    return f"{base}."


__all__ = ["map_api_error"]
