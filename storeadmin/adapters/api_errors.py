"""Typed failures raised by REST adapters and payload helpers to build them."""

from __future__ import annotations

from typing import Any, Optional


class ApiError(RuntimeError):
    """Base class for store API failures."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        code: Optional[str] = None,
        hint: Optional[str] = None,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.code = code
        self.hint = hint
        self.payload = payload
        self.context = context


class ApiClientError(ApiError):
    """HTTP 4xx from the store API."""

    def __init__(
        self,
        message: str,
        *,
        status: int,
        code: Optional[str] = None,
        hint: Optional[str] = None,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(
            message, status=status, code=code, hint=hint, payload=payload, context=context
        )


class ApiServerError(ApiError):
    """HTTP 5xx from the store API."""

    def __init__(
        self,
        message: str,
        *,
        status: int,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message, status=status, payload=payload, context=context)


class ApiTimeoutError(ApiError):
    """Transport level timeout or connectivity failure."""

    def __init__(self, message: str, *, context: Optional[str] = None) -> None:
        super().__init__(message, context=context)


def parse_error_payload(resp: Any) -> Any:
    """Best-effort extraction of error payload without raising.

    Next.js route handlers answer failures with plain text bodies such as
    ``"Name is required"``, so non-JSON text is returned as a trimmed snippet.
    """
    try:
        return resp.json()
    except Exception:
        snippet = (getattr(resp, "text", "") or "").strip()
        if not snippet:
            return None
        return snippet[:400]


def build_error_message(ctx: str, status: int, payload: Any) -> str:
    detail = first_string(payload)
    if detail:
        return f"{ctx}: {detail} (HTTP {status})"
    return f"{ctx}: HTTP {status}"


def extract_error_code(payload: Any) -> Optional[str]:
    if not isinstance(payload, dict):
        return None
    for key in ("code", "error_code"):
        value = payload.get(key)
        if value is not None:
            return str(value)
    return None


def extract_error_hint(payload: Any) -> Optional[str]:
    if isinstance(payload, dict):
        for key in ("hint", "details", "errors"):
            if key in payload:
                text = first_string(payload[key]) or _flatten(payload[key])
                if text:
                    return text
    return first_string(payload)


def first_string(payload: Any) -> Optional[str]:
    """Return the first human-readable message found in a nested payload."""
    if isinstance(payload, str):
        return payload.strip() or None
    if isinstance(payload, dict):
        for key in ("detail", "message", "error", "title"):
            candidate = first_string(payload.get(key))
            if candidate:
                return candidate
        return None
    if isinstance(payload, list):
        for item in payload:
            candidate = first_string(item)
            if candidate:
                return candidate
    return None


def _flatten(data: Any, *, limit: int = 200) -> Optional[str]:
    if isinstance(data, dict):
        pairs = [f"{key}={value}" for key, value in list(data.items())[:4] if value not in (None, "")]
        text = ", ".join(pairs)
    elif isinstance(data, list):
        text = "; ".join(str(item) for item in data[:3] if item not in (None, ""))
    elif data is None:
        return None
    else:
        text = str(data).strip()
    return text[:limit] or None
