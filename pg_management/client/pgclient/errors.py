# pg_management/client/pgclient/errors.py
from __future__ import annotations

import json
from typing import Any, Optional

DEFAULT_ERROR_MESSAGE = "An error occurred"


class ApiError(RuntimeError):
    """Backend rejected the call (or it never reached the backend: status_code=0)."""

    def __init__(self, message: str, *, status_code: int = 0, code: Optional[str] = None, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = int(status_code)
        self.code = code
        self.path = path


class ApiNotFound(ApiError):
    pass


class EnvelopeShapeError(ApiError):
    """Response body is not the {success, statusCode, ...} envelope."""


class PaymentValidationError(ValueError):
    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


def _as_str(v: Any) -> Optional[str]:
    if isinstance(v, str):
        return v if v.strip() else None
    if isinstance(v, list):
        # class-validator style: ["amount_paid must be a number", ...]
        parts = [p.strip() for p in v if isinstance(p, str) and p.strip()]
        return "; ".join(parts) if parts else None
    if v is None or isinstance(v, dict):
        return None
    return str(v)


def extract_error_message(value: Any, default: str = DEFAULT_ERROR_MESSAGE) -> str:
    """
    Best human-readable message from whatever the backend sent back.

    Order: message, error_description, detail, title; then data.{message,error,detail};
    then the nested `error` object. Strings that look like JSON are parsed first.
    """
    found = _extract(value, depth=0)
    return found if found else default


def _extract(value: Any, depth: int) -> Optional[str]:
    if value is None or depth > 4:
        return None

    if isinstance(value, str):
        s = value.strip()
        if s.startswith("{") or s.startswith("["):
            try:
                parsed = json.loads(s)
            except json.JSONDecodeError:
                return s or None
            if isinstance(parsed, dict):
                return _extract(parsed, depth + 1)
        return s or None

    if isinstance(value, BaseException):
        return _as_str(getattr(value, "message", None)) or _as_str(str(value))

    if not isinstance(value, dict):
        return _as_str(value)

    for key in ("message", "error_description", "detail", "title"):
        direct = _as_str(value.get(key))
        if direct:
            return direct

    data = value.get("data")
    if isinstance(data, dict):
        for key in ("message", "error", "detail"):
            from_data = _as_str(data.get(key))
            if from_data:
                return from_data

    return _extract(value.get("error"), depth + 1)
