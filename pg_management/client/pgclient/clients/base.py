# pg_management/client/pgclient/clients/base.py
from __future__ import annotations

import json
import logging
import time
import uuid
from typing import Any, Callable, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from ..config import settings
from ..context import CurrentContext, get_request_id
from ..errors import ApiError, ApiNotFound, EnvelopeShapeError, extract_error_message
from ..schemas import ApiEnvelope, PaginatedData, PaymentPage, PaymentRecord

log = logging.getLogger("pgclient.http")

M = TypeVar("M", bound=BaseModel)

# ("TenantPayments", "LIST"), ("Tenant", 42), ...
CacheTag = tuple[str, Union[int, str]]
InvalidateHook = Callable[[list[CacheTag]], None]


def _json_log(payload: dict) -> None:
    # One JSON line per backend call.
    try:
        log.info(json.dumps(payload, default=str))
    except (TypeError, ValueError):
        log.info(str(payload))


def _decode_body(r: httpx.Response) -> Any:
    text = r.text
    if not text:
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return {"rawText": text}


class PgApiClient:
    """
    Thin wrapper over httpx.Client for the PG backend.

    Every response must be the {success, statusCode, message, data, ...} envelope;
    anything else raises EnvelopeShapeError instead of being probed for nested data.
    """

    def __init__(
        self,
        ctx: CurrentContext,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
        on_invalidate: Optional[InvalidateHook] = None,
    ) -> None:
        self.base = (base_url or settings.api_base_url).rstrip("/")
        self.ctx = ctx
        self.on_invalidate = on_invalidate
        self._http = httpx.Client(
            base_url=self.base,
            timeout=timeout if timeout is not None else settings.api_timeout_seconds,
            transport=transport,
        )

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "PgApiClient":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _headers(self, extra: Optional[dict[str, str]] = None) -> dict[str, str]:
        h = self.ctx.headers()
        h["X-Request-ID"] = get_request_id() or str(uuid.uuid4())
        if extra:
            h.update(extra)
        return h

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any]] = None,
        body: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> ApiEnvelope:
        clean_params = {k: v for k, v in (params or {}).items() if v is not None}
        hdrs = self._headers(headers)

        t0 = time.time()
        status_code = 0
        try:
            r = self._http.request(method, path, params=clean_params or None, json=body, headers=hdrs)
            status_code = r.status_code
        except httpx.HTTPError as e:
            raise ApiError(f"Backend unreachable: {e}", status_code=0, path=path) from e
        finally:
            _json_log(
                {
                    "event": "http_request",
                    "request_id": hdrs.get("X-Request-ID"),
                    "method": method,
                    "path": path,
                    "query": clean_params,
                    "status_code": status_code,
                    "latency_ms": int((time.time() - t0) * 1000),
                    "pg_location_id": self.ctx.pg_location_id,
                }
            )

        payload = _decode_body(r)

        if r.status_code >= 400:
            msg = extract_error_message(payload, default=f"HTTP {r.status_code}")
            code = None
            if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
                code = payload["error"].get("code")
            cls = ApiNotFound if r.status_code == 404 else ApiError
            raise cls(msg, status_code=r.status_code, code=code, path=path)

        try:
            env = ApiEnvelope.model_validate(payload)
        except ValidationError as e:
            raise EnvelopeShapeError(
                f"Unexpected response shape from {method} {path}",
                status_code=r.status_code,
                path=path,
            ) from e

        if not env.success:
            raise ApiError(
                extract_error_message(payload),
                status_code=env.status_code,
                code=env.error.code if env.error else None,
                path=path,
            )
        return env

    def fetch(self, method: str, path: str, model: Type[M], **kw: Any) -> M:
        env = self.request(method, path, **kw)
        try:
            return model.model_validate(env.data)
        except ValidationError as e:
            raise EnvelopeShapeError(
                f"{method} {path}: data does not match {model.__name__}",
                status_code=env.status_code,
                path=path,
            ) from e

    def fetch_page(self, path: str, *, params: Optional[dict[str, Any]] = None) -> PaymentPage:
        """
        List endpoints return either {data: [...], pagination: {...}} (paged)
        or a bare list (per-tenant lookups). Nothing else is accepted.
        """
        env = self.request("GET", path, params=params)
        try:
            if isinstance(env.data, list):
                paged = PaginatedData(data=env.data)
            else:
                paged = PaginatedData.model_validate(env.data)
            items = [PaymentRecord.model_validate(x) for x in paged.data]
        except ValidationError as e:
            raise EnvelopeShapeError(
                f"GET {path}: data is not a payment list",
                status_code=env.status_code,
                path=path,
            ) from e
        return PaymentPage(items=items, pagination=paged.pagination)

    def invalidate(self, tags: list[CacheTag]) -> None:
        if not tags:
            return
        log.debug("invalidate %s", tags)
        if self.on_invalidate is not None:
            self.on_invalidate(list(tags))
