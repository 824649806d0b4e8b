from __future__ import annotations

import dataclasses
import logging
from typing import Any, Mapping
from urllib.parse import urlencode

import httpx

from .config_types import ClientConfig, normalize_base_url
from .debug import DebugRecord, DebugSink
from .endpoints import API_PREFIX, SUPPORTED_METHODS, is_supported, normalize_path
from .errors import (
    AdvocacyClientError,
    MalformedResponseError,
    TransportError,
    UnknownEndpointError,
    UnsupportedVerbError,
)

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def coerce_params(params: Mapping[str, Any] | None) -> dict[str, str]:
    out: dict[str, str] = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        out[str(key)] = str(value)
    return out


def _field_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def coerce_fields(body: Mapping[str, Any]) -> dict[str, str | list[str]]:
    """Render body values the same way for every verb; ``None`` is dropped."""
    out: dict[str, str | list[str]] = {}
    for key, value in body.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            out[str(key)] = [_field_value(v) for v in value if v is not None]
        else:
            out[str(key)] = _field_value(value)
    return out


def _is_empty(data: Any) -> bool:
    if data is None or data == "":
        return True
    return isinstance(data, (dict, list)) and not data


class Transport:
    """Single gateway for every call made by the client.

    ``execute`` validates the method and path against the endpoint table,
    builds the URL, encodes the body, performs the request and decodes the
    JSON response. The access token is passed in per call and is never
    read from shared state.
    """

    def __init__(
        self,
        cfg: ClientConfig,
        *,
        transport: httpx.BaseTransport | None = None,
        debug_sink: DebugSink | None = None,
    ):
        self._cfg = cfg
        self._base_url = normalize_base_url(cfg.base_url)
        self._api_key = cfg.api_key or None
        self.debug_sink = debug_sink
        self._client = httpx.Client(
            timeout=cfg.timeout_s,
            headers={"User-Agent": cfg.user_agent, "Accept": "application/json"},
            follow_redirects=True,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def build_url(self, path: str, params: Mapping[str, str] | None = None) -> str:
        url = f"{self._base_url}/{API_PREFIX}/{normalize_path(path)}"
        query: list[tuple[str, str]] = []
        if self._api_key:
            query.append(("apikey", self._api_key))
        query.extend((params or {}).items())
        if query:
            url = f"{url}?{urlencode(query)}"
        return url

    def execute(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
        token: str | None = None,
    ) -> Any:
        verb = str(method or "").upper()
        if verb not in SUPPORTED_METHODS:
            raise UnsupportedVerbError(str(method))
        if not is_supported(verb, path):
            raise UnknownEndpointError(verb, path)

        query = coerce_params(params)
        url = self.build_url(path, query)
        headers: dict[str, str] = {}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        fields = coerce_fields(body) if body is not None and verb in ("POST", "PUT") else None
        kwargs: dict[str, Any] = {}
        if verb == "PUT" and fields is not None:
            # PUT is form-encoded here, POST fields go to httpx as-is.
            kwargs["content"] = urlencode(fields, doseq=True)
            headers["Content-Type"] = FORM_CONTENT_TYPE
        elif verb == "POST" and fields is not None:
            kwargs["data"] = fields

        record = DebugRecord(method=verb, path=path, access_token=token, params=query, body=fields)
        try:
            data = self._send(verb, path, url, headers, kwargs)
        except AdvocacyClientError as e:
            self._capture(dataclasses.replace(record, error=e))
            raise
        self._capture(dataclasses.replace(record, response=data))
        return data

    def _capture(self, record: DebugRecord) -> None:
        if self.debug_sink is None:
            return
        try:
            self.debug_sink(record)
        except Exception:
            logger.warning("debug sink failed for %s %s", record.method, record.path, exc_info=True)

    def _send(self, verb: str, path: str, url: str, headers: dict[str, str], kwargs: dict[str, Any]) -> Any:
        try:
            r = self._client.request(verb, url, headers=headers, **kwargs)
        except httpx.RequestError as e:
            raise TransportError(f"{verb} {path} failed: {e}") from e

        logger.debug("%s %s -> %s", verb, path, r.status_code)

        text = r.text
        try:
            data = r.json()
        except ValueError as e:
            raise MalformedResponseError(
                r.status_code,
                f"{verb} {path} did not return JSON (status {r.status_code})",
                text[:1000] or None,
            ) from e

        if _is_empty(data):
            raise MalformedResponseError(
                r.status_code,
                f"{verb} {path} returned an empty response (status {r.status_code})",
                text[:1000] or None,
            )
        return data
