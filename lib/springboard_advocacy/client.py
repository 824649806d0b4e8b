from __future__ import annotations

from typing import Any, Mapping

import httpx

from .config_types import ClientConfig, normalize_base_url
from .debug import DebugRecord, DebugSink, LastRecord
from .endpoints import segment
from .errors import ConfigurationError, MalformedResponseError
from .transport import Transport


class AdvocacyClient:
    def __init__(
        self,
        cfg: ClientConfig,
        *,
        transport: httpx.BaseTransport | None = None,
        debug_sink: DebugSink | None = None,
    ):
        if not normalize_base_url(cfg.base_url):
            raise ConfigurationError("base_url is required")
        self._token = cfg.access_token or None
        self._last = LastRecord()
        self._external_sink = debug_sink
        self._t = Transport(cfg, transport=transport)
        self.set_debug(cfg.debug)

    def __enter__(self) -> "AdvocacyClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._t.close()

    def _request(
            self,
            method: str,
            path: str,
            *,
            params: Mapping[str, Any] | None = None,
            body: Mapping[str, Any] | None = None,
    ) -> Any:
        return self._t.execute(method, path, params=params, body=body, token=self._token)

    # --- auth ---
    @property
    def token(self) -> str | None:
        return self._token

    def set_token(self, token: str | None) -> None:
        """Replace the bearer token used by subsequent calls; empty clears it."""
        self._token = token or None

    def get_token(self, client_id: str, client_secret: str) -> dict[str, Any]:
        """Exchange client credentials for an access token payload.

        The payload carries ``access_token``, ``token_type`` and ``expires_in``.
        The held token is not changed; see :meth:`authenticate`.
        """
        body = {
            "grant_type": "client_credentials",
            "client_id": client_id,
            "client_secret": client_secret,
        }
        data = self._request("POST", "oauth/access-token", body=body)
        if isinstance(data, dict):
            token = data.get("access_token")
            if isinstance(token, str) and token:
                return data
        raise MalformedResponseError(None, "oauth token exchange returned no access_token", None)

    def authenticate(self, client_id: str, client_secret: str) -> dict[str, Any]:
        data = self.get_token(client_id, client_secret)
        self.set_token(data["access_token"])
        return data

    # --- debug ---
    @property
    def debug(self) -> bool:
        return self._t.debug_sink is not None

    def set_debug(self, enabled: bool) -> None:
        if not enabled:
            self._t.debug_sink = None
            return
        if self._external_sink is None:
            self._t.debug_sink = self._last
            return

        def _both(record: DebugRecord) -> None:
            self._last(record)
            self._external_sink(record)

        self._t.debug_sink = _both

    def get_debug_info(self) -> DebugRecord | None:
        return self._last.record

    # --- legislators & districts ---
    def get_legislators(self, zip_code: str) -> Any:
        return self._request("GET", "targets/legislators", params={"zip": zip_code})

    def get_districts(self, zip_code: str) -> Any:
        return self._request("GET", "districts", params={"zip": zip_code})

    def get_districts_by_state(self, state: str) -> Any:
        return self._request("GET", "districts/state", params={"state": state})

    def get_committee_list(self) -> Any:
        return self._request("GET", "committees/list")

    # --- targets ---
    def search_targets(self, params: Mapping[str, Any]) -> Any:
        return self._request("GET", "targets/search", params=params)

    def get_custom_targets(self, params: Mapping[str, Any] | None = None) -> Any:
        return self._request("GET", "targets/custom", params=params)

    def get_custom_target(self, target_id: int | str) -> Any:
        return self._request("GET", f"targets/custom/{segment(target_id)}")

    def create_custom_target(self, target: Mapping[str, Any]) -> Any:
        return self._request("POST", "targets/custom", body=target)

    def update_custom_target(self, target: Mapping[str, Any], target_id: int | str) -> Any:
        return self._request("PUT", f"targets/custom/{segment(target_id)}", body=target)

    def delete_custom_target(self, target_id: int | str) -> Any:
        return self._request("DELETE", f"targets/custom/{segment(target_id)}")

    def resolve_targets(self, submission: Mapping[str, Any]) -> Any:
        return self._request("POST", "targets/resolve", body=submission)

    # --- target groups ---
    def search_target_groups(self, params: Mapping[str, Any]) -> Any:
        return self._request("GET", "target-groups/search", params=params)

    def get_target_groups(self) -> Any:
        return self._request("GET", "target-groups")

    def get_target_group(self, group_id: int | str) -> Any:
        return self._request("GET", f"target-groups/group/{segment(group_id)}")

    def get_target_group_by_message_id(self, message_id: int | str) -> Any:
        return self._request("GET", f"target-groups/message/{segment(message_id)}")

    def create_target_group(self, group: Mapping[str, Any]) -> Any:
        return self._request("POST", "target-groups", body=group)

    def update_target_group(self, group: Mapping[str, Any], group_id: int | str) -> Any:
        return self._request("PUT", f"target-groups/group/{segment(group_id)}", body=group)

    def delete_target_group(self, group_id: int | str) -> Any:
        return self._request("DELETE", f"target-groups/group/{segment(group_id)}")

    # --- deliverability, metrics, account ---
    def get_target_deliverability(self, form_id: int | str) -> Any:
        return self._request("GET", f"deliverability/action/{segment(form_id)}")

    def get_single_target_deliverability(self, form_id: int | str, target_id: int | str) -> Any:
        return self._request("GET", f"deliverability/action/{segment(form_id)}/target/{segment(target_id)}")

    def get_metrics(self, period: str) -> Any:
        return self._request("GET", f"metrics/{segment(period)}")

    def get_subscription(self) -> Any:
        return self._request("GET", "subscription")
