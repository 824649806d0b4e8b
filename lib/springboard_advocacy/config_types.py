from __future__ import annotations

import os
from dataclasses import dataclass

ENV_BASE_URL = "SPRINGBOARD_ADVOCACY_BASE_URL"
ENV_API_KEY = "SPRINGBOARD_ADVOCACY_API_KEY"
ENV_ACCESS_TOKEN = "SPRINGBOARD_ADVOCACY_ACCESS_TOKEN"
ENV_DEBUG = "SPRINGBOARD_ADVOCACY_DEBUG"

DEFAULT_TIMEOUT_S = 10.0
DEFAULT_USER_AGENT = "springboard-advocacy-client/0.1.0"


@dataclass(frozen=True)
class ClientConfig:
    base_url: str
    api_key: str | None = None
    access_token: str | None = None
    timeout_s: float = DEFAULT_TIMEOUT_S
    debug: bool = False
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> "ClientConfig":
        debug = os.getenv(ENV_DEBUG, "").strip().lower() in {"1", "true", "yes", "on"}
        return cls(
            base_url=os.getenv(ENV_BASE_URL, ""),
            api_key=os.getenv(ENV_API_KEY) or None,
            access_token=os.getenv(ENV_ACCESS_TOKEN) or None,
            debug=debug,
        )


def normalize_base_url(raw: str | None) -> str:
    return (raw or "").strip().rstrip("/")
