from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping
from urllib.parse import quote

API_PREFIX = "api/v1"

SUPPORTED_METHODS = frozenset({"GET", "POST", "PUT", "DELETE"})

METRIC_PERIODS = ("day", "week", "month", "year")

# Paths are logical: anything after the second segment is an identifier
# and is ignored when checking support.
ENDPOINTS: Mapping[str, frozenset[str]] = MappingProxyType(
    {
        "GET": frozenset(
            {
                "targets/legislators",
                "targets/search",
                "targets/custom",
                "target-groups",
                "target-groups/search",
                "target-groups/group",
                "target-groups/message",
                "districts",
                "districts/state",
                "deliverability/action",
                "subscription",
                "committees/list",
                *(f"metrics/{period}" for period in METRIC_PERIODS),
            }
        ),
        "POST": frozenset(
            {
                "targets/custom",
                "targets/resolve",
                "target-groups",
                "oauth/access-token",
            }
        ),
        "PUT": frozenset(
            {
                "targets/custom",
                "target-groups/group",
            }
        ),
        "DELETE": frozenset(
            {
                "targets/custom",
                "target-groups/group",
            }
        ),
    }
)


def normalize_path(path: str) -> str:
    return str(path or "").strip().strip("/")


def segment(value: Any) -> str:
    """Percent-encode one identifier so it stays a single path segment."""
    return quote(str(value), safe="")


def _has_bad_segment(path: str) -> bool:
    if "?" in path or "#" in path:
        return True
    return any(part in ("", ".", "..") for part in path.split("/"))


def logical_path(path: str) -> str:
    """Drop identifier segments: ``targets/custom/42`` -> ``targets/custom``."""
    segments = normalize_path(path).split("/")
    return "/".join(segments[:2])


def is_supported(method: str, path: str) -> bool:
    allowed = ENDPOINTS.get(method.upper())
    if not allowed or _has_bad_segment(str(path or "").strip().lstrip("/")):
        return False
    return logical_path(path) in allowed
