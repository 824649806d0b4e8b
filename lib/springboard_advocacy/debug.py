"""Debug capture for dispatched requests.

A sink is any callable taking a :class:`DebugRecord`. The client installs a
:class:`LastRecord` sink when debug mode is on and none otherwise, so the
dispatcher does no extra work in production.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable


@dataclass(frozen=True)
class DebugRecord:
    method: str
    path: str
    access_token: str | None
    params: dict[str, str] = field(default_factory=dict)
    body: dict[str, Any] | None = None
    response: Any = None
    error: BaseException | None = None


DebugSink = Callable[[DebugRecord], None]


class LastRecord:
    """Keeps only the most recent record."""

    def __init__(self) -> None:
        self.record: DebugRecord | None = None

    def __call__(self, record: DebugRecord) -> None:
        self.record = record

    def clear(self) -> None:
        self.record = None
