from __future__ import annotations


class AdvocacyClientError(Exception):
    """Base client error."""


class ConfigurationError(AdvocacyClientError):
    """Client was constructed without a usable base URL."""


class UnsupportedVerbError(AdvocacyClientError):
    def __init__(self, method: str):
        super().__init__(f"unsupported HTTP method: {method}")
        self.method = method


class UnknownEndpointError(AdvocacyClientError):
    def __init__(self, method: str, path: str):
        super().__init__(f"{method} {path} is not a known endpoint")
        self.method = method
        self.path = path


class TransportError(AdvocacyClientError):
    """Transport/network layer error."""


class MalformedResponseError(AdvocacyClientError):
    def __init__(self, status_code: int | None, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details
