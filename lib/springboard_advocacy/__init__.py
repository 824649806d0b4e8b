from .client import AdvocacyClient
from .config_types import ClientConfig
from .debug import DebugRecord
from .logging_ import setup_logging
from .errors import (
    AdvocacyClientError,
    ConfigurationError,
    MalformedResponseError,
    TransportError,
    UnknownEndpointError,
    UnsupportedVerbError,
)

__all__ = [
    "AdvocacyClient",
    "ClientConfig",
    "DebugRecord",
    "AdvocacyClientError",
    "ConfigurationError",
    "MalformedResponseError",
    "TransportError",
    "UnknownEndpointError",
    "UnsupportedVerbError",
    "setup_logging",
]
