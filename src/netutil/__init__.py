"""netutil - small network utilities.

Example usage:
    from netutil import await_reachable, host_port, listen_on_local_random_port

    with listen_on_local_random_port() as sock:
        host, port = sock.getsockname()[:2]
        ...

    await_reachable(host_port("http://localhost:8080"), max_wait=10)
"""

from __future__ import annotations

import logging

from ._internal import Settings, configure_logging, get_settings
from .errors import (
    AddressError,
    BindError,
    MissingHostError,
    MissingSchemeError,
    NetUtilError,
    NoLoopbackFoundError,
    ReachabilityTimeoutError,
    URLError,
    URLParseError,
)
from .listener import listen_on_local_random_port
from .loopback import localhost
from .reachability import await_reachable
from .urls import host_port, split_host_port

__version__ = "0.1.0"

logger = logging.getLogger("netutil")

__all__ = [
    "AddressError",
    "BindError",
    "MissingHostError",
    "MissingSchemeError",
    "NetUtilError",
    "NoLoopbackFoundError",
    "ReachabilityTimeoutError",
    "Settings",
    "URLError",
    "URLParseError",
    "await_reachable",
    "configure_logging",
    "get_settings",
    "host_port",
    "listen_on_local_random_port",
    "localhost",
    "logger",
    "split_host_port",
]
