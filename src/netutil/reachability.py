"""Wait for a TCP endpoint to start accepting connections."""

from __future__ import annotations

import logging
import socket
import time
from datetime import timedelta

from .errors import ReachabilityTimeoutError
from .urls import split_host_port

logger = logging.getLogger(__name__)

POLL_INTERVAL = 0.1
"""Seconds slept between two connection attempts."""


def await_reachable(address: str, max_wait: float | timedelta) -> None:
    """Poll until a TCP connection to ``address`` succeeds.

    Each attempt uses the platform's own connect timeout; a successful probe
    connection is closed right away. Attempts are spaced by a fixed
    ``POLL_INTERVAL``. An address that cannot be split into host and port
    counts as a failed attempt, like a refused connection, as does a
    hostname the IDNA codec rejects.

    Args:
        address: Dial target in ``host:port`` form (IPv6 hosts bracketed).
        max_wait: Maximum time to keep trying, in seconds or as a timedelta.

    Raises:
        ReachabilityTimeoutError: No attempt succeeded before the deadline.
            Raised immediately when ``max_wait`` is zero or negative.
    """
    seconds = max_wait.total_seconds() if isinstance(max_wait, timedelta) else float(max_wait)
    deadline = time.monotonic() + seconds

    while time.monotonic() < deadline:
        try:
            with socket.create_connection(split_host_port(address)):
                logger.info("%s is reachable", address)
                return
        except (OSError, ValueError) as e:
            logger.debug("%s not reachable yet: %s", address, e)
        time.sleep(POLL_INTERVAL)

    raise ReachabilityTimeoutError(address, max_wait)
