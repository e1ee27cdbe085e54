"""Listening sockets on a random loopback port."""

from __future__ import annotations

import logging
import socket

from .errors import BindError
from .loopback import localhost

logger = logging.getLogger(__name__)


def listen_on_local_random_port() -> socket.socket:
    """Open a TCP listener on a loopback IP and an OS-assigned port.

    The caller owns the returned socket and must close it; it can be used as a
    context manager. The actual address is available from ``getsockname()``.

    Raises:
        NoLoopbackFoundError: No loopback IP could be found.
        BindError: The socket could not be created, bound or put in listening mode.
    """
    ip = localhost()
    family = socket.AF_INET6 if ip.version == 6 else socket.AF_INET
    address = (str(ip), 0)

    try:
        sock = socket.socket(family, socket.SOCK_STREAM)
    except OSError as e:
        raise BindError(address, e) from e
    try:
        sock.bind(address)
        sock.listen()
    except OSError as e:
        sock.close()
        raise BindError(address, e) from e

    logger.info("Listening on %s port %d", *sock.getsockname()[:2])
    return sock
