"""Pytest configuration for all tests."""

import logging
import socket
from collections.abc import Iterator

import pytest

from netutil._internal import config as config_module
from netutil._internal import logging as logging_module


@pytest.fixture(autouse=True)
def reset_netutil_logging() -> Iterator[None]:
    """Undo configure_logging() so each test sees a pristine 'netutil' logger."""
    logger = logging.getLogger("netutil")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
    logging_module._configured = False


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Make environment changes made by a test visible to get_settings()."""
    config_module.get_settings.cache_clear()
    yield
    config_module.get_settings.cache_clear()


@pytest.fixture
def tcp_listener() -> Iterator[socket.socket]:
    """A TCP socket listening on 127.0.0.1 with an OS-assigned port."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        sock.listen()
        yield sock


@pytest.fixture
def listener_address(tcp_listener: socket.socket) -> str:
    """The host:port of tcp_listener."""
    host, port = tcp_listener.getsockname()
    return f"{host}:{port}"


@pytest.fixture
def closed_address() -> str:
    """A host:port on 127.0.0.1 that nothing listens on."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        host, port = sock.getsockname()
    return f"{host}:{port}"
