"""Exception hierarchy for netutil.

Every error derives from :class:`NetUtilError` and also from the builtin
exception a caller would naturally catch (``TimeoutError``, ``ValueError`` or
``OSError``), so code that does not know about netutil still handles them.
"""

from __future__ import annotations

from datetime import timedelta


class NetUtilError(Exception):
    """Base class for all netutil errors."""


class ReachabilityTimeoutError(NetUtilError, TimeoutError):
    """No TCP connection to an address could be made before the deadline."""

    def __init__(self, address: str, max_wait: float | timedelta) -> None:
        self.address = address
        self.max_wait = max_wait
        super().__init__(f"{address} unreachable for {_format_wait(max_wait)}")


class URLError(NetUtilError, ValueError):
    """A URL cannot be turned into a dial target."""

    def __init__(self, url: str, message: str) -> None:
        self.url = url
        super().__init__(message)


class URLParseError(URLError):
    """The input is not a syntactically valid URL."""

    def __init__(self, url: str, cause: Exception) -> None:
        self.cause = cause
        super().__init__(url, f"could not parse {url!r} as a url: {cause}")


class MissingSchemeError(URLError):
    """The URL parsed but has no scheme."""

    def __init__(self, url: str) -> None:
        super().__init__(url, f"url {url!r} has no scheme")


class MissingHostError(URLError):
    """The URL parsed but has no host (or only a port)."""

    def __init__(self, url: str) -> None:
        super().__init__(url, f"url {url!r} has no host")


class AddressError(NetUtilError, ValueError):
    """A ``host:port`` string cannot be split into a socket address."""

    def __init__(self, address: str, reason: str) -> None:
        self.address = address
        super().__init__(f"address {address!r}: {reason}")


class NoLoopbackFoundError(NetUtilError, OSError):
    """Neither name resolution nor interface enumeration found a loopback IP."""

    def __init__(self) -> None:
        super().__init__("no loopback ip found")


class BindError(NetUtilError, OSError):
    """Creating, binding or listening on a socket failed."""

    def __init__(self, address: tuple[str, int], cause: OSError) -> None:
        self.address = address
        super().__init__(f"could not listen on {address[0]} port {address[1]}: {cause}")


def _format_wait(max_wait: float | timedelta) -> str:
    if isinstance(max_wait, timedelta):
        return str(max_wait)
    return f"{max_wait}s"
