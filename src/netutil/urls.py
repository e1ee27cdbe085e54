"""URL and dial-target helpers.

``host_port`` turns a URL into a ``host:port`` string suitable for opening a
TCP connection, filling in the scheme's default port. ``split_host_port``
turns such a string into the ``(host, port)`` tuple the socket module wants.
"""

from __future__ import annotations

from urllib.parse import urlsplit

from .errors import AddressError, MissingHostError, MissingSchemeError, URLParseError

HTTPS_PORT = 443
DEFAULT_PORT = 80


def host_port(url: str) -> str:
    """Return the ``host:port`` dial target of a URL.

    The port is the one in the URL when present, otherwise 443 for ``https``
    and 80 for every other scheme. Userinfo, path, query and fragment are
    dropped.

    Args:
        url: URL to normalize (e.g., "https://example.com/path").

    Returns:
        Dial target (e.g., "example.com:443", "[::1]:80").

    Raises:
        URLParseError: The input is not a syntactically valid URL.
        MissingSchemeError: The URL has no scheme.
        MissingHostError: The URL has no host, or only a port.
    """
    try:
        _check_characters(url)
        parts = urlsplit(url)
        # Accessing .port validates it is numeric and in range
        _ = parts.port
    except ValueError as e:
        raise URLParseError(url, e) from e

    if not parts.scheme:
        raise MissingSchemeError(url)

    host = parts.netloc.rpartition("@")[2]
    if not host or host.startswith(":"):
        raise MissingHostError(url)

    # Colons inside a bracketed IPv6 literal are not port separators
    bracket_end = host.find("]")
    if ":" not in host[max(bracket_end, 0) :]:
        port = HTTPS_PORT if parts.scheme == "https" else DEFAULT_PORT
        host = f"{host}:{port}"
    return host


def split_host_port(address: str) -> tuple[str, int]:
    """Split a ``host:port`` dial target into a socket address.

    Examples:
        >>> split_host_port("example.com:80")
        ('example.com', 80)
        >>> split_host_port("[::1]:9000")
        ('::1', 9000)

    Raises:
        AddressError: The port is missing or invalid, or the brackets are malformed.
    """
    if address.startswith("["):
        end = address.find("]")
        if end == -1:
            raise AddressError(address, "missing ']'")
        host, rest = address[1:end], address[end + 1 :]
        if not rest.startswith(":"):
            raise AddressError(address, "missing port")
        port = rest[1:]
    else:
        host, sep, port = address.rpartition(":")
        if not sep:
            raise AddressError(address, "missing port")
        if ":" in host:
            raise AddressError(address, "too many colons")
        if "[" in host or "]" in host:
            raise AddressError(address, "unexpected bracket")

    if not port.isdigit() or not port.isascii():
        raise AddressError(address, f"invalid port {port!r}")
    number = int(port)
    if number > 65535:
        raise AddressError(address, f"port {number} out of range")
    return host, number


def _check_characters(url: str) -> None:
    # urlsplit silently strips some of these, so reject them up front.
    for char in url:
        if char <= " " or char == "\x7f":
            raise ValueError(f"invalid character {char!r} in url")
