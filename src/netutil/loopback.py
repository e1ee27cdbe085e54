"""Loopback address discovery.

``localhost()`` tries name resolution of "localhost" first and falls back to
scanning the loopback network interfaces. Nothing is cached.
"""

from __future__ import annotations

import ipaddress
import logging
import socket
from collections.abc import Callable

import psutil

from .errors import NoLoopbackFoundError

logger = logging.getLogger(__name__)

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address

# Interfaces must carry both flags to be scanned
UP_LOOPBACK_FLAGS = frozenset({"up", "loopback"})


def localhost() -> IPAddress:
    """Return a usable loopback IP address.

    Returns:
        The first address "localhost" resolves to, or failing that the first
        loopback address found on an up loopback interface.

    Raises:
        NoLoopbackFoundError: Both strategies came up empty.
    """
    for strategy in _STRATEGIES:
        ip = strategy()
        if ip is not None:
            return ip
    raise NoLoopbackFoundError()


def _localhost_lookup() -> IPAddress | None:
    """Resolve "localhost" and return the first address in resolver order."""
    try:
        infos = socket.getaddrinfo("localhost", None)
    except OSError as e:
        logger.debug("Resolving localhost failed: %s", e)
        return None

    for family, _, _, _, sockaddr in infos:
        if family in (socket.AF_INET, socket.AF_INET6):
            # Drop any IPv6 zone suffix
            return ipaddress.ip_address(sockaddr[0].split("%", 1)[0])
    return None


def _loopback_interface_ip() -> IPAddress | None:
    """Return the first loopback address on an up loopback interface."""
    try:
        addrs = psutil.net_if_addrs()
        stats = psutil.net_if_stats()
    except OSError as e:
        logger.debug("Enumerating network interfaces failed: %s", e)
        return None

    for name, nic_addrs in addrs.items():
        nic_stats = stats.get(name)
        if nic_stats is None or not UP_LOOPBACK_FLAGS <= _interface_flags(nic_stats):
            continue
        for nic_addr in nic_addrs:
            if nic_addr.family not in (socket.AF_INET, socket.AF_INET6):
                continue
            try:
                interface = _parse_interface_address(nic_addr.address, nic_addr.netmask)
            except ValueError as e:
                logger.debug("Skipping address %r on %s: %s", nic_addr.address, name, e)
                continue
            if interface.ip.is_loopback:
                return interface.ip
    return None


def _interface_flags(nic_stats) -> frozenset[str]:
    flags = set(filter(None, getattr(nic_stats, "flags", "").split(",")))
    if nic_stats.isup:
        flags.add("up")
    return frozenset(flags)


def _parse_interface_address(
    address: str, netmask: str | None
) -> ipaddress.IPv4Interface | ipaddress.IPv6Interface:
    """Parse an interface address and netmask as a network-prefixed address.

    Examples:
        >>> _parse_interface_address("127.0.0.1", "255.0.0.0")
        IPv4Interface('127.0.0.1/8')
        >>> _parse_interface_address("::1", "ffff:ffff:ffff:ffff:ffff:ffff:ffff:ffff")
        IPv6Interface('::1/128')
    """
    address = address.split("%", 1)[0]
    if not netmask:
        return ipaddress.ip_interface(address)
    prefix = ipaddress.ip_address(netmask.split("%", 1)[0])
    prefix_len = bin(int(prefix)).count("1")
    return ipaddress.ip_interface(f"{address}/{prefix_len}")


_STRATEGIES: tuple[Callable[[], IPAddress | None], ...] = (
    _localhost_lookup,
    _loopback_interface_ip,
)
