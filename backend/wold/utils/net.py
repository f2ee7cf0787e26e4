"""``address:port`` pairs for the listen endpoint and broadcast destination."""

from __future__ import annotations

import ipaddress
import socket
from typing import NamedTuple


class SocketAddress(NamedTuple):
    """An IP address and UDP/TCP port, e.g. ``255.255.255.255:9`` or ``[::1]:3000``."""

    host: str
    port: int

    @classmethod
    def parse(cls, value: str) -> "SocketAddress":
        """Parse ``a.b.c.d:port`` or ``[v6]:port``.

        Raises:
            ValueError: if the address or port is malformed.
        """
        if not isinstance(value, str):
            raise ValueError(f"expected 'address:port' string, got {type(value).__name__}")

        host, sep, port_text = value.rpartition(":")
        if not sep or not host:
            raise ValueError(f"invalid socket address {value!r}: expected 'address:port'")

        if host.startswith("[") and host.endswith("]"):
            host = host[1:-1]
            version = 6
        else:
            version = 4

        try:
            ip = ipaddress.ip_address(host)
        except ValueError:
            raise ValueError(f"invalid socket address {value!r}: bad IP address {host!r}") from None
        if ip.version != version:
            # Bare IPv6 must be bracketed; brackets around IPv4 are not allowed.
            raise ValueError(f"invalid socket address {value!r}")

        if not (port_text.isascii() and port_text.isdigit()) or int(port_text) > 65535:
            raise ValueError(f"invalid socket address {value!r}: bad port {port_text!r}")

        return cls(str(ip), int(port_text))

    @property
    def family(self) -> socket.AddressFamily:
        if ipaddress.ip_address(self.host).version == 6:
            return socket.AF_INET6
        return socket.AF_INET

    def __str__(self) -> str:
        if self.family == socket.AF_INET6:
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"
