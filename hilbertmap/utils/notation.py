"""Address notation <-> Prefix, via the standard ipaddress module.

Not part of the engine: the mappers only ever see raw bytes.
"""

from __future__ import annotations

import ipaddress

from hilbertmap.engine.prefix import Prefix


def parse_prefix(text: str) -> Prefix:
    """Parse ``"192.0.2.0/24"`` or ``"2001:db8::/32"`` into a Prefix.

    Host bits are kept as written. A bare address gets a full-length mask.
    Raises ValueError on malformed input.
    """
    iface = ipaddress.ip_interface(text.strip())
    return Prefix(iface.ip.packed, iface.network.prefixlen)


def format_prefix(prefix: Prefix) -> str:
    """Inverse of :func:`parse_prefix`. Only 4- and 16-byte prefixes can be formatted."""
    address = ipaddress.ip_address(bytes(prefix.octets))
    return f"{address}/{prefix.mask_len}"
