"""IPv4 socket addresses embedded in decimal DSPs (RFC 1006 / ITU-T X.519).

The DSP digits are laid out as::

    NN AAABBBCCCDDD [PPPPP [TTTTT]]

a two digit prefix, four zero-padded IPv4 octets, then an optional five
digit port and an optional five digit transport selector ("tset").
Digits here are one value per element, the same as ``dsp.Decimal``.
"""

from __future__ import annotations

from ipaddress import IPv4Address
from typing import List, Optional, Sequence, Tuple

from .bcd import digits_to_int

PREFIX_DIGITS = 2
IPV4_END = PREFIX_DIGITS + 12
PORT_END = IPV4_END + 5
TSET_END = PORT_END + 5

SOCKET_ADDRESS_LENGTHS = (IPV4_END, PORT_END, TSET_END)


def read_prefix(digits: Sequence[int]) -> Optional[str]:
    if len(digits) < PREFIX_DIGITS:
        return None
    return "".join(str(d) for d in digits[:PREFIX_DIGITS])


def read_ipv4(digits: Sequence[int]) -> Optional[IPv4Address]:
    """Read the four octet fields, ignoring any digits after them."""

    if len(digits) < IPV4_END:
        return None
    octets = [
        digits_to_int(digits[i : i + 3]) for i in range(PREFIX_DIGITS, IPV4_END, 3)
    ]
    if any(octet > 255 for octet in octets):
        return None
    return IPv4Address(bytes(octets))


def read_port(digits: Sequence[int]) -> Optional[int]:
    # Not range checked, callers decide what to do with values over 0xFFFF.
    if len(digits) < PORT_END:
        return None
    return digits_to_int(digits[IPV4_END:PORT_END])


def read_socket_address(
    digits: Sequence[int],
) -> Optional[Tuple[IPv4Address, Optional[int]]]:
    """Return ``(ipv4, port)`` from DSP *digits*, or ``None`` if they do not fit."""

    if len(digits) not in SOCKET_ADDRESS_LENGTHS:
        return None
    ipv4 = read_ipv4(digits)
    if ipv4 is None:
        return None
    port = read_port(digits)
    if port is not None and port > 0xFFFF:
        return None
    return ipv4, port


def read_tset(digits: Sequence[int]) -> Optional[int]:
    if len(digits) != TSET_END:
        return None
    return digits_to_int(digits[PORT_END:TSET_END])


def write_socket_address(
    prefix: str,
    ipv4: IPv4Address,
    port: Optional[int] = None,
    tset: Optional[int] = None,
) -> Tuple[int, ...]:
    if tset is not None and port is None:
        raise ValueError("A transport selector requires a port")
    text = prefix + "".join(f"{octet:03d}" for octet in ipv4.packed)
    if port is not None:
        text += f"{port:05d}"
    if tset is not None:
        text += f"{tset:05d}"
    digits: List[int] = [ord(ch) - 0x30 for ch in text]
    return tuple(digits)


__all__ = [
    "SOCKET_ADDRESS_LENGTHS",
    "read_prefix",
    "read_ipv4",
    "read_port",
    "read_socket_address",
    "read_tset",
    "write_socket_address",
]
