"""Utility helpers shared by the binary and text codecs."""

from __future__ import annotations

from .bcd import RIGHT_PAD, digits_to_int, pack_digits, unpack_digits
from .sockaddr import (
    SOCKET_ADDRESS_LENGTHS,
    read_ipv4,
    read_port,
    read_prefix,
    read_socket_address,
    read_tset,
    write_socket_address,
)

__all__ = [
    "RIGHT_PAD",
    "pack_digits",
    "unpack_digits",
    "digits_to_int",
    "SOCKET_ADDRESS_LENGTHS",
    "read_prefix",
    "read_ipv4",
    "read_port",
    "read_socket_address",
    "read_tset",
    "write_socket_address",
]
