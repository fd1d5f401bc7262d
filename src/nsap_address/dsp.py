"""Domain Specific Part variants.

A DSP is exactly one of the frozen dataclasses below. Each carries a
``kind`` so that the AFI table can be consulted without isinstance
chains.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from ipaddress import IPv4Address, IPv6Address
from typing import ClassVar, Tuple, Union


class DspKind(Enum):
    DECIMAL = "decimal"
    BINARY = "binary"
    ISO_IEC_646 = "iso_iec_646"
    NATIONAL = "national"
    URL = "url"
    IP_ADDRESS = "ip_address"


@dataclass(frozen=True)
class Decimal:
    """One value per decimal digit, 0 through 9. Not nibble-packed."""

    digits: Tuple[int, ...] = ()
    kind: ClassVar[DspKind] = DspKind.DECIMAL

    def __post_init__(self) -> None:
        object.__setattr__(self, "digits", tuple(self.digits))

    @classmethod
    def from_str(cls, digits: str) -> "Decimal":
        return cls(tuple(ord(ch) - 0x30 for ch in digits))

    def to_str(self) -> str:
        return "".join(chr(0x30 + d) for d in self.digits)


@dataclass(frozen=True)
class Binary:
    data: bytes = b""
    kind: ClassVar[DspKind] = DspKind.BINARY

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))


@dataclass(frozen=True)
class IsoIec646:
    """7-bit characters, mostly overlapping with ASCII."""

    data: bytes = b""
    kind: ClassVar[DspKind] = DspKind.ISO_IEC_646

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))


@dataclass(frozen=True)
class NationalCharacters:
    """Octets of some national character set, left uninterpreted."""

    data: bytes = b""
    kind: ClassVar[DspKind] = DspKind.NATIONAL

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))


@dataclass(frozen=True)
class Url:
    url: str = ""
    kind: ClassVar[DspKind] = DspKind.URL


@dataclass(frozen=True)
class IpAddress:
    address: Union[IPv4Address, IPv6Address]
    kind: ClassVar[DspKind] = DspKind.IP_ADDRESS

    def to_bytes(self) -> bytes:
        # X.519 pads both forms out to a 17 octet DSP.
        raw = self.address.packed
        return raw + bytes(17 - len(raw))


DomainSpecificPart = Union[
    Decimal, Binary, IsoIec646, NationalCharacters, Url, IpAddress
]


def is_printable_ascii(data: bytes) -> bool:
    return all(0x20 <= b <= 0x7E for b in data)


__all__ = [
    "DspKind",
    "Decimal",
    "Binary",
    "IsoIec646",
    "NationalCharacters",
    "Url",
    "IpAddress",
    "DomainSpecificPart",
    "is_printable_ascii",
]
