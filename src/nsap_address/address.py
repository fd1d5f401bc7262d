"""The structured NSAP address value."""

from __future__ import annotations

from dataclasses import dataclass
from ipaddress import IPv4Address
from typing import Optional, Tuple

from .afi import Family, individual_to_group, resolve_afi
from .dsp import Decimal, DomainSpecificPart, Url
from .utils import read_prefix, read_socket_address

# The Telex number RFC 1277 assigns to the Internet.
INTERNET_IDI = "00728722"

# DSP prefixes under INTERNET_IDI, see ITU-T Rec. X.519 (2019) 11.3.
RFC_1277_WELL_KNOWN_NETWORK_INTL_X25 = "01"
RFC_1277_WELL_KNOWN_NETWORK_JANET = "02"
RFC_1277_WELL_KNOWN_NETWORK_DARPA_NSF_INTERNET = "03"
RFC_1277_WELL_KNOWN_NETWORK_IXI = "06"
X519_DSP_PREFIX_ITOT_OVER_IPV4 = RFC_1277_WELL_KNOWN_NETWORK_DARPA_NSF_INTERNET
X519_DSP_PREFIX_IDM_OVER_IPV4 = "10"
X519_DSP_PREFIX_LDAP = "11"

ITOT_OVER_IPV4_DEFAULT_PORT = 102

_URL_SCHEMES = {
    X519_DSP_PREFIX_LDAP: "ldap",
    X519_DSP_PREFIX_IDM_OVER_IPV4: "idm",
    X519_DSP_PREFIX_ITOT_OVER_IPV4: "itot",
}


@dataclass(frozen=True)
class NetworkAddress:
    family: Family
    is_group: bool
    idi: str
    dsp: DomainSpecificPart

    @staticmethod
    def from_bytes(data: bytes, *, check_national: bool = True) -> "NetworkAddress":
        from .codec import decode_nsap

        return decode_nsap(data, check_national=check_national)

    @staticmethod
    def from_string(text: str) -> "NetworkAddress":
        from .text import parse_nsap

        return parse_nsap(text)

    def to_bytes(self) -> bytes:
        from .codec import encode_nsap

        return encode_nsap(self)

    def to_ns_string(self) -> str:
        """Render the raw ``NS+<hex>`` form of RFC 1278."""

        return "NS+" + self.to_bytes().hex().upper()

    def __str__(self) -> str:
        from .text import format_nsap

        return format_nsap(self)

    def afi(self) -> Optional[int]:
        """The AFI this address encodes with, group offset applied."""

        afi = resolve_afi(self.family, self.dsp.kind, self.idi.startswith("0"))
        if afi is None or not self.is_group:
            return afi
        return individual_to_group(afi)

    def is_internet(self) -> bool:
        # URL addresses are not "internet": they may be TOR, I2P or anything else.
        return self.family is Family.F69 and self.idi == INTERNET_IDI

    def to_socket_address(self) -> Optional[Tuple[IPv4Address, Optional[int]]]:
        if not isinstance(self.dsp, Decimal):
            return None
        return read_socket_address(self.dsp.digits)

    def to_url(self) -> Optional[str]:
        """Return a URL for this address, if one can be derived.

        URL addresses give back their URL. Internet Telex addresses whose
        DSP names an X.519 protocol are turned into ``ldap://``, ``idm://``
        or ``itot://`` URLs. X.519 defines no default port for LDAP or
        IDM, so those need an explicit one.
        """

        if self.family is Family.URL:
            return self.dsp.url if isinstance(self.dsp, Url) else None
        if not self.is_internet() or not isinstance(self.dsp, Decimal):
            return None
        scheme = _URL_SCHEMES.get(read_prefix(self.dsp.digits) or "")
        socket_address = read_socket_address(self.dsp.digits)
        if scheme is None or socket_address is None:
            return None
        ipv4, port = socket_address
        if port is None and scheme == "itot":
            port = ITOT_OVER_IPV4_DEFAULT_PORT
        if port is None:
            return None
        return f"{scheme}://{ipv4}:{port}"


__all__ = [
    "NetworkAddress",
    "INTERNET_IDI",
    "ITOT_OVER_IPV4_DEFAULT_PORT",
    "X519_DSP_PREFIX_ITOT_OVER_IPV4",
    "X519_DSP_PREFIX_IDM_OVER_IPV4",
    "X519_DSP_PREFIX_LDAP",
]
