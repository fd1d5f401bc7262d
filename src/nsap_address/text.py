"""Human-readable NSAP strings (IETF RFC 1278, extended).

The grammar is ``<keyword>+<idi>+<dsp>``, the raw escape ``NS+<hex>`` and
the old ``<afi><idi>+<hex dsp>`` form. On top of RFC 1278 this accepts
``ICP`` addresses carrying IP literals, ``IND`` addresses and ``URL``
addresses. The macros of RFC 1278 section 6 are not supported, except
that Internet Telex addresses are read and written in the
``TELEX+00728722+RFC-1006+...`` form of RFC 1277.
"""

from __future__ import annotations

from ipaddress import IPv4Address, IPv6Address
from typing import Optional, Tuple
import binascii
import logging

from .address import INTERNET_IDI, NetworkAddress
from .afi import Family, family_keyword, lookup_afi, max_idi_digits
from .codec import decode_nsap
from .dsp import (
    Binary,
    Decimal,
    DomainSpecificPart,
    IpAddress,
    IsoIec646,
    NationalCharacters,
    Url,
    is_printable_ascii,
)
from .errors import (
    IDITooLongError,
    InvalidHexEncodingError,
    MalformedDSPError,
    NoAFIError,
    NoDSPPrefixError,
    NoIDIError,
    NonDigitInIDIError,
    TruncatedDSPError,
    UnrecognizedNetworkTypeError,
    UnsupportedDSPTypeError,
)
from .utils import (
    read_ipv4,
    read_port,
    read_prefix,
    read_tset,
    write_socket_address,
)

logger = logging.getLogger(__name__)

RAW_PREFIX = "NS+"
RFC_1006_PREFIX = "RFC-1006+"
X25_PREFIX = "X.25(80)+"

# Networks reachable over RFC 1006, see ITU-T Rec. X.519 (2019) 11.3.1 - 11.3.3.
RFC_1006_NETWORKS = ("03", "06", "10", "11")
_RFC_1006_MIN_LEN = len(RFC_1006_PREFIX + "03+0.0.0.0")

_DIGITS = frozenset("0123456789")

# Checked in order after TELEX and URL.
_KEYWORD_FAMILIES: Tuple[Tuple[str, Family], ...] = (
    ("X121", Family.X121),
    ("DCC", Family.ISO_DCC),
    ("PSTN", Family.E164),
    ("ICD", Family.ISO_6523_ICD),
    ("ICP", Family.IANA_ICP),
    ("IND", Family.ITU_T_IND),
    ("LOCAL", Family.LOCAL),
)


def parse_nsap(text: str) -> NetworkAddress:
    if text.startswith(RAW_PREFIX):
        try:
            raw = binascii.unhexlify(text[len(RAW_PREFIX) :])
        except (binascii.Error, ValueError) as exc:
            raise InvalidHexEncodingError() from exc
        return decode_nsap(raw)

    # Most NSAPs in use today are Internet Telex ones, so TELEX goes first.
    if text.startswith("TELEX+"):
        return _parse_telex(text)
    if text.startswith("URL+"):
        idi, dsp_text = _split_idi(text, "URL", Family.URL)
        return NetworkAddress(Family.URL, False, idi, Url(dsp_text))
    for keyword, family in _KEYWORD_FAMILIES:
        if not text.startswith(keyword + "+"):
            continue
        idi, dsp_text = _split_idi(text, keyword, family)
        if family is Family.IANA_ICP:
            ip_dsp = _parse_icp_ip(idi, dsp_text)
            if ip_dsp is not None:
                return NetworkAddress(family, False, idi, ip_dsp)
        return NetworkAddress(family, False, idi, parse_dsp(dsp_text))
    return _parse_legacy(text)


def parse_dsp(text: str) -> DomainSpecificPart:
    """Parse the ``d``, ``x`` and ``l`` forms of the RFC 1278 ``<dsp>``."""

    if not text:
        raise MalformedDSPError("empty DSP")
    kind, body = text[0], text[1:]
    if kind == "d":
        if not all(ch in _DIGITS for ch in body):
            raise MalformedDSPError("decimal DSP contains a non-digit")
        return Decimal.from_str(body)
    if kind == "x":
        try:
            return Binary(binascii.unhexlify(body))
        except (binascii.Error, ValueError) as exc:
            raise MalformedDSPError("invalid hexadecimal DSP") from exc
    if kind == "l":
        # Space is accepted, as it is in ISO/IEC 646 DSPs read from octets.
        if not all(" " <= ch <= "~" for ch in body):
            raise MalformedDSPError("literal DSP is not printable ASCII")
        return IsoIec646(body.encode("ascii"))
    raise UnsupportedDSPTypeError(f"unsupported DSP type {kind!r}")


def format_nsap(address: NetworkAddress) -> str:
    head = f"{family_keyword(address.family)}+{address.idi}+"
    macro = _format_rfc1006(address)
    if macro is not None:
        return head + macro
    return head + format_dsp(address.dsp)


def format_dsp(dsp: DomainSpecificPart) -> str:
    if isinstance(dsp, Decimal):
        return "d" + dsp.to_str()
    if isinstance(dsp, Binary):
        return "x" + dsp.data.hex().upper()
    if isinstance(dsp, IsoIec646):
        return "l" + dsp.data.decode("latin-1")
    if isinstance(dsp, NationalCharacters):
        # Print as literal text when it happens to be plain ASCII.
        if is_printable_ascii(dsp.data):
            return "l" + dsp.data.decode("ascii")
        return "x" + dsp.data.hex().upper()
    if isinstance(dsp, Url):
        return dsp.url
    if isinstance(dsp, IpAddress):
        return str(dsp.address)
    raise TypeError("Unsupported DSP type")


def _split_idi(text: str, keyword: str, family: Family) -> Tuple[str, str]:
    rest = text[len(keyword) + 1 :]
    if not rest:
        raise NoIDIError()
    idi, sep, dsp_text = rest.partition("+")
    if not sep:
        raise NoDSPPrefixError()
    for ch in idi:
        if ch not in _DIGITS:
            raise NonDigitInIDIError(ord(ch))
    if len(idi) > max_idi_digits(family):
        raise IDITooLongError(
            f"IDI has {len(idi)} digits, {keyword} allows {max_idi_digits(family)}"
        )
    return idi, dsp_text


def _parse_telex(text: str) -> NetworkAddress:
    idi, dsp_text = _split_idi(text, "TELEX", Family.F69)
    if idi == INTERNET_IDI:
        if dsp_text.startswith(RFC_1006_PREFIX):
            return NetworkAddress(Family.F69, False, idi, _parse_rfc1006(dsp_text))
        if dsp_text.startswith(X25_PREFIX):
            raise UnsupportedDSPTypeError("X.25(80) DSPs are not supported")
        raise UnsupportedDSPTypeError(
            f"Internet Telex DSP {dsp_text!r} is neither RFC-1006 nor X.25(80)"
        )
    return NetworkAddress(Family.F69, False, idi, parse_dsp(dsp_text))


def _parse_rfc1006(dsp_text: str) -> Decimal:
    if len(dsp_text) < _RFC_1006_MIN_LEN:
        raise TruncatedDSPError()
    body = dsp_text[len(RFC_1006_PREFIX) :]
    network, sep, rest = body[:2], body[2:3], body[3:]
    if network not in RFC_1006_NETWORKS:
        raise UnsupportedDSPTypeError(f"RFC 1006 network {network!r} is not supported")
    if sep != "+":
        raise MalformedDSPError("expected '+' after the RFC 1006 network")
    fields = rest.split("+")
    if len(fields) > 3:
        raise MalformedDSPError("too many fields after the IPv4 address")
    try:
        ipv4 = IPv4Address(fields[0])
    except ValueError as exc:
        raise MalformedDSPError(f"invalid IPv4 address {fields[0]!r}") from exc
    port = _parse_u16(fields[1]) if len(fields) > 1 else None
    tset = _parse_u16(fields[2]) if len(fields) > 2 else None
    return Decimal(write_socket_address(network, ipv4, port, tset))


def _parse_u16(text: str) -> int:
    if not text or not all(ch in _DIGITS for ch in text):
        raise MalformedDSPError(f"invalid number {text!r}")
    value = int(text)
    if value > 0xFFFF:
        raise MalformedDSPError(f"{value} does not fit in 16 bits")
    return value


def _parse_icp_ip(idi: str, dsp_text: str) -> Optional[IpAddress]:
    try:
        if idi == "0000":
            return IpAddress(IPv6Address(dsp_text))
        if idi == "0001":
            return IpAddress(IPv4Address(dsp_text))
    except ValueError:
        logger.debug("ICP DSP %r is not an IP literal for IDI %s", dsp_text, idi)
    return None


def _parse_legacy(text: str) -> NetworkAddress:
    # <idp>+<hex dsp>, the old ISO 8348 style.
    parts = text.split("+")
    if len(parts) != 2:
        raise UnrecognizedNetworkTypeError()
    idp, dsp_hex = parts
    if len(idp) < 2 or not all(ch in _DIGITS for ch in idp[:2]):
        raise NoAFIError()
    # The AFI is read as a decimal number here, so "52" is AFI 0x34.
    afi = int(idp[:2], 10)
    entry = lookup_afi(afi)
    if entry is None:
        raise UnrecognizedNetworkTypeError(f"unrecognized AFI {idp[:2]}")
    idi = idp[2:]
    for ch in idi:
        if ch not in _DIGITS:
            raise NonDigitInIDIError(ord(ch))
    try:
        dsp = Binary(binascii.unhexlify(dsp_hex))
    except (binascii.Error, ValueError) as exc:
        raise MalformedDSPError("invalid hexadecimal DSP") from exc
    return NetworkAddress(entry.family, False, idi, dsp)


def _format_rfc1006(address: NetworkAddress) -> Optional[str]:
    if not address.is_internet() or not isinstance(address.dsp, Decimal):
        return None
    digits = address.dsp.digits
    network = read_prefix(digits)
    if network not in RFC_1006_NETWORKS:
        return None
    # Fields past the IPv4 address are optional, trailing digits are ignored.
    ipv4 = read_ipv4(digits)
    port = read_port(digits)
    tset = read_tset(digits)
    if ipv4 is None or any(v is not None and v > 0xFFFF for v in (port, tset)):
        logger.debug("Decimal DSP %s is not an RFC 1006 address", address.dsp.to_str())
        return None
    fields = [RFC_1006_PREFIX + network, str(ipv4)]
    if port is not None:
        fields.append(str(port))
    if tset is not None:
        fields.append(str(tset))
    return "+".join(fields)


__all__ = ["parse_nsap", "parse_dsp", "format_nsap", "format_dsp"]
