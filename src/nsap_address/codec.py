"""Preferred binary encoding of NSAP addresses (ITU-T X.213 Annex A.5.3)."""

from __future__ import annotations

from typing import Union
import binascii

from .address import NetworkAddress
from .afi import (
    idi_leading_zero_significant,
    idi_octets,
    idi_padding_digit,
    is_group_afi,
    lookup_afi,
    max_idi_digits,
)
from .dsp import (
    Binary,
    Decimal,
    DomainSpecificPart,
    DspKind,
    IpAddress,
    IsoIec646,
    NationalCharacters,
    Url,
    is_printable_ascii,
)
from .errors import (
    IDPTruncatedError,
    InternalNSAPError,
    MalformedDSPError,
    NoAFIError,
    NonDigitInIDIError,
    NonISO646CharacterError,
    UnrecognizedNetworkTypeError,
)
from .utils import pack_digits, unpack_digits


def decode_nsap(
    data: Union[bytes, bytearray], *, check_national: bool = True
) -> NetworkAddress:
    """Decode the preferred binary encoding of an NSAP.

    With *check_national* false, octets of a national character DSP are
    kept without checking that they are printable ASCII.
    """

    raw = bytes(data)
    if not raw:
        raise NoAFIError()
    afi = raw[0]
    entry = lookup_afi(afi)
    if entry is None:
        raise UnrecognizedNetworkTypeError(f"unrecognized AFI 0x{afi:02X}")
    idp_len = 1 + idi_octets(entry.family)
    if len(raw) < idp_len:
        raise IDPTruncatedError(idp_len, len(raw))
    idi_digits = unpack_digits(
        raw[1:idp_len],
        padding_digit=idi_padding_digit(afi),
        invalid_digit=NonDigitInIDIError,
    )
    idi = "".join(str(d) for d in idi_digits)
    dsp = _decode_dsp(entry.kind, raw[idp_len:], check_national)
    return NetworkAddress(
        family=entry.family, is_group=is_group_afi(afi), idi=idi, dsp=dsp
    )


def encode_nsap(address: NetworkAddress) -> bytes:
    afi = address.afi()
    if afi is None:
        raise InternalNSAPError(
            f"no AFI for {address.family.name} with a {address.dsp.kind.value} DSP"
        )
    result = bytearray([afi])
    result.extend(_encode_idi(address))
    result.extend(_encode_dsp(address.dsp))
    return bytes(result)


def encode_nsap_hex(address: NetworkAddress) -> str:
    return binascii.hexlify(encode_nsap(address)).decode("ascii").upper()


def _decode_dsp(kind: DspKind, data: bytes, check_national: bool) -> DomainSpecificPart:
    if kind is DspKind.DECIMAL:
        return Decimal(tuple(unpack_digits(data)))
    if kind is DspKind.BINARY:
        return Binary(data)
    if kind is DspKind.URL:
        try:
            return Url(data.decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise MalformedDSPError("URL DSP is not valid UTF-8") from exc
    if kind is DspKind.NATIONAL and not check_national:
        return NationalCharacters(data)
    if not is_printable_ascii(data):
        raise NonISO646CharacterError(next(b for b in data if not 0x20 <= b <= 0x7E))
    if kind is DspKind.NATIONAL:
        return NationalCharacters(data)
    return IsoIec646(data)


def _encode_idi(address: NetworkAddress) -> bytes:
    idi = address.idi
    width = max_idi_digits(address.family)
    if len(idi) > width or not all(ch in "0123456789" for ch in idi):
        raise InternalNSAPError(f"IDI {idi!r} does not fit {address.family.name}")
    leading_zero = idi.startswith("0") and idi_leading_zero_significant(address.family)
    return pack_digits(
        [ord(ch) - 0x30 for ch in idi],
        width=width,
        padding_digit=1 if leading_zero else 0,
    )


def _encode_dsp(dsp: DomainSpecificPart) -> bytes:
    if isinstance(dsp, Decimal):
        try:
            return pack_digits(dsp.digits)
        except ValueError as exc:
            raise InternalNSAPError(str(exc)) from exc
    if isinstance(dsp, (Binary, IsoIec646, NationalCharacters)):
        return dsp.data
    if isinstance(dsp, Url):
        return dsp.url.encode("utf-8")
    if isinstance(dsp, IpAddress):
        return dsp.to_bytes()
    raise TypeError("Unsupported DSP type")


__all__ = ["decode_nsap", "encode_nsap", "encode_nsap_hex"]
