"""Encode, decode and print X.213 Network Service Access Point addresses."""

from __future__ import annotations

from .address import INTERNET_IDI, NetworkAddress
from .afi import (
    Family,
    family_keyword,
    get_afi,
    group_to_individual,
    individual_to_group,
    is_group_afi,
    is_individual_afi,
    is_invalid_afi,
    lookup_afi,
    max_dsp_length,
    max_idi_digits,
    resolve_afi,
)
from .codec import decode_nsap, encode_nsap, encode_nsap_hex
from .dsp import (
    Binary,
    Decimal,
    DomainSpecificPart,
    DspKind,
    IpAddress,
    IsoIec646,
    NationalCharacters,
    Url,
)
from .errors import (
    IDITooLongError,
    IDPTruncatedError,
    InternalNSAPError,
    InvalidHexEncodingError,
    InvalidRightPaddingError,
    MalformedDSPError,
    NoAFIError,
    NoDSPPrefixError,
    NoIDIError,
    NonDecimalDigitInDSPError,
    NonDigitInIDIError,
    NonISO646CharacterError,
    NSAPError,
    TruncatedDSPError,
    UnrecognizedNetworkTypeError,
    UnsupportedDSPTypeError,
)
from .text import format_dsp, format_nsap, parse_dsp, parse_nsap

__all__ = [
    "NetworkAddress",
    "INTERNET_IDI",
    "Family",
    "DspKind",
    "DomainSpecificPart",
    "Decimal",
    "Binary",
    "IsoIec646",
    "NationalCharacters",
    "Url",
    "IpAddress",
    "decode_nsap",
    "encode_nsap",
    "encode_nsap_hex",
    "parse_nsap",
    "parse_dsp",
    "format_nsap",
    "format_dsp",
    "family_keyword",
    "get_afi",
    "group_to_individual",
    "individual_to_group",
    "is_group_afi",
    "is_individual_afi",
    "is_invalid_afi",
    "lookup_afi",
    "max_dsp_length",
    "max_idi_digits",
    "resolve_afi",
    "NSAPError",
    "NoAFIError",
    "NoIDIError",
    "NoDSPPrefixError",
    "TruncatedDSPError",
    "MalformedDSPError",
    "UnrecognizedNetworkTypeError",
    "IDPTruncatedError",
    "InvalidRightPaddingError",
    "NonDigitInIDIError",
    "NonDecimalDigitInDSPError",
    "NonISO646CharacterError",
    "InternalNSAPError",
    "InvalidHexEncodingError",
    "UnsupportedDSPTypeError",
    "IDITooLongError",
]
