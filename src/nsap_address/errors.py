"""Exceptions raised while decoding, parsing or encoding NSAP addresses."""

from __future__ import annotations


class NSAPError(ValueError):
    """Base class for every NSAP codec failure."""

    default_message = "invalid NSAP address"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class NoAFIError(NSAPError):
    default_message = "NSAP has no AFI"


class NoIDIError(NSAPError):
    default_message = "NSAP has no IDI"


class NoDSPPrefixError(NSAPError):
    default_message = "NSAP string has no DSP after the IDI"


class TruncatedDSPError(NSAPError):
    default_message = "DSP is truncated"


class MalformedDSPError(NSAPError):
    default_message = "DSP is malformed"


class UnrecognizedNetworkTypeError(NSAPError):
    default_message = "unrecognized network type"


class IDPTruncatedError(NSAPError):
    """The octets end before the IDP does."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"IDP truncated: expected at least {expected} octets, got {actual}"
        )


class InvalidRightPaddingError(NSAPError):
    default_message = "invalid right padding nibble"


class NonDigitInIDIError(NSAPError):
    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"non-digit 0x{value:02X} in IDI")


class NonDecimalDigitInDSPError(NSAPError):
    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"non-decimal digit 0x{value:02X} in DSP")


class NonISO646CharacterError(NSAPError):
    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"character 0x{value:02X} is not printable ISO/IEC 646")


class InternalNSAPError(NSAPError):
    """The address fields are incoherent, e.g. no AFI exists for them."""

    default_message = "NSAP address fields are internally inconsistent"


class InvalidHexEncodingError(NSAPError):
    default_message = "invalid hexadecimal encoding"


class UnsupportedDSPTypeError(NSAPError):
    default_message = "unsupported DSP type"


class IDITooLongError(NSAPError):
    default_message = "IDI is too long for its network type"


__all__ = [
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
