"""Packed BCD helpers for NSAP IDIs and decimal DSPs.

Digits are packed two per octet, high nibble first. An odd digit count
leaves the final low nibble holding ``RIGHT_PAD`` (0xF).
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from ..errors import InvalidRightPaddingError, NSAPError, NonDecimalDigitInDSPError

RIGHT_PAD = 0x0F


def pack_digits(
    digits: Sequence[int], width: Optional[int] = None, padding_digit: int = 0
) -> bytes:
    """Pack *digits*, first left-padding to *width* digits with *padding_digit*."""

    values: List[int] = []
    if width is not None:
        values.extend([padding_digit] * (width - len(digits)))
    for digit in digits:
        if not 0 <= digit <= 9:
            raise ValueError(f"Unsupported BCD digit {digit!r}")
        values.append(digit)
    if len(values) % 2:
        values.append(RIGHT_PAD)
    out = bytearray()
    for i in range(0, len(values), 2):
        out.append((values[i] << 4) | values[i + 1])
    return bytes(out)


def unpack_digits(
    data: bytes,
    padding_digit: Optional[int] = None,
    invalid_digit: Callable[[int], NSAPError] = NonDecimalDigitInDSPError,
) -> List[int]:
    """Unpack BCD octets into digit values.

    When *padding_digit* is given, leading occurrences of it are dropped.
    A single ``RIGHT_PAD`` nibble ends the digits. This is stricter than
    only refusing a second ``RIGHT_PAD``: any nibble after the first one
    raises ``InvalidRightPaddingError``, a digit included. Any other
    nibble above 9 is raised via *invalid_digit*.
    """

    digits: List[int] = []
    in_left_padding = padding_digit is not None
    seen_right_pad = False
    for byte in data:
        for nibble in (byte >> 4, byte & 0x0F):
            if in_left_padding and nibble == padding_digit:
                continue
            in_left_padding = False
            if seen_right_pad:
                raise InvalidRightPaddingError()
            if nibble == RIGHT_PAD:
                seen_right_pad = True
                continue
            if nibble > 9:
                raise invalid_digit(nibble)
            digits.append(nibble)
    return digits


def digits_to_int(digits: Sequence[int]) -> int:
    value = 0
    for digit in digits:
        value = value * 10 + digit
    return value


__all__ = ["RIGHT_PAD", "pack_digits", "unpack_digits", "digits_to_int"]
