"""AFI classification table for X.213 NSAP addresses.

Every AFI the codec understands is listed once in ``AFI_TABLE``; every
per-family limit is listed once in ``FAMILY_TABLE``. All other lookups
are derived from those two tables.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from .dsp import DspKind


class Family(Enum):
    X121 = "x121"
    ISO_DCC = "iso_dcc"
    F69 = "f69"
    E163 = "e163"
    E164 = "e164"
    ISO_6523_ICD = "iso_6523_icd"
    IANA_ICP = "iana_icp"
    ITU_T_IND = "itu_t_ind"
    LOCAL = "local"
    URL = "url"  # Defined, without a name, in ITU-T Rec. X.519.


AFI_URL = 0xFF
AFI_X121_DEC_LEADING_NON_ZERO = 0x36
AFI_X121_DEC_LEADING_ZERO = 0x52
AFI_X121_BIN_LEADING_NON_ZERO = 0x37
AFI_X121_BIN_LEADING_ZERO = 0x53
AFI_ISO_DCC_DEC = 0x38
AFI_ISO_DCC_BIN = 0x39
AFI_F69_DEC_LEADING_NON_ZERO = 0x40
AFI_F69_DEC_LEADING_ZERO = 0x54
AFI_F69_BIN_LEADING_NON_ZERO = 0x41
AFI_F69_BIN_LEADING_ZERO = 0x55
AFI_E163_DEC_LEADING_NON_ZERO = 0x42
AFI_E163_DEC_LEADING_ZERO = 0x56
AFI_E163_BIN_LEADING_NON_ZERO = 0x43
AFI_E163_BIN_LEADING_ZERO = 0x57
AFI_E164_DEC_LEADING_NON_ZERO = 0x44
AFI_E164_DEC_LEADING_ZERO = 0x58
AFI_E164_BIN_LEADING_NON_ZERO = 0x45
AFI_E164_BIN_LEADING_ZERO = 0x59
AFI_ISO_6523_ICD_DEC = 0x46
AFI_ISO_6523_ICD_BIN = 0x47
AFI_IANA_ICP_DEC = 0x34
AFI_IANA_ICP_BIN = 0x35
AFI_ITU_T_IND_DEC = 0x76
AFI_ITU_T_IND_BIN = 0x77
AFI_LOCAL_DEC = 0x48
AFI_LOCAL_BIN = 0x49
AFI_LOCAL_ISO_IEC_646 = 0x50
AFI_LOCAL_NATIONAL = 0x51

GROUP_AFI_OFFSET = 0x90


@dataclass(frozen=True)
class AfiEntry:
    afi: int
    family: Family
    kind: DspKind
    leading_zero: bool = False


@dataclass(frozen=True)
class FamilyInfo:
    keyword: str
    max_idi_digits: int
    leading_zero_significant: bool
    max_decimal_dsp: Optional[int]
    max_binary_dsp: int


_DEC = DspKind.DECIMAL
_BIN = DspKind.BINARY

AFI_TABLE: Tuple[AfiEntry, ...] = (
    AfiEntry(AFI_X121_DEC_LEADING_NON_ZERO, Family.X121, _DEC),
    AfiEntry(AFI_X121_DEC_LEADING_ZERO, Family.X121, _DEC, True),
    AfiEntry(AFI_X121_BIN_LEADING_NON_ZERO, Family.X121, _BIN),
    AfiEntry(AFI_X121_BIN_LEADING_ZERO, Family.X121, _BIN, True),
    AfiEntry(AFI_ISO_DCC_DEC, Family.ISO_DCC, _DEC),
    AfiEntry(AFI_ISO_DCC_BIN, Family.ISO_DCC, _BIN),
    AfiEntry(AFI_F69_DEC_LEADING_NON_ZERO, Family.F69, _DEC),
    AfiEntry(AFI_F69_DEC_LEADING_ZERO, Family.F69, _DEC, True),
    AfiEntry(AFI_F69_BIN_LEADING_NON_ZERO, Family.F69, _BIN),
    AfiEntry(AFI_F69_BIN_LEADING_ZERO, Family.F69, _BIN, True),
    AfiEntry(AFI_E163_DEC_LEADING_NON_ZERO, Family.E163, _DEC),
    AfiEntry(AFI_E163_DEC_LEADING_ZERO, Family.E163, _DEC, True),
    AfiEntry(AFI_E163_BIN_LEADING_NON_ZERO, Family.E163, _BIN),
    AfiEntry(AFI_E163_BIN_LEADING_ZERO, Family.E163, _BIN, True),
    AfiEntry(AFI_E164_DEC_LEADING_NON_ZERO, Family.E164, _DEC),
    AfiEntry(AFI_E164_DEC_LEADING_ZERO, Family.E164, _DEC, True),
    AfiEntry(AFI_E164_BIN_LEADING_NON_ZERO, Family.E164, _BIN),
    AfiEntry(AFI_E164_BIN_LEADING_ZERO, Family.E164, _BIN, True),
    AfiEntry(AFI_ISO_6523_ICD_DEC, Family.ISO_6523_ICD, _DEC),
    AfiEntry(AFI_ISO_6523_ICD_BIN, Family.ISO_6523_ICD, _BIN),
    AfiEntry(AFI_IANA_ICP_DEC, Family.IANA_ICP, _DEC),
    AfiEntry(AFI_IANA_ICP_BIN, Family.IANA_ICP, _BIN),
    AfiEntry(AFI_ITU_T_IND_DEC, Family.ITU_T_IND, _DEC),
    AfiEntry(AFI_ITU_T_IND_BIN, Family.ITU_T_IND, _BIN),
    AfiEntry(AFI_LOCAL_DEC, Family.LOCAL, _DEC),
    AfiEntry(AFI_LOCAL_BIN, Family.LOCAL, _BIN),
    AfiEntry(AFI_LOCAL_ISO_IEC_646, Family.LOCAL, DspKind.ISO_IEC_646),
    AfiEntry(AFI_LOCAL_NATIONAL, Family.LOCAL, DspKind.NATIONAL),
    AfiEntry(AFI_URL, Family.URL, DspKind.URL),
)

# IDI lengths are in digits. X121, F69, E163 and E164 are "up to"; the
# rest are exact.
FAMILY_TABLE: Dict[Family, FamilyInfo] = {
    Family.X121: FamilyInfo("X121", 14, True, 24, 12),
    Family.ISO_DCC: FamilyInfo("DCC", 3, False, 35, 17),
    Family.F69: FamilyInfo("TELEX", 8, True, 30, 15),
    Family.E163: FamilyInfo("PSTN", 12, True, 26, 13),
    Family.E164: FamilyInfo("PSTN", 15, True, 23, 11),
    Family.ISO_6523_ICD: FamilyInfo("ICD", 4, False, 34, 17),
    Family.IANA_ICP: FamilyInfo("ICP", 4, False, 34, 17),
    Family.ITU_T_IND: FamilyInfo("IND", 6, False, 32, 16),
    Family.LOCAL: FamilyInfo("LOCAL", 0, False, 38, 19),
    Family.URL: FamilyInfo("URL", 4, False, None, 255),
}

MAX_ISO_IEC_646_LEN_LOCAL = 19
MAX_NATIONAL_CHAR_LEN_LOCAL = 9

_BY_AFI: Dict[int, AfiEntry] = {entry.afi: entry for entry in AFI_TABLE}
_BY_SHAPE: Dict[Tuple[Family, DspKind, bool], int] = {
    (entry.family, entry.kind, entry.leading_zero): entry.afi for entry in AFI_TABLE
}


def is_individual_afi(afi: int) -> bool:
    return 0x10 <= afi <= 0x99


def is_group_afi(afi: int) -> bool:
    return 0xA0 <= afi <= 0xF9


def is_invalid_afi(afi: int) -> bool:
    return not is_individual_afi(afi) and not is_group_afi(afi)


def individual_to_group(afi: int) -> Optional[int]:
    if not is_individual_afi(afi):
        return None
    return afi + GROUP_AFI_OFFSET


def group_to_individual(afi: int) -> Optional[int]:
    if not is_group_afi(afi):
        return None
    return afi - GROUP_AFI_OFFSET


def lookup_afi(afi: int) -> Optional[AfiEntry]:
    """Return the table entry for *afi*, group AFIs included."""

    individual = group_to_individual(afi)
    return _BY_AFI.get(afi if individual is None else individual)


def resolve_afi(family: Family, kind: DspKind, idi_leading_zero: bool) -> Optional[int]:
    """Return the individual AFI for an address shape, or ``None`` if undefined.

    IP address DSPs are carried in the binary form of their family.
    """

    if kind is DspKind.IP_ADDRESS:
        if family is not Family.IANA_ICP:
            return None
        kind = DspKind.BINARY
    leading_zero = idi_leading_zero and FAMILY_TABLE[family].leading_zero_significant
    return _BY_SHAPE.get((family, kind, leading_zero))


def family_keyword(family: Family) -> str:
    return FAMILY_TABLE[family].keyword


def max_idi_digits(family: Family) -> int:
    return FAMILY_TABLE[family].max_idi_digits


def idi_leading_zero_significant(family: Family) -> bool:
    return FAMILY_TABLE[family].leading_zero_significant


def max_dsp_length(family: Family, kind: DspKind) -> Optional[int]:
    """Maximum DSP length: digits for decimal DSPs, octets otherwise."""

    info = FAMILY_TABLE[family]
    if kind is DspKind.DECIMAL:
        return info.max_decimal_dsp
    if family is Family.LOCAL and kind is DspKind.ISO_IEC_646:
        return MAX_ISO_IEC_646_LEN_LOCAL
    if family is Family.LOCAL and kind is DspKind.NATIONAL:
        return MAX_NATIONAL_CHAR_LEN_LOCAL
    return info.max_binary_dsp


def idi_padding_digit(afi: int) -> int:
    """The digit used to left-pad the IDI under *afi*."""

    entry = lookup_afi(afi)
    return 1 if entry is not None and entry.leading_zero else 0


def idi_octets(family: Family) -> int:
    return (max_idi_digits(family) + 1) // 2


def get_afi(data: bytes) -> Optional[int]:
    """Return the AFI octet of an encoded NSAP without decoding the rest."""

    return data[0] if data else None


__all__ = [
    "Family",
    "AfiEntry",
    "FamilyInfo",
    "AFI_TABLE",
    "FAMILY_TABLE",
    "AFI_URL",
    "GROUP_AFI_OFFSET",
    "is_individual_afi",
    "is_group_afi",
    "is_invalid_afi",
    "individual_to_group",
    "group_to_individual",
    "lookup_afi",
    "resolve_afi",
    "family_keyword",
    "max_idi_digits",
    "idi_leading_zero_significant",
    "max_dsp_length",
    "idi_padding_digit",
    "idi_octets",
    "get_afi",
]
