"""Tests for the AFI classification table."""

import pytest

from nsap_address.afi import (
    AFI_TABLE,
    AFI_URL,
    FAMILY_TABLE,
    Family,
    family_keyword,
    get_afi,
    group_to_individual,
    idi_octets,
    idi_padding_digit,
    individual_to_group,
    is_group_afi,
    is_individual_afi,
    is_invalid_afi,
    lookup_afi,
    max_dsp_length,
    max_idi_digits,
    resolve_afi,
)
from nsap_address.dsp import DspKind


class TestGroupOffset:
    def test_round_trip_over_individual_range(self):
        for afi in range(0x10, 0x9A):
            group = individual_to_group(afi)
            assert 0xA0 <= group <= 0xF9
            assert group_to_individual(group) == afi

    @pytest.mark.parametrize("afi", [0x00, 0x0F, 0x9A, 0xA0, 0xFF])
    def test_individual_to_group_outside_range(self, afi):
        assert individual_to_group(afi) is None

    @pytest.mark.parametrize("afi", [0x00, 0x99, 0x9F, 0xFA, 0xFF])
    def test_group_to_individual_outside_range(self, afi):
        assert group_to_individual(afi) is None

    def test_range_predicates(self):
        assert is_individual_afi(0x10)
        assert is_individual_afi(0x99)
        assert is_group_afi(0xA0)
        assert is_group_afi(0xF9)
        assert is_invalid_afi(0x00)
        assert is_invalid_afi(0x9A)
        assert is_invalid_afi(0xFA)
        assert not is_invalid_afi(0x54)


class TestLookup:
    def test_every_entry_resolves_back(self):
        for entry in AFI_TABLE:
            assert lookup_afi(entry.afi) == entry
            afi = resolve_afi(entry.family, entry.kind, entry.leading_zero)
            assert afi == entry.afi

    def test_group_afi_resolves_to_individual_entry(self):
        entry = lookup_afi(0x54 + 0x90)
        assert entry.family is Family.F69
        assert entry.kind is DspKind.DECIMAL
        assert entry.leading_zero

    def test_unknown_afi(self):
        assert lookup_afi(0x60) is None
        assert lookup_afi(0x00) is None

    def test_url_afi(self):
        entry = lookup_afi(AFI_URL)
        assert entry.family is Family.URL
        assert entry.kind is DspKind.URL

    def test_leading_zero_ignored_where_not_significant(self):
        assert resolve_afi(Family.ISO_DCC, DspKind.DECIMAL, True) == 0x38
        assert resolve_afi(Family.IANA_ICP, DspKind.BINARY, True) == 0x35

    def test_leading_zero_selects_afi(self):
        assert resolve_afi(Family.X121, DspKind.DECIMAL, True) == 0x52
        assert resolve_afi(Family.X121, DspKind.DECIMAL, False) == 0x36
        assert resolve_afi(Family.E164, DspKind.BINARY, True) == 0x59

    def test_undefined_shapes(self):
        assert resolve_afi(Family.URL, DspKind.BINARY, False) is None
        assert resolve_afi(Family.X121, DspKind.ISO_IEC_646, False) is None
        assert resolve_afi(Family.X121, DspKind.IP_ADDRESS, False) is None

    def test_ip_address_uses_binary_icp(self):
        assert resolve_afi(Family.IANA_ICP, DspKind.IP_ADDRESS, True) == 0x35

    def test_local_character_afis(self):
        assert resolve_afi(Family.LOCAL, DspKind.ISO_IEC_646, False) == 0x50
        assert resolve_afi(Family.LOCAL, DspKind.NATIONAL, False) == 0x51

    def test_padding_digit(self):
        assert idi_padding_digit(0x52) == 1
        assert idi_padding_digit(0x52 + 0x90) == 1
        assert idi_padding_digit(0x36) == 0
        assert idi_padding_digit(0x47) == 0


class TestFamilyTable:
    def test_every_family_has_an_entry(self):
        assert set(FAMILY_TABLE) == set(Family)

    def test_pstn_keyword_shared(self):
        assert family_keyword(Family.E163) == "PSTN"
        assert family_keyword(Family.E164) == "PSTN"
        assert family_keyword(Family.F69) == "TELEX"
        assert family_keyword(Family.ISO_DCC) == "DCC"

    @pytest.mark.parametrize(
        "family, digits, octets",
        [
            (Family.X121, 14, 7),
            (Family.ISO_DCC, 3, 2),
            (Family.F69, 8, 4),
            (Family.E163, 12, 6),
            (Family.E164, 15, 8),
            (Family.ISO_6523_ICD, 4, 2),
            (Family.IANA_ICP, 4, 2),
            (Family.ITU_T_IND, 6, 3),
            (Family.LOCAL, 0, 0),
            (Family.URL, 4, 2),
        ],
    )
    def test_idi_lengths(self, family, digits, octets):
        assert max_idi_digits(family) == digits
        assert idi_octets(family) == octets

    def test_dsp_lengths(self):
        assert max_dsp_length(Family.X121, DspKind.DECIMAL) == 24
        assert max_dsp_length(Family.X121, DspKind.BINARY) == 12
        assert max_dsp_length(Family.IANA_ICP, DspKind.BINARY) == 17
        assert max_dsp_length(Family.LOCAL, DspKind.ISO_IEC_646) == 19
        assert max_dsp_length(Family.LOCAL, DspKind.NATIONAL) == 9
        assert max_dsp_length(Family.URL, DspKind.DECIMAL) is None
        assert max_dsp_length(Family.URL, DspKind.URL) == 255


class TestGetAfi:
    def test_first_octet(self):
        assert get_afi(b"\x47\x87\x23") == 0x47

    def test_empty(self):
        assert get_afi(b"") is None
