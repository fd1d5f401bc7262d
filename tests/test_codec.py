"""Tests for the preferred binary encoding."""

from ipaddress import IPv4Address, IPv6Address

import pytest

from nsap_address import (
    Binary,
    Decimal,
    Family,
    IDPTruncatedError,
    InternalNSAPError,
    InvalidRightPaddingError,
    IpAddress,
    IsoIec646,
    MalformedDSPError,
    NationalCharacters,
    NetworkAddress,
    NoAFIError,
    NonDecimalDigitInDSPError,
    NonDigitInIDIError,
    NonISO646CharacterError,
    UnrecognizedNetworkTypeError,
    Url,
    decode_nsap,
    encode_nsap,
    encode_nsap_hex,
)
from nsap_address.afi import AFI_TABLE, individual_to_group, max_idi_digits
from nsap_address.utils.bcd import pack_digits

INTERNET_RFC_1006 = bytes.fromhex("540072872203010000000006")


def _minimal_nsap(afi, entry):
    width = max_idi_digits(entry.family)
    if entry.leading_zero:
        idi = pack_digits([0], width=width, padding_digit=1)
    else:
        idi = pack_digits([], width=width)
    return bytes([afi]) + idi


class TestDecode:
    def test_internet_telex(self):
        address = decode_nsap(INTERNET_RFC_1006)
        assert address.family is Family.F69
        assert not address.is_group
        assert address.idi == "00728722"
        assert address.dsp == Decimal((0, 3, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 6))

    def test_binary_icd(self):
        address = decode_nsap(bytes.fromhex("47872301020304"))
        assert address.family is Family.ISO_6523_ICD
        assert address.idi == "8723"
        assert address.dsp == Binary(b"\x01\x02\x03\x04")

    def test_decimal_dsp_right_padding(self):
        address = decode_nsap(bytes.fromhex("468723123f"))
        assert address.dsp == Decimal((1, 2, 3))

    def test_leading_zero_idi(self):
        address = decode_nsap(bytes.fromhex("58111111111111103f"))
        assert address.family is Family.E164
        assert address.idi == "03"

    def test_non_zero_padding_is_dropped(self):
        address = decode_nsap(bytes.fromhex("3600000000000123"))
        assert address.family is Family.X121
        assert address.idi == "123"

    def test_group(self):
        address = decode_nsap(bytes.fromhex("d7872301"))
        assert address.is_group
        assert address.family is Family.ISO_6523_ICD

    def test_local_iso_iec_646(self):
        address = decode_nsap(b"\x50hello world")
        assert address.family is Family.LOCAL
        assert address.idi == ""
        assert address.dsp == IsoIec646(b"hello world")

    def test_local_iso_iec_646_non_printable(self):
        with pytest.raises(NonISO646CharacterError) as excinfo:
            decode_nsap(b"\x50ab\x01")
        assert excinfo.value.value == 0x01

    def test_national_checked_by_default(self):
        with pytest.raises(NonISO646CharacterError):
            decode_nsap(b"\x51\xe9")

    def test_national_unchecked(self):
        address = decode_nsap(b"\x51\xe9", check_national=False)
        assert address.dsp == NationalCharacters(b"\xe9")

    def test_national_printable(self):
        assert decode_nsap(b"\x51abc").dsp == NationalCharacters(b"abc")

    def test_url(self):
        address = decode_nsap(b"\xff\x00\x01itot://localhost:109")
        assert address.family is Family.URL
        assert address.idi == "1"
        assert address.dsp == Url("itot://localhost:109")

    def test_url_not_utf8(self):
        with pytest.raises(MalformedDSPError):
            decode_nsap(b"\xff\x00\x01\xff")

    def test_empty(self):
        with pytest.raises(NoAFIError):
            decode_nsap(b"")

    @pytest.mark.parametrize("afi", [0x00, 0x60, 0x99, 0xFA])
    def test_unrecognized_afi(self, afi):
        with pytest.raises(UnrecognizedNetworkTypeError):
            decode_nsap(bytes([afi, 0, 0, 0, 0, 0, 0, 0, 0]))

    def test_truncated_idp(self):
        with pytest.raises(IDPTruncatedError) as excinfo:
            decode_nsap(b"\x47\x87")
        assert excinfo.value.expected == 3
        assert excinfo.value.actual == 2

    def test_non_digit_in_idi(self):
        with pytest.raises(NonDigitInIDIError) as excinfo:
            decode_nsap(bytes.fromhex("468a23"))
        assert excinfo.value.value == 0x0A

    def test_non_decimal_digit_in_dsp(self):
        with pytest.raises(NonDecimalDigitInDSPError) as excinfo:
            decode_nsap(bytes.fromhex("4687231c"))
        assert excinfo.value.value == 0x0C

    def test_double_right_padding(self):
        with pytest.raises(InvalidRightPaddingError):
            decode_nsap(bytes.fromhex("468723ff"))

    def test_digit_after_right_padding(self):
        with pytest.raises(InvalidRightPaddingError):
            decode_nsap(bytes.fromhex("4687231f23"))


class TestEncode:
    def test_internet_telex(self):
        address = NetworkAddress(
            Family.F69, False, "00728722", Decimal.from_str("03010000000006")
        )
        assert encode_nsap(address) == INTERNET_RFC_1006

    def test_odd_width_idi(self):
        address = NetworkAddress(Family.E164, False, "12345", Decimal())
        assert encode_nsap(address) == bytes.fromhex("44000000000012345f")

    def test_leading_zero_idi(self):
        address = NetworkAddress(Family.E164, False, "0123", Binary(b"\xaa"))
        assert encode_nsap(address) == bytes.fromhex("5911111111111012" + "3faa")

    def test_group(self):
        address = NetworkAddress(Family.ISO_6523_ICD, True, "8723", Binary(b"\x01"))
        assert encode_nsap(address) == bytes.fromhex("d7872301")

    def test_local_characters(self):
        address = NetworkAddress(Family.LOCAL, False, "", IsoIec646(b"abc"))
        assert encode_nsap(address) == b"\x50abc"
        address = NetworkAddress(Family.LOCAL, False, "", NationalCharacters(b"\xe9"))
        assert encode_nsap(address) == b"\x51\xe9"

    def test_url(self):
        address = NetworkAddress(Family.URL, False, "0001", Url("itot://localhost:109"))
        assert encode_nsap(address) == b"\xff\x00\x01itot://localhost:109"

    def test_ipv4(self):
        address = NetworkAddress(
            Family.IANA_ICP, False, "0001", IpAddress(IPv4Address("10.9.8.7"))
        )
        assert encode_nsap(address) == b"\x35\x00\x01\x0a\x09\x08\x07" + bytes(13)

    def test_ipv6(self):
        address = NetworkAddress(
            Family.IANA_ICP, False, "0000", IpAddress(IPv6Address("::1"))
        )
        assert encode_nsap(address) == b"\x35\x00\x00" + bytes(15) + b"\x01\x00"

    def test_ip_address_decodes_as_binary(self):
        address = NetworkAddress(
            Family.IANA_ICP, False, "0001", IpAddress(IPv4Address("10.9.8.7"))
        )
        decoded = decode_nsap(encode_nsap(address))
        assert decoded.dsp == Binary(b"\x0a\x09\x08\x07" + bytes(13))

    def test_no_afi_for_shape(self):
        address = NetworkAddress(Family.URL, False, "0001", Binary(b""))
        with pytest.raises(InternalNSAPError):
            encode_nsap(address)

    def test_idi_too_long(self):
        address = NetworkAddress(Family.ISO_6523_ICD, False, "12345", Binary(b""))
        with pytest.raises(InternalNSAPError):
            encode_nsap(address)

    def test_idi_not_digits(self):
        address = NetworkAddress(Family.ISO_6523_ICD, False, "87a3", Binary(b""))
        with pytest.raises(InternalNSAPError):
            encode_nsap(address)

    def test_url_has_no_group_form(self):
        address = NetworkAddress(Family.URL, True, "0001", Url("http://example.com"))
        with pytest.raises(InternalNSAPError):
            encode_nsap(address)

    def test_invalid_decimal_digit(self):
        address = NetworkAddress(Family.ISO_6523_ICD, False, "8723", Decimal((1, 12)))
        with pytest.raises(InternalNSAPError):
            encode_nsap(address)

    def test_hex(self):
        address = NetworkAddress(Family.ISO_6523_ICD, False, "8723", Binary(b"\xab"))
        assert encode_nsap_hex(address) == "478723AB"


class TestAfiStability:
    @pytest.mark.parametrize("entry", AFI_TABLE, ids=lambda e: f"{e.afi:02X}")
    def test_individual(self, entry):
        data = _minimal_nsap(entry.afi, entry)
        assert encode_nsap(decode_nsap(data))[0] == entry.afi

    @pytest.mark.parametrize(
        "entry",
        [e for e in AFI_TABLE if individual_to_group(e.afi) is not None],
        ids=lambda e: f"{e.afi:02X}",
    )
    def test_group(self, entry):
        group = individual_to_group(entry.afi)
        data = _minimal_nsap(group, entry)
        assert encode_nsap(decode_nsap(data))[0] == group

    def test_bytes_round_trip_when_idi_has_no_padding(self):
        data = bytes.fromhex("47872301020304")
        assert encode_nsap(decode_nsap(data)) == data
