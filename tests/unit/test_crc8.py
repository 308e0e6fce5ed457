"""
Unit tests for the CRC-8 checksum.
"""

import pytest

from bytepack.core.crc8 import CRC8_POLYNOMIAL, Crc8, crc8


class TestCrc8:
    """Tests for the crc8 function."""

    def test_empty_input_is_zero(self):
        assert crc8(b"") == 0x00

    def test_standard_check_value(self):
        """CRC-8/SMBUS check value for '123456789' is 0xF4."""
        assert crc8(b"123456789") == 0xF4

    def test_single_byte(self):
        """With init 0 a single byte 0x01 yields the polynomial itself."""
        assert crc8([0x01]) == CRC8_POLYNOMIAL

    def test_known_payload(self):
        assert crc8([0x01, 0x02, 0x03]) == 0x48

    def test_leading_zero_byte_does_not_change_result(self):
        """A zero register stays zero through a zero byte."""
        assert crc8([0x00, 0x02]) == crc8([0x02]) == 0x0E

    def test_accepts_bytes_and_lists(self):
        assert crc8(b"\x01\x02\x03") == crc8([1, 2, 3])

    def test_deterministic(self):
        data = bytes(range(256))
        assert crc8(data) == crc8(data)

    @pytest.mark.parametrize("data", [b"\x00", b"\xff", b"\x12\x34", bytes(range(64))])
    def test_result_fits_in_a_byte(self, data):
        assert 0 <= crc8(data) <= 0xFF

    def test_appending_checksum_gives_zero_remainder(self):
        """Without a final XOR, data followed by its CRC checks to zero."""
        data = [0x10, 0x20, 0x30, 0x40]
        assert crc8(data + [crc8(data)]) == 0


class TestCrc8Class:
    """Tests for the Crc8 calculator object."""

    def test_defaults_match_function(self):
        assert Crc8().compute(b"123456789") == crc8(b"123456789")

    def test_custom_polynomial(self):
        """Polynomial 0x31 gives a different result from the default."""
        calculator = Crc8(polynomial=0x31)
        assert calculator.compute([0x01]) == 0x31
        assert calculator.compute([0x01]) != crc8([0x01])
