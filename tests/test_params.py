import pytest

from noir_helpers.common.params import BN254, BN254_MODULUS, FieldParams


class TestBN254:
    def test_sizes(self):
        assert BN254.modulus == BN254_MODULUS
        assert BN254.num_bits == 254
        assert BN254.num_bytes == 32
        assert BN254.max_exponent == 2**32

    def test_bit_tables_rebuild_modulus(self):
        le = [int(b) for b in BN254.mod_le_bits]
        assert len(le) == 254
        assert sum(bit << i for i, bit in enumerate(le)) == BN254_MODULUS
        assert [int(b) for b in BN254.mod_be_bits] == le[::-1]

    def test_byte_tables(self):
        be = [int(b) for b in BN254.mod_be_bytes]
        assert be[:4] == [48, 100, 78, 114]
        assert be[-1] == 1
        assert [int(b) for b in BN254.mod_le_bytes] == be[::-1]

    def test_tables_are_read_only(self):
        with pytest.raises(ValueError):
            BN254.mod_le_bits[0] = 0
        with pytest.raises(ValueError):
            BN254.mod_be_bytes[0] = 0

    def test_tables_are_cached(self):
        assert BN254.mod_le_bytes is BN254.mod_le_bytes

    def test_summary(self):
        text = BN254.summary()
        assert "bn254" in text
        assert hex(BN254_MODULUS) in text


class TestValidation:
    def test_derived_bit_size(self):
        tiny = FieldParams(name="tiny", modulus=97)
        assert tiny.num_bits == 7
        assert tiny.num_bytes == 1

    def test_even_modulus_rejected(self):
        with pytest.raises(ValueError, match="odd prime"):
            FieldParams(name="bad", modulus=100)

    def test_max_bit_size_must_cover_modulus(self):
        with pytest.raises(ValueError, match="max_bit_size"):
            FieldParams(name="bad", modulus=97, max_bit_size=6)

    def test_max_bit_size_may_equal_modulus_bits(self):
        assert FieldParams(name="tiny", modulus=97, max_bit_size=7).num_bits == 7
        assert BN254.max_bit_size == BN254_MODULUS.bit_length()

    def test_max_radix_power_of_two(self):
        with pytest.raises(ValueError, match="max_radix"):
            FieldParams(name="bad", modulus=97, max_radix=12)

    def test_frozen(self):
        with pytest.raises(Exception):
            BN254.modulus = 7
