"""Tests for Hill cipher engine."""

import pytest

from polygraphia.core.exceptions import EncryptionError, InvalidInputError, InvalidKeyError
from polygraphia.services.arithmetic import Matrix
from polygraphia.services.engines.polygraphic.hill import HillCipher


class TestHillCipher:
    """Test suite for Hill cipher engine."""

    @pytest.fixture
    def cipher(self):
        return HillCipher("hill")

    def test_key_matrix(self, cipher):
        assert cipher.name == "hill"
        assert cipher.key_size == 2
        assert cipher.key.rows() == [[7, 8], [11, 11]]
        assert cipher.inv_key.rows() == [[25, 22], [1, 23]]

    def test_key_times_inverse_is_identity(self, cipher):
        assert cipher.key.multiply(cipher.inv_key).reduce(26) == Matrix.identity(2)

    def test_encrypt_decrypt(self, cipher):
        assert cipher.encrypt("help") == "drpa"
        assert cipher.decrypt("drpa") == "help"

    def test_padding(self, cipher):
        """Odd-length text is padded with x to the block size."""
        assert cipher.prepare_text("cat") == "catx"
        ciphertext = cipher.encrypt("cat")
        assert ciphertext == "owfu"
        assert cipher.decrypt(ciphertext) == "catx"

    def test_non_letters_are_dropped(self, cipher):
        assert cipher.encrypt("He-lp!") == cipher.encrypt("help")

    def test_3x3_known_vector(self):
        cipher = HillCipher("GYBNQKURP")
        assert cipher.key_size == 3
        assert cipher.encrypt("ACT") == "poh"
        assert cipher.decrypt("POH") == "act"

    def test_1x1_key(self):
        cipher = HillCipher("d")
        assert cipher.inv_key.rows() == [[9]]
        assert cipher.encrypt("abc") == "adg"
        assert cipher.decrypt("adg") == "abc"

    def test_4x4_roundtrip(self):
        cipher = HillCipher("bcde abfg aadh aaaf")
        assert cipher.key_size == 4
        assert cipher.decrypt(cipher.encrypt("attack at dawn")) == "attackatdawn"

    @pytest.mark.parametrize("key", ["abc", "hello", "abcdefgh"])
    def test_key_not_perfect_square(self, key):
        with pytest.raises(InvalidKeyError):
            HillCipher(key)

    @pytest.mark.parametrize("key", ["abcd", "aaaa", "", "1234"])
    def test_key_not_invertible_or_empty(self, key):
        with pytest.raises(InvalidKeyError):
            HillCipher(key)

    def test_key_larger_than_maximum(self):
        """A 7x7 key exceeds the default 6x6 limit before any matrix work."""
        with pytest.raises(InvalidKeyError) as exc_info:
            HillCipher("b" * 49)
        assert exc_info.value.details == {"size": 7, "max_size": 6}

    def test_key_at_maximum(self):
        identity = "".join("b" if row == col else "a" for row in range(6) for col in range(6))
        cipher = HillCipher(identity)
        assert cipher.key_size == 6
        assert cipher.decrypt(cipher.encrypt("abcdef")) == "abcdef"

    def test_set_key(self, cipher):
        cipher.set_key("gybnqkurp")
        assert cipher.key_size == 3
        assert cipher.encrypt("act") == "poh"

    def test_set_key_rejects_invalid(self, cipher):
        with pytest.raises(InvalidKeyError):
            cipher.set_key("abcd")
        assert cipher.key.rows() == [[7, 8], [11, 11]]

    def test_empty_input(self, cipher):
        with pytest.raises(InvalidInputError):
            cipher.encrypt("")
        with pytest.raises(InvalidInputError):
            cipher.decrypt("")

    def test_no_letters(self, cipher):
        with pytest.raises(InvalidInputError):
            cipher.encrypt("1234")

    def test_close(self, cipher):
        cipher.close()
        assert cipher.key.data == (0, 0, 0, 0)
        assert cipher.inv_key.data == (0, 0, 0, 0)
        with pytest.raises(EncryptionError):
            cipher.encrypt("help")
