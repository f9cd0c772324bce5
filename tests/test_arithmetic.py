"""Tests for modular arithmetic and the matrix engine."""

import pytest

from polygraphia.core.exceptions import InvalidInputError, InvalidKeyError
from polygraphia.services.arithmetic import Matrix, are_coprime, gcd, mod_inverse


VALID_MULTIPLIERS = [1, 3, 5, 7, 9, 11, 15, 17, 19, 21, 23, 25]


class TestModularArithmetic:
    """Test gcd, coprimality and modular inverse."""

    def test_gcd(self):
        assert gcd(12, 8) == 4
        assert gcd(17, 26) == 1
        assert gcd(26, 13) == 13
        assert gcd(5, 26) == 1
        assert gcd(2, 26) == 2

    def test_gcd_with_zero(self):
        assert gcd(7, 0) == 7
        assert gcd(0, 26) == 26

    def test_are_coprime(self):
        assert are_coprime(5, 26)
        assert are_coprime(3, 26)
        assert not are_coprime(2, 26)
        assert not are_coprime(13, 26)

    def test_mod_inverse_known_values(self):
        assert mod_inverse(3, 26) == 9
        assert mod_inverse(5, 26) == 21
        assert mod_inverse(7, 26) == 15
        assert mod_inverse(9, 26) == 3
        assert mod_inverse(25, 26) == 25

    def test_mod_inverse_property(self):
        """Every valid multiplier has an inverse in [1, 26)."""
        for a in VALID_MULTIPLIERS:
            inv = mod_inverse(a, 26)
            assert 1 <= inv < 26
            assert (a * inv) % 26 == 1

    @pytest.mark.parametrize("a", [0, 2, 4, 13, 26])
    def test_mod_inverse_not_coprime(self, a):
        with pytest.raises(InvalidInputError):
            mod_inverse(a, 26)


class TestMatrix:
    """Test the square integer matrix engine."""

    @pytest.fixture
    def hill_key(self):
        """Matrix for the key "hill"."""
        return Matrix(2, [7, 8, 11, 11])

    def test_construction_length_mismatch(self):
        with pytest.raises(InvalidInputError):
            Matrix(2, [1, 2, 3])

    def test_construction_from_rows(self, hill_key):
        assert Matrix.from_rows([[7, 8], [11, 11]]) == hill_key
        assert hill_key.rows() == [[7, 8], [11, 11]]
        assert hill_key.get(1, 0) == 11

    def test_determinant_small(self):
        assert Matrix(1, [5]).determinant() == 5
        assert Matrix(2, [7, 8, 11, 11]).determinant() == -11
        assert Matrix.from_rows([[6, 24, 1], [13, 16, 10], [20, 17, 15]]).determinant() == 441

    def test_determinant_cofactor_expansion(self):
        matrix = Matrix.from_rows([
            [1, 0, 2, -1],
            [3, 0, 0, 5],
            [2, 1, 4, -3],
            [1, 0, 5, 0],
        ])
        assert matrix.determinant() == 30

    def test_determinant_identity(self):
        for n in range(1, 6):
            assert Matrix.identity(n).determinant() == 1

    def test_minor(self):
        matrix = Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        assert matrix.minor(0, 0).rows() == [[5, 6], [8, 9]]
        assert matrix.minor(1, 2).rows() == [[1, 2], [7, 8]]

    def test_adjugate(self, hill_key):
        assert hill_key.adjugate().rows() == [[11, -8], [-11, 7]]
        assert Matrix(1, [9]).adjugate().rows() == [[1]]

    def test_mod_inverse(self, hill_key):
        inverse = hill_key.mod_inverse(26)
        assert inverse.rows() == [[25, 22], [1, 23]]
        assert hill_key.multiply(inverse).reduce(26) == Matrix.identity(2)

    def test_mod_inverse_4x4(self):
        matrix = Matrix.from_rows([
            [1, 2, 3, 4],
            [0, 1, 5, 6],
            [0, 0, 3, 7],
            [0, 0, 0, 5],
        ])
        inverse = matrix.mod_inverse(26)
        assert matrix.multiply(inverse).reduce(26) == Matrix.identity(4)

    def test_mod_inverse_not_invertible(self):
        with pytest.raises(InvalidKeyError):
            Matrix(2, [0, 1, 2, 3]).mod_inverse(26)  # det = -2
        with pytest.raises(InvalidKeyError):
            Matrix(2, [1, 1, 1, 1]).mod_inverse(26)  # det = 0

    def test_multiply_vector_unreduced(self, hill_key):
        assert hill_key.multiply_vector([7, 4]) == [81, 121]

    def test_multiply_vector_length_mismatch(self, hill_key):
        with pytest.raises(InvalidInputError):
            hill_key.multiply_vector([1, 2, 3])

    def test_matrix_is_immutable(self, hill_key):
        with pytest.raises(AttributeError):
            hill_key.size = 3
