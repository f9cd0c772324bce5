from dataclasses import dataclass
from typing import Sequence

from polygraphia.core.exceptions import InvalidInputError, InvalidKeyError
from polygraphia.services.arithmetic.modular import ALPHABET_SIZE, gcd, mod_inverse


@dataclass(frozen=True)
class Matrix:
    """
    Square integer matrix over a flat row-major store.

    Entries are unrestricted integers: determinant, minor and adjugate
    arithmetic never reduces, so intermediate values may be negative or
    larger than the alphabet. Python integers do not overflow, which keeps
    the cofactor expansion exact for any size.

    Instances are immutable. A cipher that changes its key builds a new
    matrix instead of editing one in place.
    """

    size: int
    data: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", tuple(int(x) for x in self.data))
        if self.size < 1:
            raise InvalidInputError(
                f"Matrix size must be at least 1, got {self.size}",
                {"size": self.size},
            )
        if len(self.data) != self.size * self.size:
            raise InvalidInputError(
                f"Matrix data length {len(self.data)} doesn't match size "
                f"{self.size}x{self.size}",
                {"size": self.size, "length": len(self.data)},
            )

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Matrix":
        """Build a matrix from a list of equal-length rows."""
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise InvalidInputError(
                "Matrix rows must all have the same length as the row count",
                {"rows": [len(row) for row in rows]},
            )
        return cls(size, tuple(x for row in rows for x in row))

    @classmethod
    def identity(cls, size: int) -> "Matrix":
        return cls(size, tuple(int(row == col) for row in range(size) for col in range(size)))

    def get(self, row: int, col: int) -> int:
        return self.data[row * self.size + col]

    def rows(self) -> list[list[int]]:
        return [list(self.data[r * self.size:(r + 1) * self.size]) for r in range(self.size)]

    def determinant(self) -> int:
        """
        Calculate the determinant.

        Closed forms cover sizes 1 to 3. Larger matrices use Laplace
        expansion along the first row, which is exponential in the size
        but exact.
        """
        g = self.get
        if self.size == 1:
            return self.data[0]
        if self.size == 2:
            return g(0, 0) * g(1, 1) - g(0, 1) * g(1, 0)
        if self.size == 3:
            return (
                g(0, 0) * (g(1, 1) * g(2, 2) - g(1, 2) * g(2, 1)) -
                g(0, 1) * (g(1, 0) * g(2, 2) - g(1, 2) * g(2, 0)) +
                g(0, 2) * (g(1, 0) * g(2, 1) - g(1, 1) * g(2, 0))
            )

        det = 0
        for col in range(self.size):
            sign = 1 if col % 2 == 0 else -1
            det += sign * g(0, col) * self.minor(0, col).determinant()
        return det

    def minor(self, skip_row: int, skip_col: int) -> "Matrix":
        """Return the matrix with one row and one column removed."""
        if self.size < 2:
            raise InvalidInputError("Cannot take a minor of a 1x1 matrix")
        data = tuple(
            self.get(row, col)
            for row in range(self.size)
            if row != skip_row
            for col in range(self.size)
            if col != skip_col
        )
        return Matrix(self.size - 1, data)

    def adjugate(self) -> "Matrix":
        """Transpose of the cofactor matrix."""
        if self.size == 1:
            return Matrix(1, (1,))

        adj = [0] * (self.size * self.size)
        for row in range(self.size):
            for col in range(self.size):
                sign = 1 if (row + col) % 2 == 0 else -1
                adj[col * self.size + row] = sign * self.minor(row, col).determinant()
        return Matrix(self.size, tuple(adj))

    def mod_inverse(self, modulus: int = ALPHABET_SIZE) -> "Matrix":
        """
        Calculate the inverse modulo ``modulus``.

        The inverse is the adjugate scaled by the modular inverse of the
        determinant, reduced entrywise.

        Raises:
            InvalidKeyError: If the determinant is not coprime with the modulus
        """
        det_mod = self.determinant() % modulus
        if gcd(det_mod, modulus) != 1:
            raise InvalidKeyError(
                f"Matrix determinant {det_mod} is not coprime with {modulus}",
                {"determinant": det_mod, "modulus": modulus},
            )

        det_inv = mod_inverse(det_mod, modulus)
        return Matrix(
            self.size,
            tuple((x * det_inv) % modulus for x in self.adjugate().data),
        )

    def multiply_vector(self, vector: Sequence[int]) -> list[int]:
        """Matrix-vector product. No modular reduction is applied."""
        if len(vector) != self.size:
            raise InvalidInputError(
                f"Vector length {len(vector)} doesn't match matrix size {self.size}",
                {"size": self.size, "length": len(vector)},
            )
        return [
            sum(self.get(row, col) * vector[col] for col in range(self.size))
            for row in range(self.size)
        ]

    def multiply(self, other: "Matrix") -> "Matrix":
        """Matrix-matrix product. No modular reduction is applied."""
        if other.size != self.size:
            raise InvalidInputError(
                f"Cannot multiply {self.size}x{self.size} by {other.size}x{other.size}",
            )
        n = self.size
        return Matrix(n, tuple(
            sum(self.get(row, k) * other.get(k, col) for k in range(n))
            for row in range(n)
            for col in range(n)
        ))

    def reduce(self, modulus: int = ALPHABET_SIZE) -> "Matrix":
        return Matrix(self.size, tuple(x % modulus for x in self.data))
