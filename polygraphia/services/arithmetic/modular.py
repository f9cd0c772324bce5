from polygraphia.core.exceptions import InvalidInputError

# Letters map to indices 0-25, every cipher reduces modulo this value
ALPHABET_SIZE = 26


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm, ``gcd(a, 0) == a``."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def are_coprime(a: int, b: int) -> bool:
    """Check whether ``a`` and ``b`` share no factor other than 1."""
    return gcd(a, b) == 1


def mod_inverse(a: int, m: int = ALPHABET_SIZE) -> int:
    """
    Calculate the modular multiplicative inverse of ``a`` modulo ``m``.

    Uses the extended Euclidean algorithm. The result is the unique
    ``i`` in ``[1, m)`` with ``a * i % m == 1``.

    Args:
        a: Value to invert
        m: Modulus, at least 2

    Returns:
        The inverse of ``a`` modulo ``m``

    Raises:
        InvalidInputError: If ``m < 2`` or ``a`` and ``m`` are not coprime
    """
    if m < 2:
        raise InvalidInputError(
            f"Modulus must be at least 2, got {m}",
            {"a": a, "m": m},
        )
    if not are_coprime(a, m):
        raise InvalidInputError(
            f"Modular inverse does not exist for {a} mod {m} (not coprime)",
            {"a": a, "m": m, "gcd": gcd(a, m)},
        )

    def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
        if a == 0:
            return b, 0, 1
        g, x1, y1 = extended_gcd(b % a, a)
        return g, y1 - (b // a) * x1, x1

    _, x, _ = extended_gcd(a % m, m)
    return x % m
