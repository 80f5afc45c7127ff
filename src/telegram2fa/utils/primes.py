"""Safe prime group validation for server supplied (g, p)."""

from functools import partial
from typing import Callable

from Crypto.Util.number import isPrime

from ..constants import KNOWN_GOOD_PRIME, PRIMALITY_FALSE_POSITIVE_PROB, SRP_LEN_BYTES, SUPPORTED_GENERATORS
from ..exceptions import InvalidGroupParameters, UnsupportedGenerator
from .utils import bytes_to_long

PrimalityTest = Callable[[int], bool]

is_probable_prime = partial(isPrime, false_positive_prob=PRIMALITY_FALSE_POSITIVE_PROB)


def is_safe_prime(p: int, is_prime: PrimalityTest = is_probable_prime) -> bool:
    """Both p and (p - 1) / 2 are prime."""
    if p < 5:
        return False
    return bool(is_prime(p)) and bool(is_prime((p - 1) // 2))


def check_generator(p: int, g: int) -> bool:
    """
    Check that g generates the subgroup of order (p - 1) / 2.

    :raises UnsupportedGenerator: g is not in 2..7
    """
    if g == 2:
        return p % 8 == 7
    if g == 3:
        return p % 3 == 2
    if g == 4:
        return True
    if g == 5:
        return p % 5 in (1, 4)
    if g == 6:
        return p % 24 in (19, 23)
    if g == 7:
        return p % 7 in (3, 5, 6)
    raise UnsupportedGenerator(f"Unexpected g parameter: {g}, expected one of {SUPPORTED_GENERATORS}")


def check_p_prime_and_subgroup(p: bytes, g: int, is_prime: PrimalityTest = is_probable_prime) -> bool:
    big_p = bytes_to_long(p)
    if p != KNOWN_GOOD_PRIME and not is_safe_prime(big_p, is_prime):
        return False
    return check_generator(big_p, g)


def check_p_len(p: bytes) -> bool:
    return len(p) == SRP_LEN_BYTES


def is_valid_group(g: int, p: bytes, is_prime: PrimalityTest = is_probable_prime) -> bool:
    """
    Validation for parameters required for two-factor authentication.

    :param g: generator
    :param p: big-endian modulus, must be exactly 256 bytes
    :param is_prime: primality test, default Miller-Rabin from pycryptodome with error bound 2^-128
    :returns: :py:obj:`bool`
    :raises UnsupportedGenerator: p is a safe prime but g is not in 2..7
    """
    if not check_p_len(p):
        return False
    return check_p_prime_and_subgroup(p, g, is_prime)


def validate_group(g: int, p: bytes, is_prime: PrimalityTest = is_probable_prime) -> None:
    """Same as :py:func:`is_valid_group`, but raises :py:exc:`InvalidGroupParameters` instead of returning False."""
    if not check_p_len(p):
        raise InvalidGroupParameters(f"Modulus must be {SRP_LEN_BYTES} bytes, got {len(p)}")
    if g not in SUPPORTED_GENERATORS:
        raise UnsupportedGenerator(f"Unexpected g parameter: {g}, expected one of {SUPPORTED_GENERATORS}")
    if not check_p_prime_and_subgroup(p, g, is_prime):
        raise InvalidGroupParameters(f"Modulus is not a safe prime or g={g} does not generate its subgroup")
