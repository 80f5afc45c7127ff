"""Secure Remote Password(SRP) for two-factor authentication.
https://core.telegram.org/api/srp

p       A large safe prime (p = 2q+1, where q is prime), 256 bytes big-endian
        All arithmetic is done modulo p.
g       A generator modulo p
k       Multiplier parameter, k = H(p | g)
salt1   Server salt, extended by the client on every new password
salt2   Server salt
H()     SHA256
SH()    Salted hash, SH(data, salt) = H(salt | data | salt)
x       Private key, PH2(password, salt1, salt2)
v       Password verifier, g^x
a, g_a  Client ephemeral secret and public value
g_b     Server public ephemeral value
u       Scrambling parameter, H(g_a | g_b)
k_a     Session key, H(s)
M1      Client proof
"""
import hashlib
import os
from typing import Callable, Optional, Union

from ..constants import (
    NEW_SALT_LEN_BYTES,
    PBKDF2_HASH_NAME,
    PBKDF2_ITERATIONS,
    PBKDF2_KEY_LEN_BYTES,
    SRP_LEN_BYTES,
)
from ..models import NewPasswordMaterial, PasswordKdfAlgo, TwoFactorAuth
from .primes import PrimalityTest, is_probable_prime, validate_group
from .utils import bytes_to_long, h, long_to_bytes, mod_sub, modpow, pad_to_256, to_bytes, xor_equal_length


# SH(data, salt) := H(salt | data | salt)
def sh(data: bytes, salt: bytes) -> bytes:
    return h(salt, data, salt)


# PH1(password, salt1, salt2) := SH(SH(password, salt1), salt2)
def ph1(password: Union[str, bytes], salt1: bytes, salt2: bytes) -> bytes:
    return sh(sh(to_bytes(password), salt1), salt2)


# PH2(password, salt1, salt2) := SH(pbkdf2(sha512, PH1(password, salt1, salt2), salt1, 100000), salt2)
def ph2(password: Union[str, bytes], salt1: bytes, salt2: bytes) -> bytes:
    derived_key = hashlib.pbkdf2_hmac(
        PBKDF2_HASH_NAME,
        ph1(password, salt1, salt2),
        salt1,
        PBKDF2_ITERATIONS,
        PBKDF2_KEY_LEN_BYTES,
    )
    return sh(derived_key, salt2)


def calculate_2fa(
        *,
        salt1: bytes,
        salt2: bytes,
        g: int,
        p: bytes,
        g_b: bytes,
        a: bytes,
        password: Union[str, bytes],
) -> TwoFactorAuth:
    """
    Prepare the password for sending to the server for verification.

    Nothing here is random, the caller picks ``a``. (g, p) must already be
    validated, see :py:func:`telegram2fa.utils.primes.validate_group`.

    :returns: :py:obj:`TwoFactorAuth` with M1 and g_a that should be sent to the server
    """
    big_p = bytes_to_long(p)

    g_b = pad_to_256(g_b)
    a = pad_to_256(a)
    g_for_hash = pad_to_256(bytes([g]))

    big_g_b = bytes_to_long(g_b)
    big_a = bytes_to_long(a)

    # k := H(p | g)
    big_k = bytes_to_long(h(p, g_for_hash))

    # g_a := pow(g, a) mod p
    g_a = long_to_bytes(modpow(g, big_a, big_p), SRP_LEN_BYTES)

    # u := H(g_a | g_b)
    u = bytes_to_long(h(g_a, g_b))

    # x := PH2(password, salt1, salt2)
    x = bytes_to_long(ph2(password, salt1, salt2))

    # v := pow(g, x) mod p
    big_v = modpow(g, x, big_p)

    # k_v := (k * v) mod p
    k_v = (big_k * big_v) % big_p

    # t := (g_b - k_v) mod p
    big_t = mod_sub(big_g_b, k_v, big_p)

    # s_a := pow(t, a + u * x) mod p
    big_s_a = modpow(big_t, big_a + u * x, big_p)

    # k_a := H(s_a)
    k_a = h(long_to_bytes(big_s_a, SRP_LEN_BYTES))

    # M1 := H(H(p) xor H(g) | H(salt1) | H(salt2) | g_a | g_b | k_a)
    p_xor_g = xor_equal_length(h(p), h(g_for_hash))
    m1 = h(p_xor_g, h(salt1), h(salt2), g_a, g_b, k_a)

    return TwoFactorAuth(m1, g_a)


def extend_salt(salt1: bytes, random_bytes: Optional[Callable[[int], bytes]] = None) -> bytes:
    """salt1 | 32 fresh random bytes."""
    extension = (random_bytes or os.urandom)(NEW_SALT_LEN_BYTES)
    if len(extension) != NEW_SALT_LEN_BYTES:
        raise ValueError(f"random_bytes returned {len(extension)} bytes, expected {NEW_SALT_LEN_BYTES}")
    return salt1 + extension


def compute_password_hash(algo: PasswordKdfAlgo, password: Union[str, bytes]) -> bytes:
    """New password hash for an algorithm whose salt1 is already extended."""
    return ph2(password, algo.salt1, algo.salt2)


def generate_new_hash(
        algo: PasswordKdfAlgo,
        password: Union[str, bytes],
        random_bytes: Optional[Callable[[int], bytes]] = None,
        is_prime: PrimalityTest = is_probable_prime,
) -> NewPasswordMaterial:
    """
    Generate the algorithm and hash for setting or changing the password.

    salt1 of ``algo`` gets 32 fresh random bytes appended, exactly once per call.

    :param algo: ``new_algo`` from the server password information.
    :param password: the new password.
    :param random_bytes: source of the salt extension. default os.urandom
    :param is_prime: primality test used to validate (g, p).
    :returns: :py:obj:`NewPasswordMaterial`
    :raises InvalidGroupParameters: (g, p) of ``algo`` is not a safe prime group
    """
    validate_group(algo.g, algo.p, is_prime)

    new_algo = PasswordKdfAlgo(
        salt1=extend_salt(algo.salt1, random_bytes),
        salt2=algo.salt2,
        g=algo.g,
        p=algo.p,
    )
    return NewPasswordMaterial(new_algo, compute_password_hash(new_algo, password))
