"""Big integer and fixed-width byte helpers shared by the SRP code.

All integers travel big-endian and unsigned, every group element is
padded to ``SRP_LEN_BYTES`` before hashing.
"""

import hashlib
from typing import Union

from ..constants import SRP_LEN_BYTES


def h(*parts: bytes) -> bytes:
    """H(data) := sha256(data)"""
    hashed = hashlib.sha256()
    for part in parts:
        hashed.update(part)
    return hashed.digest()


def bytes_to_long(binary: bytes) -> int:
    return int.from_bytes(binary, 'big')


def long_to_bytes(num: int, num_bytes: int) -> bytes:
    return num.to_bytes(num_bytes, 'big')


def to_bytes(data: Union[str, bytes]) -> bytes:
    return data.encode() if isinstance(data, str) else bytes(data)


def modpow(base: int, exponent: int, modulus: int) -> int:
    if exponent < 0:
        raise ValueError(f"exponent must be unsigned, got {exponent}")
    if modulus <= 0:
        raise ValueError(f"modulus must be positive, got {modulus}")
    return pow(base, exponent, modulus)


def mod_sub(left: int, right: int, modulus: int) -> int:
    """(left - right) mod modulus, always in [0, modulus)."""
    return (left - right) % modulus


def pad_to_256(binary: bytes) -> bytes:
    """
    Left-pad big-endian bytes with zeros up to 256 bytes.

    :raises ValueError: input is longer than 256 bytes
    """
    if len(binary) > SRP_LEN_BYTES:
        raise ValueError(f"Can't pad {len(binary)} bytes to {SRP_LEN_BYTES}, value is too long")
    return bytes(SRP_LEN_BYTES - len(binary)) + bytes(binary)


def xor_equal_length(left: bytes, right: bytes) -> bytes:
    if len(left) != len(right):
        raise ValueError(f"xor length mismatch: {len(left)} != {len(right)}")
    return bytes(x ^ y for x, y in zip(left, right))
