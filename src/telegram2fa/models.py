"""Dataclasses."""
from collections import namedtuple
from dataclasses import dataclass, field, asdict
from typing import Optional, Union

from typing_extensions import Self

from .constants import KDF_ALGO_NAME, INPUT_CHECK_PASSWORD_SRP, INPUT_CHECK_PASSWORD_EMPTY

TwoFactorAuth = namedtuple("TwoFactorAuth", ("m1", "g_a"))


@dataclass(frozen=True)
class PasswordKdfAlgo:
    """
    SHA256SHA256PBKDF2HMACSHA512iter100000SHA256ModPow parameters.

    Attributes:
        salt1: first salt, extended with 32 random bytes on every new password
        salt2: second salt
        g: generator
        p: 2048-bit big-endian modulus
    """
    salt1: bytes
    salt2: bytes
    g: int
    p: bytes

    def __str__(self):
        return f"<PasswordKdfAlgo [g: {self.g}, p: {len(self.p)} bytes, salt1: {len(self.salt1)} bytes]>"

    def to_dict(self) -> dict[str, any]:
        """
        Object to dict

        :returns: :py:obj:`dict`
        """
        return {'_': KDF_ALGO_NAME, **asdict(self)}

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> Optional[Self]:
        """
        Dict to object, ``None`` for a missing or unknown algorithm.

        :returns: :py:obj:`PasswordKdfAlgo` or ``None``
        """
        if not data:
            return None
        if data.get('_', KDF_ALGO_NAME) != KDF_ALGO_NAME:
            return None
        return cls(
            salt1=bytes(data['salt1']),
            salt2=bytes(data['salt2']),
            g=int(data['g']),
            p=bytes(data['p']),
        )


@dataclass(frozen=True)
class AccountPassword:
    """Server password information (account.getPassword)."""
    has_password: bool = False
    hint: Optional[str] = None
    current_algo: Optional[PasswordKdfAlgo] = None
    new_algo: Optional[PasswordKdfAlgo] = None
    srp_id: Optional[int] = None
    srp_b: Optional[bytes] = None
    secure_random: bytes = b''
    has_recovery: bool = False
    email_unconfirmed_pattern: Optional[str] = None
    extra: dict = field(default_factory=dict)

    def __str__(self):
        return f"<AccountPassword [has_password: {self.has_password}, srp_id: {self.srp_id}]>"

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        """
        Dict to object.

        :param data: password information as returned by the server.
        :returns: :py:obj:`AccountPassword`
        """
        srp_b = data.get('srp_b')
        return cls(
            has_password=bool(data.get('has_password', False)),
            hint=data.get('hint'),
            current_algo=PasswordKdfAlgo.from_dict(data.get('current_algo')),
            new_algo=PasswordKdfAlgo.from_dict(data.get('new_algo')),
            srp_id=data.get('srp_id'),
            srp_b=bytes(srp_b) if srp_b is not None else None,
            secure_random=bytes(data.get('secure_random') or b''),
            has_recovery=bool(data.get('has_recovery', False)),
            email_unconfirmed_pattern=data.get('email_unconfirmed_pattern'),
            extra=data,
        )


@dataclass(frozen=True)
class NewPasswordMaterial:
    """Algorithm with the extended salt and the password hash computed under it."""
    algo: PasswordKdfAlgo
    hash: bytes

    def __iter__(self):
        return iter((self.algo, self.hash))


@dataclass(frozen=True)
class InputCheckPasswordSrp:
    """Proof of password knowledge."""
    srp_id: int
    a: bytes
    m1: bytes

    def to_dict(self) -> dict[str, any]:
        return {'_': INPUT_CHECK_PASSWORD_SRP, 'srp_id': self.srp_id, 'A': self.a, 'M1': self.m1}


@dataclass(frozen=True)
class InputCheckPasswordEmpty:
    """There is no current password to prove."""

    def to_dict(self) -> dict[str, any]:
        return {'_': INPUT_CHECK_PASSWORD_EMPTY}


@dataclass(frozen=True)
class PasswordInputSettings:
    """New password settings."""
    new_algo: PasswordKdfAlgo
    new_password_hash: bytes
    hint: Optional[str] = None
    email: Optional[str] = None

    def to_dict(self) -> dict[str, any]:
        data = {
            'new_algo': self.new_algo.to_dict(),
            'new_password_hash': self.new_password_hash,
            'hint': self.hint,
            'email': self.email,
        }
        return {k: v for k, v in data.items() if v is not None}


@dataclass(frozen=True)
class GetPassword:
    """Request to get password information."""

    def to_dict(self) -> dict[str, any]:
        return {'_': 'account.getPassword'}


@dataclass(frozen=True)
class CheckPassword:
    """Request to sign in with the 2FA password."""
    password: InputCheckPasswordSrp

    def to_dict(self) -> dict[str, any]:
        return {'_': 'auth.checkPassword', 'password': self.password.to_dict()}


@dataclass(frozen=True)
class UpdatePasswordSettings:
    """Request to set, change the 2FA password."""
    password: Union[InputCheckPasswordSrp, InputCheckPasswordEmpty]
    new_settings: PasswordInputSettings

    def to_dict(self) -> dict[str, any]:
        return {
            '_': 'account.updatePasswordSettings',
            'password': self.password.to_dict(),
            'new_settings': self.new_settings.to_dict(),
        }
