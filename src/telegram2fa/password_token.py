"""Password token: server password information and the operations built on it."""

import asyncio
from functools import partial
from typing import Optional, Union

from .exceptions import MissingServerValue, PreconditionViolation
from .models import (
    AccountPassword,
    InputCheckPasswordEmpty,
    InputCheckPasswordSrp,
    NewPasswordMaterial,
    PasswordInputSettings,
    PasswordKdfAlgo,
    TwoFactorAuth,
    UpdatePasswordSettings,
)
from .utils.primes import PrimalityTest, is_probable_prime, validate_group
from .utils.two_factor_auth import calculate_2fa, generate_new_hash


class PasswordToken:
    """
    Holds the password information from the server, nothing else.

    Every method is a pure computation on that information and its arguments,
    the password is never stored.
    """
    def __init__(self, password: AccountPassword, is_prime: PrimalityTest = is_probable_prime):
        """
        :param password: parsed server password information.
        :type password: ``AccountPassword``
        :param is_prime: primality test for (g, p) validation. default Miller-Rabin from pycryptodome.
        :type is_prime: ``callable``
        """
        self.password = password
        self.is_prime = is_prime

    def __str__(self):
        return f"<PasswordToken [has_password: {self.has_password()}, hint: {self.hint()!r}]>"

    def has_password(self) -> bool:
        return self.password.has_password

    def hint(self) -> str:
        return self.password.hint or ''

    def srp_id(self) -> Optional[int]:
        return self.password.srp_id

    def srp_b(self) -> Optional[bytes]:
        return self.password.srp_b

    def secure_random(self) -> bytes:
        return self.password.secure_random

    def current_algo(self) -> Optional[PasswordKdfAlgo]:
        return self.password.current_algo

    def new_algo(self) -> Optional[PasswordKdfAlgo]:
        return self.password.new_algo

    def to_fa(self, current_password: Union[str, bytes], a: Optional[bytes] = None) -> TwoFactorAuth:
        """
        Compute M1 and g_a for the current password.

        Without ``a`` every call on the same token reuses the server's
        ``secure_random``, so each proof carries the same g_a. Fetch a new
        token with :py:meth:`TwoFactorClient.get_password_information` for
        every attempt, or pass a fresh ``a``.

        :param current_password: the password currently set on the account.
        :param a: ephemeral secret, default ``secure_random`` from the server.
        :returns: :py:obj:`TwoFactorAuth`
        :raises PreconditionViolation: account has no password
        :raises MissingServerValue: server did not send current_algo, srp_b, srp_id or secure_random
        :raises InvalidGroupParameters: (g, p) of current_algo is not a safe prime group
        """
        if not self.has_password():
            raise PreconditionViolation("Account has no password, nothing to prove")

        algo = self.current_algo()
        if algo is None:
            raise MissingServerValue("current_algo is missing or has an unknown type")
        if not self.srp_b():
            raise MissingServerValue("srp_b is missing")
        if self.srp_id() is None:
            raise MissingServerValue("srp_id is missing")
        a = a or self.secure_random()
        if not a:
            raise MissingServerValue("secure_random is missing and no ephemeral secret was given")

        validate_group(algo.g, algo.p, self.is_prime)

        return calculate_2fa(
            salt1=algo.salt1,
            salt2=algo.salt2,
            g=algo.g,
            p=algo.p,
            g_b=self.srp_b(),
            a=a,
            password=current_password,
        )

    def to_input_check_password_srp(
            self,
            current_password: Union[str, bytes],
            a: Optional[bytes] = None,
    ) -> InputCheckPasswordSrp:
        """Login/verification proof, ``{srp_id, A, M1}``."""
        m1, g_a = self.to_fa(current_password, a)
        return InputCheckPasswordSrp(srp_id=self.srp_id(), a=g_a, m1=m1)

    build_login_proof = to_input_check_password_srp

    async def to_input_check_password_srp_async(
            self,
            current_password: Union[str, bytes],
            a: Optional[bytes] = None,
    ) -> InputCheckPasswordSrp:
        """Same as :py:meth:`to_input_check_password_srp`, PBKDF2 runs in the default executor."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, partial(self.to_input_check_password_srp, current_password, a))

    def generate_new_hash(self, new_password: Union[str, bytes], **kwargs) -> NewPasswordMaterial:
        """
        New algorithm (salt1 extended) and password hash.

        :param new_password: the password to set.
        :param kwargs: passed to :py:func:`telegram2fa.utils.two_factor_auth.generate_new_hash`
        :returns: :py:obj:`NewPasswordMaterial`
        :raises MissingServerValue: server did not send new_algo
        """
        algo = self.new_algo()
        if algo is None:
            raise MissingServerValue("new_algo is missing or has an unknown type")
        kwargs.setdefault('is_prime', self.is_prime)
        return generate_new_hash(algo, new_password, **kwargs)

    build_new_password_material = generate_new_hash

    def build_password_settings(
            self,
            new_password: Union[str, bytes],
            current_password: Optional[Union[str, bytes]] = None,
            hint: Optional[str] = None,
            email: Optional[str] = None,
            **kwargs,
    ) -> UpdatePasswordSettings:
        """
        Request to set (no current password) or change (with current password) the password.

        :param new_password: the password to set.
        :param current_password: required if the account has a password, must be ``None`` otherwise.
        :param hint: password hint, passed through.
        :param email: recovery email, passed through.
        :returns: :py:obj:`UpdatePasswordSettings`
        :raises PreconditionViolation: current_password does not match the password state
        """
        if self.has_password() and current_password is None:
            raise PreconditionViolation("Account has a password, the current password is required to change it")
        if not self.has_password() and current_password is not None:
            raise PreconditionViolation("Account has no password, there is nothing to change")
        if self.new_algo() is None:
            raise MissingServerValue("new_algo is missing or has an unknown type")

        if current_password is None:
            password_check = InputCheckPasswordEmpty()
        else:
            password_check = self.to_input_check_password_srp(current_password)

        new_algo, new_hash = self.generate_new_hash(new_password, **kwargs)
        return UpdatePasswordSettings(
            password=password_check,
            new_settings=PasswordInputSettings(
                new_algo=new_algo,
                new_password_hash=new_hash,
                hint=hint,
                email=email,
            ),
        )
