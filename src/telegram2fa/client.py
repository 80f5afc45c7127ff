"""Client for two-factor authentication password settings."""

from typing import Optional, Union

from .exceptions import InvalidGroupParameters, MissingServerValue, PreconditionViolation
from .logger import Logger
from .models import AccountPassword, CheckPassword, GetPassword
from .password_token import PasswordToken
from .utils.primes import PrimalityTest, is_probable_prime


class TwoFactorClient:
    """
    Client for two-factor authentication password settings.

    Transport is not handled here: every request object is passed to ``invoke``,
    which returns the server response.
    """
    def __init__(
            self,
            invoke: callable,
            logging_level: Optional[int] = 2,
            logging_func: Optional[callable] = print,
            is_prime: PrimalityTest = is_probable_prime,
    ):
        """
        :param invoke: sends a request object to the server and returns the response.
        :type invoke: ``callable``
        :param logging_level: logging level 1-5 (DEBUG, INFO, WARNING, ERROR, NONE), default 2[INFO].
        :type logging_level: ``int``
        :param logging_func: logging function. default print.
        :type logging_func: ``callable``
        :param is_prime: primality test for (g, p) validation.
        :type is_prime: ``callable``
        """
        self.invoke = invoke
        self.logger = Logger(logging_level, logging_func)
        self.is_prime = is_prime

    def get_password_information(self) -> PasswordToken:
        """
        Get password information: whether a password is set, hint, SRP parameters.

        :returns: :py:obj:`PasswordToken`
        """
        response = self.invoke(GetPassword())
        if isinstance(response, dict):
            response = AccountPassword.from_dict(response)
        self.logger.debug(f"got password information: has_password={response.has_password} srp_id={response.srp_id}")
        return PasswordToken(response, is_prime=self.is_prime)

    def check_password(self, password: Union[str, bytes], token: Optional[PasswordToken] = None) -> any:
        """
        Sign in with the Two-Factor Authentication(2FA) password.

        :param password: your 2FA password.
        :type password: ``str``
        :param token: password information, fetched if not given.
        :type token: ``PasswordToken``
        :returns: server response for the sign in.
        """
        token = token or self.get_password_information()
        request = CheckPassword(password=self._build(token.to_input_check_password_srp, password))
        response = self.invoke(request)
        self.logger.info("2FA password accepted", "green")
        return response

    def enable_password(
            self,
            password: Union[str, bytes],
            hint: Optional[str] = None,
            email: Optional[str] = None,
    ) -> bool:
        """
        Set the 2FA password on an account that has none.

        :param password: new password.
        :param hint: password hint.
        :param email: recovery email.
        :returns: :py:obj:`bool`
        :raises PreconditionViolation: the account already has a password, use :py:meth:`change_password`
        """
        token = self.get_password_information()
        if token.has_password():
            self.logger.error("password is already set, use change_password")
            raise PreconditionViolation("Password is already set, the current password is required to change it")

        request = self._build(token.build_password_settings, password, hint=hint, email=email)
        result = self.invoke(request)
        self.logger.info("password set", "green")
        return result

    def change_password(
            self,
            current_password: Union[str, bytes],
            new_password: Union[str, bytes],
            hint: Optional[str] = None,
            email: Optional[str] = None,
    ) -> bool:
        """
        Change the 2FA password, proving the current one.

        :param current_password: password currently set.
        :param new_password: new password.
        :param hint: password hint.
        :param email: recovery email.
        :returns: :py:obj:`bool`
        :raises PreconditionViolation: the account has no password, use :py:meth:`enable_password`
        """
        token = self.get_password_information()
        if not token.has_password():
            self.logger.error("password is not set, use enable_password")
            raise PreconditionViolation("Password is not set, there is nothing to change")

        request = self._build(
            token.build_password_settings,
            new_password,
            current_password=current_password,
            hint=hint,
            email=email,
        )
        result = self.invoke(request)
        self.logger.info("password changed", "green")
        return result

    def _build(self, func: callable, *args, **kwargs) -> any:
        try:
            return func(*args, **kwargs)
        except InvalidGroupParameters as exc:
            self.logger.error(f"server sent invalid group parameters: {exc}")
            raise
        except (MissingServerValue, PreconditionViolation) as exc:
            self.logger.error(f"can't build password request: {exc}")
            raise
