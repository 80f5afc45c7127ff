"""Client side of the SRP exchange for two-factor authentication passwords."""

from .client import TwoFactorClient
from .exceptions import InvalidGroupParameters, MissingServerValue, PreconditionViolation, UnsupportedGenerator
from .models import AccountPassword, PasswordKdfAlgo, TwoFactorAuth
from .password_token import PasswordToken
from .utils.primes import is_valid_group
from .utils.two_factor_auth import calculate_2fa, generate_new_hash
