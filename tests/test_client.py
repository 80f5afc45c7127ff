import unittest
from unittest.mock import MagicMock, patch

import srp_vectors as vectors
from telegram2fa.client import TwoFactorClient
from telegram2fa.exceptions import InvalidGroupParameters, MissingServerValue, PreconditionViolation
from telegram2fa.models import (
    AccountPassword,
    CheckPassword,
    GetPassword,
    InputCheckPasswordEmpty,
    InputCheckPasswordSrp,
    UpdatePasswordSettings,
)
from telegram2fa.password_token import PasswordToken


class TestTwoFactorClient(unittest.TestCase):

    def setUp(self):
        self.logging_func = MagicMock()
        self.invoke = MagicMock()
        self.client = TwoFactorClient(self.invoke, logging_level=1, logging_func=self.logging_func)

    def logged(self) -> str:
        return '\n'.join(call.args[0] for call in self.logging_func.call_args_list)

    def test_get_password_information_from_dict(self):
        self.invoke.return_value = vectors.password_info_dict()
        token = self.client.get_password_information()

        self.assertIsInstance(token, PasswordToken)
        self.assertTrue(token.has_password())
        self.assertEqual(token.srp_b(), vectors.G_B)
        self.invoke.assert_called_once_with(GetPassword())

    def test_get_password_information_from_object(self):
        password = AccountPassword.from_dict(vectors.password_info_dict(has_password=False))
        self.invoke.return_value = password
        token = self.client.get_password_information()
        self.assertIs(token.password, password)

    def test_check_password(self):
        self.invoke.side_effect = [vectors.password_info_dict(), {'user': 'me'}]
        response = self.client.check_password('234567')

        self.assertEqual(response, {'user': 'me'})
        request = self.invoke.call_args_list[1].args[0]
        self.assertIsInstance(request, CheckPassword)
        self.assertEqual(request.password, InputCheckPasswordSrp(
            srp_id=987654321,
            a=vectors.EXPECTED_G_A,
            m1=vectors.EXPECTED_M1,
        ))
        self.assertIn("2FA password accepted", self.logged())

    def test_check_password_with_token(self):
        token = PasswordToken(AccountPassword.from_dict(vectors.password_info_dict()))
        self.invoke.return_value = True
        self.client.check_password('234567', token=token)
        self.invoke.assert_called_once()
        self.assertIsInstance(self.invoke.call_args.args[0], CheckPassword)

    def test_password_not_logged(self):
        self.invoke.side_effect = [vectors.password_info_dict(), True]
        self.client.check_password('234567')
        self.assertNotIn('234567', self.logged())

    @patch('telegram2fa.utils.two_factor_auth.os.urandom')
    def test_enable_password(self, mock_urandom):
        mock_urandom.return_value = vectors.SALT_EXTENSION
        self.invoke.side_effect = [vectors.password_info_dict(has_password=False), True]

        self.assertTrue(self.client.enable_password('hunter2', hint='hint', email='me@example.com'))

        request = self.invoke.call_args_list[1].args[0]
        self.assertIsInstance(request, UpdatePasswordSettings)
        self.assertIsInstance(request.password, InputCheckPasswordEmpty)
        self.assertEqual(request.new_settings.new_algo.salt1, vectors.SALT1 + vectors.SALT_EXTENSION)
        self.assertEqual(request.new_settings.new_password_hash, vectors.EXTENDED_SALT_HASH)
        self.assertEqual(request.new_settings.hint, 'hint')
        self.assertEqual(request.new_settings.email, 'me@example.com')
        self.assertIn("password set", self.logged())

    def test_enable_password_already_set(self):
        self.invoke.return_value = vectors.password_info_dict()
        with self.assertRaises(PreconditionViolation):
            self.client.enable_password('hunter2')
        self.invoke.assert_called_once_with(GetPassword())
        self.assertIn("use change_password", self.logged())

    def test_change_password(self):
        self.invoke.side_effect = [vectors.password_info_dict(), True]

        self.assertTrue(self.client.change_password('234567', 'hunter2'))

        request = self.invoke.call_args_list[1].args[0]
        self.assertIsInstance(request, UpdatePasswordSettings)
        self.assertEqual(request.password.m1, vectors.EXPECTED_M1)
        self.assertEqual(len(request.new_settings.new_algo.salt1), len(vectors.SALT1) + 32)
        self.assertIn("password changed", self.logged())

    def test_change_password_not_set(self):
        self.invoke.return_value = vectors.password_info_dict(has_password=False)
        with self.assertRaises(PreconditionViolation):
            self.client.change_password('old', 'new')
        self.invoke.assert_called_once_with(GetPassword())

    def test_invalid_group(self):
        algo = vectors.server_algo_dict()
        algo['g'] = 2
        self.invoke.return_value = vectors.password_info_dict(has_password=False, new_algo=algo)
        with self.assertRaises(InvalidGroupParameters):
            self.client.enable_password('hunter2')
        self.invoke.assert_called_once_with(GetPassword())
        self.assertIn("invalid group parameters", self.logged())

    def test_missing_server_value(self):
        self.invoke.return_value = vectors.password_info_dict(srp_b=None)
        with self.assertRaises(MissingServerValue):
            self.client.check_password('234567')
        self.invoke.assert_called_once_with(GetPassword())

    def test_logging_level_filters(self):
        client = TwoFactorClient(self.invoke, logging_level=5, logging_func=self.logging_func)
        self.invoke.side_effect = [vectors.password_info_dict(), True]
        client.check_password('234567')
        self.logging_func.assert_not_called()


if __name__ == '__main__':
    unittest.main()
