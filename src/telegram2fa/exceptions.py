"""Exceptions"""


class InvalidGroupParameters(Exception):
    """
    Server sent a modulus/generator pair that is not a safe prime group,
    re-fetch password information and retry
    """


class UnsupportedGenerator(InvalidGroupParameters):
    """Generator is not one of 2, 3, 4, 5, 6, 7"""


class MissingServerValue(Exception):
    """Server did not supply a value required for this operation"""


class PreconditionViolation(Exception):
    """Operation is not allowed in the current password state"""
