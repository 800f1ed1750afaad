# gauth/app/core/exceptions.py
"""Exceptions raised by the TOTP core. Only argument errors are hard failures."""


class GAuthError(Exception):
    pass


class InvalidArgumentError(GAuthError, ValueError):
    pass


class InvalidSecretLengthError(InvalidArgumentError):
    pass


class InvalidCodeLengthError(InvalidArgumentError):
    pass
