"""
Errors raised by the login checker.

Wrong credentials and unknown roles are results, not errors.
"""

import click


INVALID_ARGS = "invalid_args"


class LoginError(Exception):
    """Base class for school_login errors."""


class ArgumentCountError(LoginError, click.ClickException):
    """
    The command line did not carry exactly role, identifier and password.

    Shown as the bare ``invalid_args`` line on stdout with exit status 1.
    """

    exit_code = 1

    def __init__(self, received: int, expected: int = 3):
        super().__init__(f"expected {expected} arguments, got {received}")
        self.received = received
        self.expected = expected

    def show(self, file=None):
        click.echo(INVALID_ARGS, file=file)


class ResultFormatError(LoginError, ValueError):
    """A line could not be parsed as a login result."""
