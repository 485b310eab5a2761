"""
Command line entry point.

Usage:
    verify-login <role> <emailOrId> <password>

Prints exactly one result line on stdout. Exit status is 1 only when
the argument count is wrong.
"""

import logging
import sys

import click

from school_login.config import Settings
from school_login.errors import ArgumentCountError
from school_login.sdk.client import LoginClient


logger = logging.getLogger("school_login.cli")

EXPECTED_ARGS = 3


class RawArgsCommand(click.Command):
    """Command that records argv before click strips a leading ``--``."""

    def parse_args(self, ctx, args):
        ctx.meta["raw_args"] = list(args)
        return super().parse_args(ctx, args)


@click.command(
    cls=RawArgsCommand,
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
    add_help_option=False,
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def main(args):
    """Check ROLE, EMAIL_OR_ID and PASSWORD against the fixed accounts."""
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s:%(name)s:%(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("school_login").setLevel(settings.log_level)

    raw_args = click.get_current_context().meta["raw_args"]
    if len(raw_args) != EXPECTED_ARGS:
        logger.info("Expected %d arguments, got %d", EXPECTED_ARGS, len(raw_args))
        raise ArgumentCountError(len(raw_args), EXPECTED_ARGS)

    role, identifier, password = raw_args
    result = LoginClient().check(role, identifier, password)
    click.echo(result.render())
