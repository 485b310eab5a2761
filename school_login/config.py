"""
Settings - Environment driven configuration.

Only ambient behaviour is configurable. Accounts and output are fixed.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional


DEFAULT_PREFIX = "SCHOOL_LOGIN_"


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the CLI."""
    log_level: int = logging.WARNING

    @classmethod
    def from_env(
        cls,
        prefix: str = DEFAULT_PREFIX,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            prefix: Prefix for environment variables (default SCHOOL_LOGIN_)
            environ: Mapping to read instead of os.environ

        Returns:
            Settings instance
        """
        env = os.environ if environ is None else environ
        return cls(log_level=_parse_level(env.get(f"{prefix}LOG_LEVEL")))


def _parse_level(name: Optional[str]) -> int:
    if not name:
        return logging.WARNING
    level = logging.getLevelName(name.strip().upper())
    # getLevelName returns "Level <name>" for unknown names
    return level if isinstance(level, int) else logging.WARNING
