"""
Login Client - High-level entry point for a login check.

Picks the account for the requested role and turns the
adapter's answer into a LoginResult.
"""

import logging
from typing import Optional, Dict, List
from school_login.ports.auth_port import AuthenticationPort
from school_login.adapters.static_accounts import (
    StaticAccountAdapter,
    TEACHER_ACCOUNT,
    STUDENT_ACCOUNT,
)
from school_login.domain.user import UserRole
from school_login.domain.result import LoginResult


logger = logging.getLogger("school_login.client")


class LoginClient:
    """
    Route a login attempt to the adapter for its role.

    Example:
        from school_login import LoginClient

        client = LoginClient()
        result = client.check("teacher", "teacher@school.edu", "password123")
        print(result.render())  # teacher_success|T001|John Doe
    """

    def __init__(self, accounts: Optional[Dict[UserRole, AuthenticationPort]] = None):
        """
        Initialize login client.

        Args:
            accounts: Adapter per role (default: the two static accounts)
        """
        if accounts is None:
            accounts = {
                UserRole.TEACHER: StaticAccountAdapter(TEACHER_ACCOUNT),
                UserRole.STUDENT: StaticAccountAdapter(STUDENT_ACCOUNT),
            }
        self._accounts = dict(accounts)

    def roles(self) -> List[str]:
        """Role tags this client accepts."""
        return [role.value for role in self._accounts]

    def check(self, role: str, identifier: str, password: str) -> LoginResult:
        """
        Check a login attempt.

        Args:
            role: Role tag, compared case-sensitively
            identifier: Email or id
            password: Plain text password

        Returns:
            LoginResult; never raises for bad credentials or roles
        """
        try:
            user_role = UserRole(role)
        except ValueError:
            logger.info("Rejected unknown role %r", role)
            return LoginResult.invalid_role()

        adapter = self._accounts.get(user_role)
        if adapter is None:
            logger.info("No account configured for role %s", user_role.value)
            return LoginResult.invalid_role()

        user = adapter.authenticate(identifier, password)
        if user is None:
            logger.info("Failed %s login for %s", user_role.value, mask_identifier(identifier))
            return LoginResult.failure(user_role)

        logger.info("Successful %s login for %s", user_role.value, user.user_id)
        return LoginResult.success(user)


def mask_identifier(identifier: str) -> str:
    """Mask an email or id for logs."""
    local, at, domain = identifier.partition("@")
    return f"{local[:2]}***{at}{domain}"
