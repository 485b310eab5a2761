"""
Authentication Port - Interface for checking a login.

Implementations:
- StaticAccountAdapter: one fixed account compiled into the package
"""

from abc import ABC, abstractmethod
from typing import Optional
from school_login.domain.user import User


class AuthenticationPort(ABC):
    """Port: Check an identifier and password for one role."""

    @abstractmethod
    def authenticate(self, identifier: str, password: str) -> Optional[User]:
        """
        Authenticate an identifier and password.

        Args:
            identifier: Email or id typed by the user
            password: Plain text password

        Returns:
            User if both match, None otherwise
        """
        pass

    def verify(self, identifier: str, password: str) -> bool:
        """
        Check credentials without building the user.

        Returns:
            True if valid, False otherwise
        """
        return self.authenticate(identifier, password) is not None
