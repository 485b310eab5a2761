"""
Static Account Adapter - Fixed demo accounts.

WARNING: Passwords are stored and compared in plain text.
Replace with a real credential store behind AuthenticationPort.
"""

from dataclasses import dataclass
from typing import Optional
from school_login.ports.auth_port import AuthenticationPort
from school_login.domain.user import User, UserRole


@dataclass(frozen=True)
class StaticAccount:
    """One hardcoded login and the identity it reports."""
    role: UserRole
    identifier: str
    password: str
    user_id: str
    display_name: str
    email: Optional[str] = None

    def to_user(self) -> User:
        return User(
            user_id=self.user_id,
            display_name=self.display_name,
            role=self.role,
            email=self.email,
        )


TEACHER_ACCOUNT = StaticAccount(
    role=UserRole.TEACHER,
    identifier="teacher@school.edu",
    password="password123",
    user_id="T001",
    display_name="John Doe",
    email="teacher@school.edu",
)

STUDENT_ACCOUNT = StaticAccount(
    role=UserRole.STUDENT,
    identifier="STU001",
    password="student123",
    user_id="STU001",
    display_name="Alice Johnson",
)


class StaticAccountAdapter(AuthenticationPort):
    """
    Authenticate against a single fixed account.

    Matching is exact and case-sensitive; both identifier and
    password must match.
    """

    def __init__(self, account: StaticAccount):
        """
        Initialize static account adapter.

        Args:
            account: The only account this adapter accepts
        """
        self._account = account

    @property
    def role(self) -> UserRole:
        return self._account.role

    def authenticate(self, identifier: str, password: str) -> Optional[User]:
        """
        Authenticate against the fixed account.

        Args:
            identifier: Email or id
            password: Plain text password

        Returns:
            User if valid, None if invalid
        """
        if identifier == self._account.identifier and password == self._account.password:
            return self._account.to_user()
        return None
