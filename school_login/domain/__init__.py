"""
Domain Models - Pure business entities.

No infrastructure dependencies. Domain logic only.
"""

from school_login.domain.user import User, UserRole
from school_login.domain.result import LoginResult, LoginOutcome

__all__ = [
    "User",
    "UserRole",
    "LoginResult",
    "LoginOutcome",
]
