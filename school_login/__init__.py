"""
School Login - Fixed-account credential checker

Hexagonal layout: domain entities, an authentication port, a static
account adapter and a small client that the CLI drives.

Usage:
    from school_login import LoginClient

    client = LoginClient()
    result = client.check("student", "STU001", "student123")
    print(result.render())  # student_success|STU001|Alice Johnson
"""

__version__ = "0.1.0"

from school_login.sdk.client import LoginClient
from school_login.domain.user import User, UserRole
from school_login.domain.result import LoginResult, LoginOutcome

__all__ = [
    "LoginClient",
    "User",
    "UserRole",
    "LoginResult",
    "LoginOutcome",
]
