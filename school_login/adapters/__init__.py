"""
Adapters - Implementations of ports.

Authentication:
- StaticAccountAdapter: one hardcoded account per role
"""

from school_login.adapters.static_accounts import (
    StaticAccount,
    StaticAccountAdapter,
    TEACHER_ACCOUNT,
    STUDENT_ACCOUNT,
)

__all__ = [
    "StaticAccount",
    "StaticAccountAdapter",
    "TEACHER_ACCOUNT",
    "STUDENT_ACCOUNT",
]
