"""
Ports - Interfaces for authentication.

Hexagonal architecture: These define WHAT we need, not HOW.
Adapters provide the HOW.
"""

from school_login.ports.auth_port import AuthenticationPort

__all__ = [
    "AuthenticationPort",
]
