"""
User Domain Model - Pure business entity.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional
from enum import Enum


class UserRole(Enum):
    """Roles accepted on the command line."""
    TEACHER = "teacher"
    STUDENT = "student"


@dataclass(frozen=True)
class User:
    """
    User entity - the identity reported after a successful login.

    Domain rules:
    - user_id is the display id (T001, STU001), not the login identifier
    - Students have no email
    """
    user_id: str
    display_name: str
    role: UserRole
    email: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict."""
        return {
            "user_id": self.user_id,
            "display_name": self.display_name,
            "role": self.role.value,
            "email": self.email,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        """Deserialize from dict."""
        return cls(
            user_id=data["user_id"],
            display_name=data["display_name"],
            role=UserRole(data["role"]),
            email=data.get("email"),
        )
