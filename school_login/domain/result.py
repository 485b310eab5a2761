"""
Login Result - The single line a login check reports.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional
from enum import Enum

from school_login.domain.user import User, UserRole
from school_login.errors import ResultFormatError


SEPARATOR = "|"


class LoginOutcome(Enum):
    """Every outcome a completed check can have."""
    TEACHER_SUCCESS = "teacher_success"
    TEACHER_FAILURE = "teacher_failure"
    STUDENT_SUCCESS = "student_success"
    STUDENT_FAILURE = "student_failure"
    INVALID_ROLE = "invalid_role"

    @classmethod
    def for_role(cls, role: UserRole, success: bool) -> "LoginOutcome":
        return cls(f"{role.value}_{'success' if success else 'failure'}")

    @property
    def role(self) -> Optional[UserRole]:
        if self is LoginOutcome.INVALID_ROLE:
            return None
        return UserRole(self.value.split("_", 1)[0])

    @property
    def is_success(self) -> bool:
        return self.value.endswith("_success")


@dataclass(frozen=True)
class LoginResult:
    """
    Result of one credential check.

    Domain rules:
    - Success outcomes always carry the matched user
    - Failure and invalid_role outcomes never carry a user
    """
    outcome: LoginOutcome
    user: Optional[User] = None

    def __post_init__(self):
        if self.outcome.is_success and self.user is None:
            raise ValueError(f"{self.outcome.value} requires a user")
        if not self.outcome.is_success and self.user is not None:
            raise ValueError(f"{self.outcome.value} cannot carry a user")

    @classmethod
    def success(cls, user: User) -> "LoginResult":
        return cls(LoginOutcome.for_role(user.role, True), user)

    @classmethod
    def failure(cls, role: UserRole) -> "LoginResult":
        return cls(LoginOutcome.for_role(role, False))

    @classmethod
    def invalid_role(cls) -> "LoginResult":
        return cls(LoginOutcome.INVALID_ROLE)

    @property
    def is_success(self) -> bool:
        return self.outcome.is_success

    def render(self) -> str:
        """
        Render the result as its output line (without newline).

        Returns:
            "<outcome>" or "<outcome>|<display id>|<display name>"
        """
        if self.user is None:
            return self.outcome.value
        return SEPARATOR.join((self.outcome.value, self.user.user_id, self.user.display_name))

    @classmethod
    def parse(cls, line: str) -> "LoginResult":
        """
        Parse an output line back into a result.

        Args:
            line: One line as written by the CLI; trailing whitespace is ignored

        Returns:
            Parsed result

        Raises:
            ResultFormatError: If the line is not one of the result shapes
        """
        text = line.rstrip()
        head, _, rest = text.partition(SEPARATOR)

        try:
            outcome = LoginOutcome(head)
        except ValueError:
            raise ResultFormatError(f"Unrecognised login result: {text!r}") from None

        if not outcome.is_success:
            if rest or SEPARATOR in text:
                raise ResultFormatError(f"Unexpected fields after {head}: {text!r}")
            return cls(outcome)

        user_id, sep, display_name = rest.partition(SEPARATOR)
        if not sep or not user_id or not display_name:
            raise ResultFormatError(f"{head} requires an id and a name: {text!r}")

        return cls(outcome, User(user_id=user_id, display_name=display_name, role=outcome.role))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the JSON login response shape."""
        role = self.outcome.role
        return {
            "success": self.is_success,
            "role": role.value if role else None,
            "id": self.user.user_id if self.user else None,
            "name": self.user.display_name if self.user else None,
        }
