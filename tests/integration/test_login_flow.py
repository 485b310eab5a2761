"""
Integration tests for the login client.
"""

import logging
import pytest
from school_login import LoginClient, LoginOutcome, UserRole
from school_login.adapters import StaticAccountAdapter, TEACHER_ACCOUNT


class TestLoginFlow:
    """Test role dispatch and result building."""

    def setup_method(self):
        """Set up test fixtures."""
        self.client = LoginClient()

    def test_teacher_success(self):
        result = self.client.check("teacher", "teacher@school.edu", "password123")

        assert result.is_success
        assert result.render() == "teacher_success|T001|John Doe"

    def test_teacher_failure(self):
        result = self.client.check("teacher", "teacher@school.edu", "wrongpass")

        assert not result.is_success
        assert result.render() == "teacher_failure"

    def test_student_success(self):
        result = self.client.check("student", "STU001", "student123")

        assert result.render() == "student_success|STU001|Alice Johnson"

    def test_student_failure(self):
        assert self.client.check("student", "wrong", "student123").render() == "student_failure"

    def test_cross_role_credentials_fail(self):
        """Teacher credentials do not log in a student and vice versa."""
        assert self.client.check("student", "teacher@school.edu", "password123").render() == "student_failure"
        assert self.client.check("teacher", "STU001", "student123").render() == "teacher_failure"

    @pytest.mark.parametrize("role", ["admin", "Teacher", "STUDENT", "", " teacher"])
    def test_invalid_role(self, role):
        """Role is checked before credentials, case-sensitively."""
        result = self.client.check(role, "teacher@school.edu", "password123")

        assert result.outcome == LoginOutcome.INVALID_ROLE
        assert result.render() == "invalid_role"

    def test_roles(self):
        assert self.client.roles() == ["teacher", "student"]

    def test_unconfigured_role_is_invalid(self):
        """A client without a student adapter rejects the student role."""
        client = LoginClient(accounts={UserRole.TEACHER: StaticAccountAdapter(TEACHER_ACCOUNT)})

        assert client.roles() == ["teacher"]
        assert client.check("student", "STU001", "student123").render() == "invalid_role"

    def test_password_is_not_logged(self, caplog):
        """Logs mask the identifier and never carry the password."""
        caplog.set_level(logging.INFO, logger="school_login.client")

        self.client.check("teacher", "teacher@school.edu", "s3cret-guess")

        assert "Failed teacher login for te***@school.edu" in caplog.text
        assert "s3cret-guess" not in caplog.text
        assert "teacher@school.edu" not in caplog.text
