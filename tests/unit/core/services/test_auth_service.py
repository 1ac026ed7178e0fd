"""Unit tests for registration and login."""

import pytest
from sqlmodel import Session

from src.storefront.core.errors import ConflictError, UnauthorizedError, ValidationError
from src.storefront.core.security import PasswordHasher
from src.storefront.core.services import AuthService
from src.storefront.entities import UserRepository


@pytest.fixture
def auth_service(session: Session, hasher: PasswordHasher) -> AuthService:
    return AuthService(session, hasher)


class TestAuthService:
    """Test the dual-mode auth operation."""

    def test_register_creates_user(self, auth_service: AuthService, session: Session):
        result = auth_service.authenticate("a@example.com", "secret", "Ann", "register")

        assert result.created is True
        assert result.message == "User registered"
        assert result.user.email == "a@example.com"
        assert result.user.name == "Ann"

        stored = UserRepository(session).get_by_email("a@example.com")
        assert stored.password_hash != "secret"

    def test_register_without_name(self, auth_service: AuthService):
        result = auth_service.authenticate("a@example.com", "secret", auth_type="register")

        assert result.user.name == ""

    def test_register_duplicate_email(self, auth_service: AuthService):
        auth_service.authenticate("a@example.com", "secret", auth_type="register")

        with pytest.raises(ConflictError, match="Email already exists") as exc_info:
            auth_service.authenticate("a@example.com", "other", auth_type="register")

        assert exc_info.value.status_code == 400

    def test_login_success(self, auth_service: AuthService):
        auth_service.authenticate("a@example.com", "secret", auth_type="register")

        result = auth_service.authenticate("a@example.com", "secret", auth_type="login")

        assert result.created is False
        assert result.message == "Login successful"
        assert result.user.email == "a@example.com"

    def test_login_wrong_password(self, auth_service: AuthService):
        auth_service.authenticate("a@example.com", "secret", auth_type="register")

        with pytest.raises(UnauthorizedError, match="Invalid email or password") as exc_info:
            auth_service.authenticate("a@example.com", "wrong", auth_type="login")

        assert exc_info.value.status_code == 401

    def test_login_unknown_email(self, auth_service: AuthService):
        """Unknown emails fail exactly like wrong passwords."""
        with pytest.raises(UnauthorizedError, match="Invalid email or password"):
            auth_service.authenticate("nobody@example.com", "secret", auth_type="login")

    @pytest.mark.parametrize("email,password", [(None, "secret"), ("a@example.com", ""), (None, None)])
    def test_missing_credentials(self, auth_service: AuthService, email, password):
        with pytest.raises(ValidationError, match="Email and password are required"):
            auth_service.authenticate(email, password, auth_type="register")

    @pytest.mark.parametrize("auth_type", [None, "", "logout"])
    def test_invalid_type(self, auth_service: AuthService, auth_type):
        with pytest.raises(ValidationError, match="Invalid type"):
            auth_service.authenticate("a@example.com", "secret", auth_type=auth_type)

    def test_credentials_checked_before_type(self, auth_service: AuthService):
        with pytest.raises(ValidationError, match="Email and password are required"):
            auth_service.authenticate(None, None, auth_type="bogus")

    def test_overlong_password_rejected(self, auth_service: AuthService):
        with pytest.raises(ValidationError, match="Password is too long"):
            auth_service.authenticate("a@example.com", "x" * 100, auth_type="register")

    def test_result_user_hides_hash(self, auth_service: AuthService):
        result = auth_service.authenticate("a@example.com", "secret", auth_type="register")

        assert "password_hash" not in result.user.model_dump()
