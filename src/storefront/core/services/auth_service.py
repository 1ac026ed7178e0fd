"""Registration and login behind /api/auth."""

from dataclasses import dataclass

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from src.storefront.core.errors import (
    ConflictError,
    UnauthorizedError,
    ValidationError,
)
from src.storefront.core.security import PasswordHasher
from src.storefront.core.services.base import require, store_operation
from src.storefront.entities.core.user import User, UserRepository

INVALID_CREDENTIALS = "Invalid email or password"


@dataclass
class AuthResult:
    message: str
    user: User
    created: bool = False


class AuthService:
    """Dual-mode endpoint logic: ``auth_type`` selects register or login."""

    def __init__(self, session: Session, hasher: PasswordHasher) -> None:
        self._session = session
        self._users = UserRepository(session)
        self._hasher = hasher

    def authenticate(
        self,
        email: str | None,
        password: str | None,
        name: str | None = None,
        auth_type: str | None = None,
    ) -> AuthResult:
        require("Email and password are required", email, password)

        if auth_type == "register":
            user = self.register(email, password, name)
            return AuthResult(message="User registered", user=user, created=True)
        if auth_type == "login":
            user = self.login(email, password)
            return AuthResult(message="Login successful", user=user)

        raise ValidationError("Invalid type")

    def register(self, email: str, password: str, name: str | None = None) -> User:
        """Create a user with a hashed password.

        Raises:
            ConflictError: The email is already registered.
        """
        try:
            password_hash = self._hasher.hash(password)
        except ValueError as e:
            raise ValidationError("Password is too long") from e

        with store_operation(self._session, "Failed to register user"):
            try:
                user = self._users.create(
                    User(email=email, name=name or "", password_hash=password_hash)
                )
                self._session.commit()
            except IntegrityError as e:
                self._session.rollback()
                logger.info("Registration rejected: email already exists")
                raise ConflictError("Email already exists") from e

        logger.info("Registered user {}", user.id)
        return user

    def login(self, email: str, password: str) -> User:
        """Return the user whose stored hash matches ``password``.

        Unknown email and wrong password fail identically.
        """
        with store_operation(self._session, "Failed to log in"):
            user = self._users.get_by_email(email)

        if user is None or not self._hasher.verify(password, user.password_hash):
            logger.warning("Login failed")
            raise UnauthorizedError(INVALID_CREDENTIALS)

        logger.info("User {} logged in", user.id)
        return user
