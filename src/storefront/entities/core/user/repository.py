"""User repository."""

from sqlmodel import select

from src.storefront.entities.core._repository import EntityRepository

from .entity import User
from .table import UserTable


class UserRepository(EntityRepository[User, UserTable]):
    """Data-access layer for users."""

    table_class = UserTable
    entity_class = User
    fields = ("email", "name", "password_hash")

    def get_by_email(self, email: str) -> User | None:
        statement = select(UserTable).where(UserTable.email == email)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return self._to_entity(row)
