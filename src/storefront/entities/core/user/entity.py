"""User domain entity."""

from typing import Any

from pydantic import Field

from src.storefront.entities.core._base import Entity


class User(Entity):
    """A registered shopper.

    ``password_hash`` is excluded from serialization, so responses that embed
    a user (auth results, order and review includes) never expose it.
    """

    email: str = Field(description="Unique email address")
    name: str = Field(default="", description="Display name")
    password_hash: str = Field(default="", exclude=True, repr=False)

    def __eq__(self, other: Any) -> bool:
        """Compare users by business attributes, ignoring timestamps."""
        if not isinstance(other, User):
            return False

        return (
            self.id == other.id
            and self.email == other.email
            and self.name == other.name
        )

    def __hash__(self) -> int:
        return hash((self.id, self.email, self.name))
