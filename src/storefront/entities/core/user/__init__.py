"""User entity module.

This module contains all User-related classes organized by responsibility:
- User: Domain entity; the password hash never leaves it when serialized
- UserTable: Database persistence model
- UserRepository: Data access layer
"""

from .entity import User
from .repository import UserRepository
from .table import UserTable

__all__ = ["User", "UserTable", "UserRepository"]
