"""Shared data-access behaviour for entity repositories."""

from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any, ClassVar, Generic, TypeVar

from sqlmodel import Session, select

from src.storefront.entities.core._base import Entity, EntityTable

EntityT = TypeVar("EntityT", bound=Entity)
TableT = TypeVar("TableT", bound=EntityTable)


class EntityRepository(Generic[EntityT, TableT]):
    """CRUD repository mapping a table model onto its domain entity.

    Subclasses declare the table, the entity, the persisted business
    ``fields`` and, optionally, a ``detail_class`` plus eager-load options used
    when listing with related records.

    Repositories only flush; committing or rolling back is left to the caller.
    """

    table_class: ClassVar[type[EntityTable]]
    entity_class: ClassVar[type[Entity]]
    detail_class: ClassVar[type[Entity] | None] = None
    fields: ClassVar[tuple[str, ...]] = ()

    def __init__(self, session: Session) -> None:
        self._session = session

    def _load_options(self) -> Sequence[Any]:
        """Eager-load options applied by ``list_all``."""
        return ()

    def _to_entity(self, row: Any, detail: bool = False) -> EntityT:
        model = self.detail_class if detail and self.detail_class else self.entity_class
        return model.model_validate(row, from_attributes=True)  # type: ignore[return-value]

    def _values(self, entity: EntityT) -> dict[str, Any]:
        return {name: getattr(entity, name) for name in self.fields}

    def list_all(self) -> list[EntityT]:
        statement = select(self.table_class).order_by(self.table_class.id)
        options = self._load_options()
        if options:
            statement = statement.options(*options)
        rows = self._session.exec(statement).all()
        return [self._to_entity(row, detail=True) for row in rows]

    def get(self, entity_id: int) -> EntityT | None:
        row = self._session.get(self.table_class, entity_id)
        if row is None:
            return None
        return self._to_entity(row)

    def create(self, entity: EntityT) -> EntityT:
        row = self.table_class(**self._values(entity))
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def update(self, entity: EntityT) -> EntityT:
        """Replace every persisted field of an existing row.

        Raises:
            ValueError: If no row has the entity's id.
        """
        row = self._session.get(self.table_class, entity.id)
        if row is None:
            raise ValueError(f"{self.entity_class.__name__} {entity.id} not found")

        for name, value in self._values(entity).items():
            setattr(row, name, value)
        row.updated_at = datetime.now(UTC)

        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def delete(self, entity_id: int) -> bool:
        row = self._session.get(self.table_class, entity_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True
