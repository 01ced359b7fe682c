"""Generic data access over an ``AsyncSession``.

Every model in ``app.models`` carries ``id`` and ``deleted_at`` (see
``EntityMixin``); reads here never return soft-deleted rows.
"""

import logging
import uuid
from typing import Any, Generic, Protocol, Sequence, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base, utcnow
from app.errors import ConflictError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class ExistenceChecker(Protocol):
    """Anything that can tell whether a live record with this id exists."""

    async def exists(self, record_id: uuid.UUID) -> bool: ...


class Repository(Generic[ModelT]):
    def __init__(
        self,
        session: AsyncSession,
        model: type[ModelT],
        *,
        conflict_message: str | None = None,
    ) -> None:
        self.session = session
        self.model = model
        self.conflict_message = conflict_message

    def _live(self):
        return select(self.model).where(self.model.deleted_at.is_(None))

    async def find_one(self, *criteria: Any) -> ModelT | None:
        result = await self.session.execute(self._live().where(*criteria).limit(1))
        return result.scalars().first()

    async def find_many(
        self,
        *criteria: Any,
        order_by: Sequence[Any] | Any | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[ModelT]:
        stmt = self._live().where(*criteria)
        if order_by is None:
            stmt = stmt.order_by(self.model.created_at.desc())
        elif isinstance(order_by, (list, tuple)):
            stmt = stmt.order_by(*order_by)
        else:
            stmt = stmt.order_by(order_by)
        if offset:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get(self, record_id: uuid.UUID) -> ModelT | None:
        return await self.find_one(self.model.id == record_id)

    async def exists(self, record_id: uuid.UUID) -> bool:
        return await self.get(record_id) is not None

    async def insert(self, record: ModelT) -> ModelT:
        self.session.add(record)
        await self.flush()
        return record

    async def update_by_id(self, record_id: uuid.UUID, values: dict[str, Any]) -> ModelT | None:
        record = await self.get(record_id)
        if record is None:
            return None
        return await self.update(record, values)

    async def update(self, record: ModelT, values: dict[str, Any]) -> ModelT:
        for field, value in values.items():
            setattr(record, field, value)
        record.updated_at = utcnow()
        await self.flush()
        return record

    async def soft_delete_by_id(self, record_id: uuid.UUID) -> bool:
        record = await self.get(record_id)
        if record is None:
            return False
        await self.soft_delete(record)
        return True

    async def soft_delete(self, record: ModelT) -> ModelT:
        now = utcnow()
        record.deleted_at = now
        record.updated_at = now
        await self.flush()
        return record

    async def flush(self) -> None:
        """Flush pending writes, turning unique-index violations into ``ConflictError``."""
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            logger.warning("Integrity violation on %s: %s", self.model.__tablename__, exc.orig)
            raise ConflictError(self.conflict_message) from exc
