"""
Base repository with generic CRUD operations.

All entity-specific repositories inherit from this. A repository is bound to
one AsyncSession for its lifetime (one request); every mutating call commits
before returning, so writes are visible immediately.
"""
from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from placementlog.core.database import Base
from placementlog.core.exceptions import APIException, StoreException
from placementlog.core.logging import get_logger

logger = get_logger(__name__)

# Generic type for SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository providing standard CRUD operations.

    Usage:
        class UserRepository(BaseRepository[User]):
            def __init__(self, db: AsyncSession):
                super().__init__(db, User)
    """

    def __init__(self, db: AsyncSession, model: Type[ModelType]):
        self.db = db
        self.model = model

    async def get_by_id(self, id: Any) -> Optional[ModelType]:
        """Get a single record by ID."""
        result = await self._execute(
            "fetch",
            select(self.model).where(self.model.id == id),
        )
        return result.scalar_one_or_none()

    async def add(self, **kwargs: Any) -> ModelType:
        """Insert a new record and commit."""
        instance = self.model(**kwargs)
        self.db.add(instance)
        await self._commit("insert", refresh=instance)
        return instance

    async def add_unique(self, conflict: APIException, **kwargs: Any) -> ModelType:
        """Insert a record whose unique constraint may already be taken; raise ``conflict`` if so."""
        instance = self.model(**kwargs)
        self.db.add(instance)
        try:
            await self.db.flush()
        except IntegrityError as exc:
            await self.db.rollback()
            logger.info("unique_violation", table=self.model.__tablename__)
            raise conflict from exc
        except SQLAlchemyError as exc:
            await self.db.rollback()
            raise self._store_error("insert", exc) from exc
        await self._commit("insert", refresh=instance)
        return instance

    async def delete(self, id: Any) -> bool:
        """Hard delete a record by ID."""
        result = await self._execute(
            "delete",
            delete(self.model).where(self.model.id == id),
        )
        await self._commit("delete")
        return result.rowcount > 0

    async def _execute(self, operation: str, statement: Any):
        """Run a statement, translating driver failures into StoreException."""
        try:
            return await self.db.execute(statement)
        except SQLAlchemyError as exc:
            await self.db.rollback()
            raise self._store_error(operation, exc) from exc

    async def _commit(self, operation: str, refresh: Optional[ModelType] = None) -> None:
        try:
            await self.db.commit()
            if refresh is not None:
                await self.db.refresh(refresh)
        except SQLAlchemyError as exc:
            await self.db.rollback()
            raise self._store_error(operation, exc) from exc

    def _store_error(self, operation: str, exc: SQLAlchemyError) -> StoreException:
        table = self.model.__tablename__
        logger.error(
            "store_error",
            table=table,
            operation=operation,
            exc_type=type(exc).__name__,
            exc_message=str(exc),
        )
        return StoreException(
            message=f"failed to {operation} {table}",
            details=str(exc.orig if getattr(exc, "orig", None) is not None else exc),
        )
