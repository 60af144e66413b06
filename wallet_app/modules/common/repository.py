"""Repository abstractions for domain services."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Generic, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from .exceptions import ConstraintViolationError

ModelT = TypeVar("ModelT")

logger = logging.getLogger(__name__)


class AsyncRepository(Generic[ModelT]):
    """Base repository exposing the SQLAlchemy session.

    Subclasses set ``model`` to the ORM class they persist. Writes go through
    ``savepoint()`` and are only flushed; committing is left to the
    surrounding session scope.
    """

    model: type[ModelT]

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @property
    def session(self) -> AsyncSession:
        return self._session

    @asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        """Run a block of writes in a SAVEPOINT.

        A constraint breach rolls back only this block and surfaces as
        ``ConstraintViolationError``; earlier work in the transaction stays.
        Objects must be added and modified inside the block, since entering
        it flushes whatever is already pending.
        """
        try:
            async with self.session.begin_nested():
                yield
                await self.session.flush()
        except IntegrityError as exc:
            logger.warning("Integrity error on %s: %s", self.model.__tablename__, exc.orig)
            raise ConstraintViolationError([f"{self.model.__tablename__}: {exc.orig}"]) from exc

    async def add(self, instance: ModelT) -> ModelT:
        async with self.savepoint():
            self.session.add(instance)
        await self.session.refresh(instance)
        return instance

    async def _execute(self, stmt: Executable) -> Any:
        async with self.savepoint():
            result = await self.session.execute(stmt)
        return result

    async def _get_model(self, pk: Any) -> ModelT | None:
        if pk is None:
            return None
        stmt = select(self.model).where(self.model.id == pk)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def _delete_model(self, pk: Any) -> bool:
        model = await self._get_model(pk)
        if model is None:
            return False
        async with self.savepoint():
            await self.session.delete(model)
        return True

    async def delete_all(self) -> int:
        result = await self._execute(delete(self.model))
        return result.rowcount or 0

    @staticmethod
    def _require(**values: Any) -> None:
        missing = [name for name, value in values.items() if value is None]
        if missing:
            logger.warning("Rejected entity with missing fields: %s", ", ".join(missing))
            raise ConstraintViolationError.missing(missing)
