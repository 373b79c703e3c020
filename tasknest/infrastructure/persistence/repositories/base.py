"""Base repository: generic create and store-error translation."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Generic, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tasknest.domain.exceptions import ConflictException
from tasknest.infrastructure.exceptions import StoreOperationError
from tasknest.infrastructure.persistence.database import Base

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with create and the store_errors boundary.

    Every statement a subclass runs goes through store_errors() so driver
    exceptions never leave the repository untranslated.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    @asynccontextmanager
    async def store_errors(self, operation: str) -> AsyncIterator[None]:
        """Translate store errors into ConflictException / StoreOperationError.

        OSError covers connection failures and timeouts raised by the driver.
        """
        try:
            yield
        except IntegrityError as e:
            logger.warning("Integrity violation during %s", operation)
            raise ConflictException(self.model.__name__.lower()) from e
        except (SQLAlchemyError, OSError) as e:
            logger.exception("Store failure during %s", operation)
            raise StoreOperationError(operation) from e

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record; server defaults are loaded back before returning."""
        async with self.store_errors(f"{self.model.__name__}.create"):
            self.db.add(obj)
            await self.db.flush()
            await self.db.refresh(obj)
        return obj
