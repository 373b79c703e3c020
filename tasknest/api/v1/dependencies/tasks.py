"""Task service dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from tasknest.application.services import ProfileEnrichmentService
from tasknest.application.use_cases.tasks import TaskSearchService, TaskService
from tasknest.core.config import get_settings
from tasknest.infrastructure.persistence.database import (
    get_db,
    get_db_transactional,
)
from tasknest.infrastructure.persistence.repositories import (
    ProfileRepository,
    TaskRepository,
)


def get_profile_enrichment_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProfileEnrichmentService:
    """Profile enrichment over the read session."""
    return ProfileEnrichmentService(ProfileRepository(db))


def _build_task_service(db: AsyncSession) -> TaskService:
    return TaskService(
        task_repo=TaskRepository(db),
        enrichment=ProfileEnrichmentService(ProfileRepository(db)),
        max_list_limit=get_settings().list_max_limit,
    )


def get_task_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TaskService:
    """TaskService for read routes (no commit)."""
    return _build_task_service(db)


def get_task_service_rw(
    db: Annotated[AsyncSession, Depends(get_db_transactional, scope="function")],
) -> TaskService:
    """TaskService for write routes; the transaction commits before the response is sent."""
    return _build_task_service(db)


def get_task_search_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    enrichment: Annotated[
        ProfileEnrichmentService, Depends(get_profile_enrichment_service)
    ],
) -> TaskSearchService:
    """TaskSearchService capped at settings.search_max_results."""
    return TaskSearchService(
        task_repo=TaskRepository(db),
        enrichment=enrichment,
        max_results=get_settings().search_max_results,
    )
