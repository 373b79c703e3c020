"""Task search use case: case-insensitive substring match on task name."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tasknest.core.identifiers import require_identifiers
from tasknest.domain.exceptions import ValidationException
from tasknest.shared.telemetry.tracing import add_span_attributes, traced

if TYPE_CHECKING:
    from tasknest.application.dtos.task import TaskSearchResult
    from tasknest.application.interfaces.repositories import ITaskRepository
    from tasknest.application.services.profile_enrichment import (
        ProfileEnrichmentService,
    )

DEFAULT_SEARCH_LIMIT = 50


class TaskSearchService:
    """Search tasks visible to the caller; results use the restricted projection."""

    def __init__(
        self,
        task_repo: "ITaskRepository",
        enrichment: "ProfileEnrichmentService",
        max_results: int = DEFAULT_SEARCH_LIMIT,
    ) -> None:
        self.task_repo = task_repo
        self.enrichment = enrichment
        self.max_results = max_results

    @traced("task.search")
    async def search(
        self, caller_id: str, text: str | None, limit: int | None = None
    ) -> list[TaskSearchResult]:
        """Return matches (possibly none). Blank text is rejected, not treated as match-all."""
        require_identifiers(caller_id=caller_id)
        query = text.strip() if isinstance(text, str) else ""
        if not query:
            raise ValidationException("Search text cannot be empty", field="q")
        effective = self.max_results if limit is None else min(max(1, limit), self.max_results)
        tasks = await self.task_repo.search_visible(caller_id, query, limit=effective)
        add_span_attributes(result_count=len(tasks))
        return await self.enrichment.enrich_for_search(tasks)
