"""Task API: thin routes delegating to TaskService and TaskSearchService.

Static paths (/search, /bin) are declared before /{task_id}.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from tasknest.api.v1.dependencies import (
    get_current_identity,
    get_task_search_service,
    get_task_service,
    get_task_service_rw,
)
from tasknest.application.use_cases.tasks import TaskSearchService, TaskService
from tasknest.core.limiter import limit_writes
from tasknest.schemas.task import (
    TaskCreateRequest,
    TaskResponse,
    TaskSearchItemResponse,
    TaskUpdateRequest,
    TaskWithProfileResponse,
)

router = APIRouter()

CallerId = Annotated[str, Depends(get_current_identity)]
Skip = Annotated[int, Query(ge=0)]
Limit = Annotated[int, Query(ge=1, description="Capped at LIST_MAX_LIMIT")]


@router.post("", response_model=TaskResponse, status_code=201)
@limit_writes
async def create_task(
    request: Request,
    body: TaskCreateRequest,
    caller_id: CallerId,
    task_svc: Annotated[TaskService, Depends(get_task_service_rw)],
):
    """Create an active task owned by the caller."""
    created = await task_svc.create_task(
        owner_id=caller_id,
        task_name=body.task_name,
        description=body.description,
        priority=body.priority,
        share_type=body.share_type,
    )
    return TaskResponse.model_validate(created)


@router.get("", response_model=list[TaskWithProfileResponse])
async def list_tasks(
    caller_id: CallerId,
    task_svc: Annotated[TaskService, Depends(get_task_service)],
    skip: Skip = 0,
    limit: Limit = 100,
):
    """List active tasks the caller owns or that are public, newest first."""
    items = await task_svc.list_tasks(caller_id, skip=skip, limit=limit)
    return [TaskWithProfileResponse.from_enriched(i) for i in items]


@router.get("/search", response_model=list[TaskSearchItemResponse])
async def search_tasks(
    caller_id: CallerId,
    search_svc: Annotated[TaskSearchService, Depends(get_task_search_service)],
    q: Annotated[str | None, Query(description="Substring of task name")] = None,
    limit: Annotated[int | None, Query(ge=1)] = None,
):
    """Case-insensitive task name search within the caller's visible set."""
    results = await search_svc.search(caller_id, q, limit=limit)
    return [TaskSearchItemResponse.model_validate(r) for r in results]


@router.get("/bin", response_model=list[TaskResponse])
async def list_binned_tasks(
    caller_id: CallerId,
    task_svc: Annotated[TaskService, Depends(get_task_service)],
    skip: Skip = 0,
    limit: Limit = 100,
):
    """List the caller's binned tasks (restorable)."""
    items = await task_svc.list_binned_tasks(caller_id, skip=skip, limit=limit)
    return [TaskResponse.model_validate(t) for t in items]


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: str,
    caller_id: CallerId,
    task_svc: Annotated[TaskService, Depends(get_task_service)],
):
    """Get one of the caller's active tasks."""
    task = await task_svc.get_task(caller_id, task_id)
    return TaskResponse.model_validate(task)


@router.patch("/{task_id}", response_model=TaskResponse)
@limit_writes
async def update_task(
    request: Request,
    task_id: str,
    body: TaskUpdateRequest,
    caller_id: CallerId,
    task_svc: Annotated[TaskService, Depends(get_task_service_rw)],
):
    """Update sent fields of the caller's active task."""
    updated = await task_svc.update_task(
        owner_id=caller_id,
        task_id=task_id,
        task_name=body.task_name,
        description=body.description,
        priority=body.priority,
        share_type=body.share_type,
    )
    return TaskResponse.model_validate(updated)


@router.delete("/{task_id}", response_model=TaskResponse)
@limit_writes
async def bin_task(
    request: Request,
    task_id: str,
    caller_id: CallerId,
    task_svc: Annotated[TaskService, Depends(get_task_service_rw)],
):
    """Move the caller's active task to the bin."""
    binned = await task_svc.bin_task(caller_id, task_id)
    return TaskResponse.model_validate(binned)


@router.post("/{task_id}/restore", response_model=TaskResponse)
@limit_writes
async def restore_task(
    request: Request,
    task_id: str,
    caller_id: CallerId,
    task_svc: Annotated[TaskService, Depends(get_task_service_rw)],
):
    """Restore a binned task owned by the caller."""
    restored = await task_svc.undo_task(caller_id, task_id)
    return TaskResponse.model_validate(restored)
