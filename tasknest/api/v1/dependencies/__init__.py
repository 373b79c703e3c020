"""FastAPI dependencies (composition root).

Routes depend on these; no route builds repositories or services itself.
"""

from tasknest.api.v1.dependencies.auth import get_current_identity
from tasknest.api.v1.dependencies.tasks import (
    get_profile_enrichment_service,
    get_task_search_service,
    get_task_service,
    get_task_service_rw,
)

__all__ = [
    "get_current_identity",
    "get_profile_enrichment_service",
    "get_task_search_service",
    "get_task_service",
    "get_task_service_rw",
]
