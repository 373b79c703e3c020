"""Application services: field validation and profile enrichment."""

from tasknest.application.services.profile_enrichment import ProfileEnrichmentService
from tasknest.application.services.task_field_validator import TaskFieldValidator

__all__ = ["ProfileEnrichmentService", "TaskFieldValidator"]
