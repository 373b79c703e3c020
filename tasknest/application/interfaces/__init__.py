"""Application interfaces (ports): repository protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from tasknest.infrastructure or tasknest.api.
"""

from tasknest.application.interfaces.repositories import (
    IProfileRepository,
    ITaskRepository,
)

__all__ = [
    "IProfileRepository",
    "ITaskRepository",
]
