"""
CI Common module.

This module contains the shared domain models, the read-only store interface
and the error types used across the ci-term components (client, service, UI).

The common module has no dependencies on other ci_* modules, making it
a pure domain layer that can be imported by any component.
"""

from .errors import CITermError, NoBuildsAvailableError, NotFoundError, StoreError
from .models import Build, Job, Project, Worker
from .store import BuildStore

__all__ = [
    "Build",
    "BuildStore",
    "CITermError",
    "Job",
    "NoBuildsAvailableError",
    "NotFoundError",
    "Project",
    "StoreError",
    "Worker",
]
