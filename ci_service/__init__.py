"""
CI Service module.

This module contains the aggregation service that orders store records for
display, and the controller that assembles one context per page render.

The service layer depends on ci_common only; it does not know which store
adapter it reads from.
"""

from .contexts import (
    BuildListPageContext,
    Controller,
    JobListPageContext,
    JobLogPageContext,
    ProjectListPageContext,
    ProjectSummary,
)
from .service import BuildService

__all__ = [
    "BuildListPageContext",
    "BuildService",
    "Controller",
    "JobListPageContext",
    "JobLogPageContext",
    "ProjectListPageContext",
    "ProjectSummary",
]
