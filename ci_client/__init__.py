"""
CI Client module.

This module contains the HTTP adapter that reads projects, builds, jobs and
job logs from the orchestration backend's API server.
"""

from .client import HTTPBuildStore

__all__ = ["HTTPBuildStore"]
