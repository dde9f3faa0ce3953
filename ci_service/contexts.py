"""
Page contexts for the dashboard.

A context is a read-only bundle with everything one page needs for one
render. Contexts are built fresh on every page load and never reused.
"""

import logging
from dataclasses import dataclass

from ci_common.errors import NoBuildsAvailableError
from ci_common.models import Build, Job, Project

from .service import BuildService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectSummary:
    """A project together with its most recent build, if any."""

    project: Project
    last_build: Build | None = None


@dataclass(frozen=True)
class ProjectListPageContext:
    projects: list[ProjectSummary]


@dataclass(frozen=True)
class BuildListPageContext:
    project: Project
    builds: list[Build]


@dataclass(frozen=True)
class JobListPageContext:
    project: Project
    build: Build
    jobs: list[Job]


@dataclass(frozen=True)
class JobLogPageContext:
    job: Job
    log: bytes


class Controller:
    """
    Assembles page contexts from the build service.

    Args:
        service: Service used for every lookup
    """

    def __init__(self, service: BuildService):
        self.service = service

    def project_list_context(self) -> ProjectListPageContext:
        """Projects sorted by name, each with its last build."""
        summaries = []
        for project in self.service.get_projects():
            try:
                last_build = self.service.get_project_last_build(project.id)
            except NoBuildsAvailableError:
                last_build = None
            summaries.append(ProjectSummary(project=project, last_build=last_build))
        return ProjectListPageContext(projects=summaries)

    def build_list_context(self, project_id: str) -> BuildListPageContext:
        """A project with its builds, most recent first."""
        project = self.service.get_project(project_id)
        builds = self.service.get_project_builds(project, desc=True)
        return BuildListPageContext(project=project, builds=builds)

    def job_list_context(self, project_id: str, build_id: str) -> JobListPageContext:
        """A build with its jobs in execution order."""
        project = self.service.get_project(project_id)
        build = self.service.get_build(build_id)
        jobs = self.service.get_build_jobs(build_id, desc=False)
        return JobListPageContext(project=project, build=build, jobs=jobs)

    def job_log_context(self, job_id: str) -> JobLogPageContext:
        """A job with its complete log."""
        job = self.service.get_job(job_id)
        log = self.service.get_job_log(job_id)
        logger.debug(f"Fetched {len(log)} log bytes for job {job_id}")
        return JobLogPageContext(job=job, log=log)
