"""
Aggregation service over the build store.

Converts raw store records into ordered, UI-ready sequences and derives
facts the store does not provide directly, such as a project's last build.
The service keeps no data between calls and never retries: store errors
propagate to the caller unmodified.
"""

import logging

from ci_common.errors import NoBuildsAvailableError
from ci_common.models import Build, Job, Project
from ci_common.store import BuildStore

logger = logging.getLogger(__name__)


def sort_builds(builds: list[Build], desc: bool) -> list[Build]:
    """
    Order builds by their worker start time.

    Builds without a start time cannot be compared with the others. They
    always go after every build that has one, in both directions, and keep
    their fetch order among themselves.

    Args:
        builds: Builds in store order
        desc: True for most recent first

    Returns:
        New list with the ordered builds
    """
    started = [b for b in builds if b.start_time is not None]
    unstarted = [b for b in builds if b.start_time is None]
    # sorted() is stable, also with reverse=True.
    started = sorted(started, key=lambda b: b.start_time, reverse=desc)
    return started + unstarted


def sort_jobs(jobs: list[Job], desc: bool) -> list[Job]:
    """Order jobs by start time; equal start times keep store order."""
    return sorted(jobs, key=lambda j: j.start_time, reverse=desc)


class BuildService:
    """
    Read-only service the UI uses to get projects, builds and jobs.

    Every operation is a synchronous request against the store.
    """

    def __init__(self, store: BuildStore):
        """
        Initialize the service.

        Args:
            store: Store adapter the records are read from
        """
        self.store = store

    def get_project(self, project_id: str) -> Project:
        """Get one project."""
        return self.store.get_project(project_id)

    def get_projects(self) -> list[Project]:
        """Get all projects sorted by name."""
        projects = self.store.get_projects()
        return sorted(projects, key=lambda p: p.name)

    def get_build(self, build_id: str) -> Build:
        """Get one build."""
        return self.store.get_build(build_id)

    def get_project_builds(self, project: Project, desc: bool) -> list[Build]:
        """
        Get all the builds of a project ordered by start time.

        The project is fetched again by ID so that a stale Project value
        never leaks into the store query.

        Args:
            project: Project whose builds are listed
            desc: True for most recent first

        Returns:
            Ordered list of builds; builds without a worker go last
        """
        current = self.store.get_project(project.id)
        builds = self.store.get_project_builds(current)
        logger.debug(f"Fetched {len(builds)} builds for project {project.id}")
        return sort_builds(builds, desc)

    def get_build_jobs(self, build_id: str, desc: bool) -> list[Job]:
        """
        Get all the jobs of a build ordered by start time.

        Args:
            build_id: ID of the build
            desc: True for most recent first

        Returns:
            Ordered list of jobs
        """
        build = self.store.get_build(build_id)
        jobs = self.store.get_build_jobs(build)
        logger.debug(f"Fetched {len(jobs)} jobs for build {build_id}")
        return sort_jobs(jobs, desc)

    def get_project_last_build(self, project_id: str) -> Build:
        """
        Get the most recently started build of a project.

        Raises:
            NoBuildsAvailableError: If the project has no builds
        """
        project = self.store.get_project(project_id)
        builds = self.get_project_builds(project, desc=True)
        if not builds:
            raise NoBuildsAvailableError(project_id)
        return builds[0]

    def get_job(self, job_id: str) -> Job:
        """Get one job."""
        return self.store.get_job(job_id)

    def get_job_log(self, job_id: str) -> bytes:
        """Get the full log of a job; fetched on every call."""
        return self.store.get_job_log(job_id)
