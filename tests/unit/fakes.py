"""
Test doubles for the build store.
"""

from datetime import UTC, datetime

from ci_common.errors import NotFoundError
from ci_common.models import Build, Job, Project, Worker
from ci_common.store import BuildStore


def at(hour: int, minute: int = 0) -> datetime:
    return datetime(2024, 5, 1, hour, minute, tzinfo=UTC)


class FakeBuildStore(BuildStore):
    """In-memory store that records every call it receives."""

    def __init__(self, projects=None, builds=None, jobs=None, logs=None):
        self.projects: list[Project] = list(projects or [])
        self.builds: list[Build] = list(builds or [])
        self.jobs: dict[str, list[Job]] = dict(jobs or {})
        self.logs: dict[str, bytes] = dict(logs or {})
        self.calls: list[tuple] = []
        self.errors: dict[str, Exception] = {}

    def _call(self, name, *args):
        self.calls.append((name, *args))
        if name in self.errors:
            raise self.errors[name]

    def get_project(self, project_id):
        self._call("get_project", project_id)
        for project in self.projects:
            if project.id == project_id:
                return project
        raise NotFoundError("project", project_id)

    def get_projects(self):
        self._call("get_projects")
        return list(self.projects)

    def get_build(self, build_id):
        self._call("get_build", build_id)
        for build in self.builds:
            if build.id == build_id:
                return build
        raise NotFoundError("build", build_id)

    def get_project_builds(self, project):
        self._call("get_project_builds", project.id)
        return [b for b in self.builds if b.project_id == project.id]

    def get_build_jobs(self, build):
        self._call("get_build_jobs", build.id)
        return list(self.jobs.get(build.id, []))

    def get_job(self, job_id):
        self._call("get_job", job_id)
        for job_list in self.jobs.values():
            for job in job_list:
                if job.id == job_id:
                    return job
        raise NotFoundError("job", job_id)

    def get_job_log(self, job_id):
        self._call("get_job_log", job_id)
        if job_id not in self.logs:
            raise NotFoundError("job", job_id)
        return self.logs[job_id]


def make_build(build_id, project_id, start=None, status="Succeeded", **kwargs):
    worker = None
    if start is not None:
        worker = Worker(id=f"w-{build_id}", start_time=start, status=status)
    return Build(id=build_id, project_id=project_id, worker=worker, **kwargs)


def make_job(job_id, start, ended=None, status="Succeeded", build_id=None, name=None):
    return Job(
        id=job_id,
        name=name or job_id,
        start_time=start,
        ended=ended,
        status=status,
        finished_ok=status == "Succeeded",
        build_id=build_id,
    )


