"""
HTTP implementation of the build store.

Talks to the orchestration backend's read-only REST API (the ``/v1`` routes)
with ``requests``. Every call is a single blocking GET; nothing is cached.
"""

import logging
from typing import Any

import requests

from ci_common.errors import NotFoundError, StoreError
from ci_common.models import Build, Job, Project
from ci_common.store import BuildStore

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class HTTPBuildStore(BuildStore):
    """
    Build store backed by the backend's HTTP API.

    Routes used:
    - GET /v1/projects
    - GET /v1/project/{id}
    - GET /v1/project/{id}/builds
    - GET /v1/build/{id}
    - GET /v1/build/{id}/jobs
    - GET /v1/job/{id}
    - GET /v1/job/{id}/logs
    """

    def __init__(self, server_url: str, timeout: float = DEFAULT_TIMEOUT):
        """
        Initialize the store.

        Args:
            server_url: Base URL of the API server, e.g. http://localhost:7745
            timeout: Seconds to wait for each request
        """
        self.server_url = server_url.rstrip("/")
        self.timeout = timeout

    def _get(self, path: str, kind: str, record_id: str | None = None) -> requests.Response:
        """
        Issue a GET request and map failures to store errors.

        Args:
            path: Route path starting with "/v1"
            kind: Record kind for error messages ("project", "build", "job")
            record_id: ID of the requested record, if any

        Returns:
            Successful response

        Raises:
            NotFoundError: On HTTP 404 for a single record
            StoreError: On any other transport or HTTP failure
        """
        url = f"{self.server_url}{path}"
        logger.debug(f"GET {url}")
        try:
            response = requests.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise StoreError(f"Error contacting CI server: {e}") from e

        if response.status_code == 404 and record_id is not None:
            raise NotFoundError(kind, record_id)
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise StoreError(f"Error fetching {kind} from CI server: {e}") from e
        return response

    def _get_json(self, path: str, kind: str, record_id: str | None = None) -> Any:
        response = self._get(path, kind, record_id)
        try:
            return response.json()
        except ValueError as e:
            raise StoreError(f"Invalid {kind} payload from CI server: {e}") from e

    def _get_list(self, path: str, kind: str, record_id: str | None = None) -> list[dict]:
        data = self._get_json(path, kind, record_id)
        # The API server encodes empty lists as null.
        if data is None:
            return []
        if not isinstance(data, list):
            raise StoreError(f"Invalid {kind} list payload from CI server")
        return data

    def get_project(self, project_id: str) -> Project:
        data = self._get_json(f"/v1/project/{project_id}", "project", project_id)
        return _decode(Project.from_dict, data, "project")

    def get_projects(self) -> list[Project]:
        items = self._get_list("/v1/projects", "project")
        return [_decode(Project.from_dict, item, "project") for item in items]

    def get_build(self, build_id: str) -> Build:
        data = self._get_json(f"/v1/build/{build_id}", "build", build_id)
        return _decode(Build.from_dict, data, "build")

    def get_project_builds(self, project: Project) -> list[Build]:
        items = self._get_list(f"/v1/project/{project.id}/builds", "project", project.id)
        return [_decode(Build.from_dict, item, "build") for item in items]

    def get_build_jobs(self, build: Build) -> list[Job]:
        items = self._get_list(f"/v1/build/{build.id}/jobs", "build", build.id)
        return [
            _decode(lambda d: Job.from_dict(d, build_id=build.id), item, "job")
            for item in items
        ]

    def get_job(self, job_id: str) -> Job:
        data = self._get_json(f"/v1/job/{job_id}", "job", job_id)
        return _decode(Job.from_dict, data, "job")

    def get_job_log(self, job_id: str) -> bytes:
        response = self._get(f"/v1/job/{job_id}/logs", "job", job_id)
        return response.content


def _decode(factory, data: Any, kind: str):
    """Build a model from a payload, reporting malformed payloads as store errors."""
    if not isinstance(data, dict):
        raise StoreError(
            f"Invalid {kind} payload from CI server: expected an object, "
            f"got {type(data).__name__}"
        )
    try:
        return factory(data)
    except (KeyError, TypeError, ValueError) as e:
        raise StoreError(f"Invalid {kind} payload from CI server: {e!r}") from e
