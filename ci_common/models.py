"""
Data models for CI pipeline records.

These models represent the domain objects read from the build-orchestration
store (projects, builds, workers and jobs), independent of how the store is
reached. All of them are immutable once fetched.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

# Statuses reported by the orchestration backend for workers and jobs.
STATUS_PENDING = "Pending"
STATUS_RUNNING = "Running"
STATUS_SUCCEEDED = "Succeeded"
STATUS_FAILED = "Failed"
STATUS_UNKNOWN = "Unknown"

KNOWN_STATUSES = (
    STATUS_PENDING,
    STATUS_RUNNING,
    STATUS_SUCCEEDED,
    STATUS_FAILED,
    STATUS_UNKNOWN,
)

# The backend serializes unset timestamps as Go's zero time.
_ZERO_TIME_PREFIX = "0001-01-01"

# Start time of a job that reported neither a start nor a creation time.
NO_START_TIME = datetime.min.replace(tzinfo=UTC)


def parse_timestamp(value: str | None) -> datetime | None:
    """
    Parse an ISO-8601 timestamp coming from the backend.

    Args:
        value: Timestamp string, optionally with a "Z" suffix

    Returns:
        Timezone-aware datetime (UTC when no offset is given), or None when
        the value is missing or the zero timestamp
    """
    if not value or value.startswith(_ZERO_TIME_PREFIX):
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def format_timestamp(value: datetime | None) -> str | None:
    """Format a datetime the way the backend does (UTC, "Z" suffix)."""
    if value is None:
        return None
    return value.astimezone(UTC).isoformat().replace("+00:00", "Z")


def _normalize_status(value: str | None) -> str:
    if value in KNOWN_STATUSES:
        return value
    return STATUS_UNKNOWN


@dataclass(frozen=True)
class Project:
    """
    Represents a CI project: a named unit of configuration producing builds.
    """

    id: str
    name: str
    repo: str | None = None  # Repository name, e.g. "github.com/org/app"
    clone_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert project to dictionary format (for JSON output)."""
        return {
            "id": self.id,
            "name": self.name,
            "repo": {"name": self.repo, "cloneURL": self.clone_url},
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Project":
        """Create project from the backend's JSON representation."""
        repo = data.get("repo") or {}
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            repo=repo.get("name"),
            clone_url=repo.get("cloneURL"),
        )


@dataclass(frozen=True)
class Worker:
    """
    Represents the worker that executed a build.

    The worker is the only source of a build's actual start time.
    """

    id: str
    start_time: datetime | None = None
    end_time: datetime | None = None
    exit_code: int = 0
    status: str = STATUS_UNKNOWN

    def to_dict(self) -> dict[str, Any]:
        """Convert worker to dictionary format (for JSON output)."""
        return {
            "id": self.id,
            "start_time": format_timestamp(self.start_time),
            "end_time": format_timestamp(self.end_time),
            "exit_code": self.exit_code,
            "status": self.status,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Worker":
        """Create worker from the backend's JSON representation."""
        return cls(
            id=data.get("id", ""),
            start_time=parse_timestamp(data.get("start_time")),
            end_time=parse_timestamp(data.get("end_time")),
            exit_code=data.get("exit_code") or 0,
            status=_normalize_status(data.get("status")),
        )


@dataclass(frozen=True)
class Build:
    """
    Represents one execution of a project's pipeline.

    A build that has not been picked up by a worker yet has no worker
    and therefore no start time.
    """

    id: str
    project_id: str
    worker: Worker | None = None
    type: str | None = None  # Triggering event type, e.g. "push"
    provider: str | None = None  # Event provider, e.g. "github"
    commit: str | None = None
    ref: str | None = None

    @property
    def start_time(self) -> datetime | None:
        """Start time of the build, None when it has no worker."""
        if self.worker is None:
            return None
        return self.worker.start_time

    @property
    def status(self) -> str:
        """Status of the build, derived from its worker."""
        if self.worker is None:
            return STATUS_PENDING
        return self.worker.status

    def to_dict(self) -> dict[str, Any]:
        """Convert build to dictionary format (for JSON output)."""
        return {
            "id": self.id,
            "project_id": self.project_id,
            "type": self.type,
            "provider": self.provider,
            "revision": {"commit": self.commit, "ref": self.ref},
            "worker": self.worker.to_dict() if self.worker else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Build":
        """Create build from the backend's JSON representation."""
        revision = data.get("revision") or {}
        worker = data.get("worker")
        return cls(
            id=data["id"],
            project_id=data.get("project_id", ""),
            worker=Worker.from_dict(worker) if worker else None,
            type=data.get("type"),
            provider=data.get("provider"),
            commit=revision.get("commit"),
            ref=revision.get("ref"),
        )


@dataclass(frozen=True)
class Job:
    """
    Represents one task within a build.

    Jobs progress through states: Pending -> Running -> Succeeded/Failed
    """

    id: str
    name: str
    start_time: datetime
    ended: datetime | None = None
    status: str = STATUS_UNKNOWN
    finished_ok: bool = False
    build_id: str | None = None
    image: str | None = None

    @property
    def duration(self) -> timedelta | None:
        """Time between start and end, None while the job has not ended or never started."""
        if self.ended is None or self.start_time == NO_START_TIME:
            return None
        return self.ended - self.start_time

    def to_dict(self) -> dict[str, Any]:
        """Convert job to dictionary format (for JSON output)."""
        return {
            "id": self.id,
            "name": self.name,
            "image": self.image,
            "start_time": format_timestamp(self.start_time),
            "end_time": format_timestamp(self.ended),
            "status": self.status,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], build_id: str | None = None) -> "Job":
        """
        Create job from the backend's JSON representation.

        Jobs that have not started yet report the zero timestamp; their
        start time falls back to their creation time so that every job
        has a start time to order by.
        """
        start_time = parse_timestamp(data.get("start_time")) or parse_timestamp(
            data.get("creation_time")
        )
        if start_time is None:
            start_time = NO_START_TIME
        status = _normalize_status(data.get("status"))
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            start_time=start_time,
            ended=parse_timestamp(data.get("end_time")),
            status=status,
            finished_ok=status == STATUS_SUCCEEDED,
            build_id=build_id,
            image=data.get("image"),
        )
