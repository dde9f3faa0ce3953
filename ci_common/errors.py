"""
Error types shared by the store adapter, the service and the UI.

Store errors describe transport and lookup failures reported by the
build-orchestration store. Service errors describe conditions the store
cannot express by itself.
"""


class CITermError(Exception):
    """Base class for all ci-term errors."""


class StoreError(CITermError):
    """The store could not be reached or returned an unusable response."""


class NotFoundError(StoreError):
    """The requested record does not exist in the store."""

    def __init__(self, kind: str, record_id: str):
        super().__init__(f"{kind} {record_id} not found")
        self.kind = kind
        self.record_id = record_id


class ServiceError(CITermError):
    """A condition raised by the aggregation service."""


class NoBuildsAvailableError(ServiceError):
    """The project has no builds to pick the last one from."""

    def __init__(self, project_id: str):
        super().__init__("no builds available")
        self.project_id = project_id
