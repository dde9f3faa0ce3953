"""
Navigation commands exchanged between pages, the shell and the router.

Pages never call the router themselves. A key press on the visible page
turns into one of these values, carrying the identifier chain the page was
loaded with, and the shell hands it to the router.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class IdentifierChain:
    """
    The ids needed to load a page: project, then build, then job.

    A chain is always a prefix: a build id implies a project id and a job id
    implies both.
    """

    project_id: str | None = None
    build_id: str | None = None
    job_id: str | None = None

    def __post_init__(self):
        if self.build_id is not None and self.project_id is None:
            raise ValueError("build_id requires project_id")
        if self.job_id is not None and self.build_id is None:
            raise ValueError("job_id requires build_id")

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(i for i in (self.project_id, self.build_id, self.job_id) if i is not None)

    @property
    def depth(self) -> int:
        return len(self.ids)

    def parent(self) -> "IdentifierChain":
        """The chain minus its last element; the empty chain is its own parent."""
        return IdentifierChain(*self.ids[:-1])

    def child(self, record_id: str) -> "IdentifierChain":
        """The chain extended with one more id."""
        if self.depth >= 3:
            raise ValueError("a job chain has no children")
        return IdentifierChain(*self.ids, record_id)


@dataclass(frozen=True)
class ReloadCommand:
    """Load the same page again with the same chain."""

    chain: IdentifierChain


@dataclass(frozen=True)
class BackCommand:
    """Load the parent page of the page loaded with this chain."""

    chain: IdentifierChain


@dataclass(frozen=True)
class OpenCommand:
    """Load the page for this (child) chain."""

    chain: IdentifierChain


@dataclass(frozen=True)
class RedrawCommand:
    """Repaint the visible page without fetching anything."""


@dataclass(frozen=True)
class ScrollCommand:
    """Scroll the visible page; action is up, down, page_up, page_down, home or end."""

    action: str


@dataclass(frozen=True)
class QuitCommand:
    """Leave the dashboard."""


Command = (
    ReloadCommand | BackCommand | OpenCommand | RedrawCommand | ScrollCommand | QuitCommand
)
