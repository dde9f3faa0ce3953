"""
Page router for the dashboard.

The router owns the page container and the current page. It is the only
component that asks the controller for page contexts and the only one that
calls a page's refresh. Every load runs the same sequence:

1. resolve the target page and register it in the container (once)
2. run the page's before_load hook
3. fetch the page context and refresh the page with it
4. make the page the visible one

A failure in step 3 never reaches the shell: the page shows the error
instead of content and still becomes visible, so reload and back work.
"""

import logging
from typing import Any, Callable

from ci_common.errors import CITermError
from ci_service.contexts import Controller

from .commands import (
    BackCommand,
    Command,
    IdentifierChain,
    OpenCommand,
    QuitCommand,
    ReloadCommand,
)
from .container import PageContainer
from .pages import (
    BUILD_LIST_PAGE_NAME,
    JOB_LIST_PAGE_NAME,
    JOB_LOG_PAGE_NAME,
    PROJECT_LIST_PAGE_NAME,
    BuildListPage,
    JobListPage,
    JobLogPage,
    Page,
    ProjectListPage,
)

logger = logging.getLogger(__name__)


def default_pages() -> list[Page]:
    """Create one instance of every dashboard page."""
    return [ProjectListPage(), BuildListPage(), JobListPage(), JobLogPage()]


class Router:
    """
    Switches between dashboard pages and keeps them populated.

    Args:
        controller: Builds the context each page is refreshed with
        container: Page container; a new one is created if not provided
        pages: Page instances by name; defaults to default_pages()
    """

    def __init__(
        self,
        controller: Controller,
        container: PageContainer | None = None,
        pages: list[Page] | None = None,
    ):
        self.controller = controller
        self.container = container or PageContainer()
        self.pages: dict[str, Page] = {
            page.name: page for page in (pages if pages is not None else default_pages())
        }
        self.current_page: Page | None = None

    def _load(
        self, name: str, chain: IdentifierChain, fetch: Callable[[], Any]
    ) -> Page:
        page = self.pages[name]
        page.register(self.container)
        page.before_load()

        logger.info(f"Loading page {name} {'/'.join(chain.ids)}")
        try:
            context = fetch()
        except CITermError as e:
            logger.error(f"Error loading page {name}: {e}")
            page.show_error(chain, str(e))
        except Exception as e:
            logger.error(f"Unexpected error loading page {name}: {e}", exc_info=True)
            page.show_error(chain, f"{type(e).__name__}: {e}")
        else:
            page.refresh(chain, context)

        self.container.switch_to(name)
        self.current_page = page
        return page

    def load_project_list(self) -> Page:
        """Load the list of all projects; also the initial page."""
        return self._load(
            PROJECT_LIST_PAGE_NAME,
            IdentifierChain(),
            self.controller.project_list_context,
        )

    def load_project_build_list(self, project_id: str) -> Page:
        """Load the builds of a project."""
        return self._load(
            BUILD_LIST_PAGE_NAME,
            IdentifierChain(project_id),
            lambda: self.controller.build_list_context(project_id),
        )

    def load_build_job_list(self, project_id: str, build_id: str) -> Page:
        """Load the jobs of a build."""
        return self._load(
            JOB_LIST_PAGE_NAME,
            IdentifierChain(project_id, build_id),
            lambda: self.controller.job_list_context(project_id, build_id),
        )

    def load_job_log(self, project_id: str, build_id: str, job_id: str) -> Page:
        """Load the log of a job."""
        return self._load(
            JOB_LOG_PAGE_NAME,
            IdentifierChain(project_id, build_id, job_id),
            lambda: self.controller.job_log_context(job_id),
        )

    def load(self, chain: IdentifierChain) -> Page:
        """Load the page that matches the depth of an identifier chain."""
        if chain.depth == 0:
            return self.load_project_list()
        if chain.depth == 1:
            return self.load_project_build_list(chain.project_id)
        if chain.depth == 2:
            return self.load_build_job_list(chain.project_id, chain.build_id)
        return self.load_job_log(chain.project_id, chain.build_id, chain.job_id)

    def dispatch(self, command: Command) -> bool:
        """
        Execute a navigation command.

        Commands the router has nothing to do for (redraw, scroll) are
        accepted as no-ops; the shell handles them.

        Returns:
            False if the dashboard should exit, True otherwise
        """
        if isinstance(command, QuitCommand):
            return False
        if isinstance(command, (ReloadCommand, OpenCommand)):
            self.load(command.chain)
        elif isinstance(command, BackCommand):
            self.load(command.chain.parent())
        return True
