"""
Project list page: every project with the state of its last build.
"""

from rich.console import RenderableType
from rich.table import Table
from rich.text import Text

from ci_common.models import Project
from ci_service.contexts import ProjectListPageContext, ProjectSummary

from ..formatting import format_time, short_id, status_text
from .base import ListPage

PROJECT_LIST_PAGE_NAME = "projectlist"


class ProjectListPage(ListPage):
    name = PROJECT_LIST_PAGE_NAME
    title = "Projects"
    has_parent = False

    context: ProjectListPageContext | None

    def items(self) -> list[ProjectSummary]:
        if self.context is None:
            return []
        return self.context.projects

    def item_id(self, item: ProjectSummary) -> str:
        return item.project.id

    def render_content(self) -> RenderableType:
        if not self.context.projects:
            return Text("No projects available", style="dim")

        table = Table(title="Projects", header_style="bold cyan", expand=True)
        table.add_column("Project", min_width=20)
        table.add_column("Repository")
        table.add_column("Last build")
        table.add_column("Status", justify="center")
        table.add_column("Started")

        for index, summary in enumerate(self.context.projects):
            build = summary.last_build
            table.add_row(
                summary.project.name,
                _repo(summary.project),
                short_id(build.id) if build else "-",
                status_text(build.status) if build else Text("-", style="dim"),
                format_time(build.start_time) if build else "-",
                style=self.row_style(index),
            )
        return table


def _repo(project: Project) -> str:
    return project.repo or "-"
