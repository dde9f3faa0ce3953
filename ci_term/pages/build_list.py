"""
Build list page: the builds of one project, most recent first.
"""

from rich.console import Group, RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ci_common.models import Build
from ci_service.contexts import BuildListPageContext

from ..formatting import format_duration, format_time, short_id, status_text
from .base import ListPage

BUILD_LIST_PAGE_NAME = "buildlist"

PROJECT_INFO_FMT = """\
[yellow]Project:[/yellow] {name}
[yellow]ID:[/yellow] {id}
[yellow]Repository:[/yellow] {repo}"""


class BuildListPage(ListPage):
    name = BUILD_LIST_PAGE_NAME
    title = "Builds"

    context: BuildListPageContext | None

    def items(self) -> list[Build]:
        if self.context is None:
            return []
        return self.context.builds

    def item_id(self, item: Build) -> str:
        return item.id

    def render_content(self) -> RenderableType:
        project = self.context.project
        info = Panel(
            Text.from_markup(
                PROJECT_INFO_FMT.format(
                    name=escape(project.name),
                    id=escape(project.id),
                    repo=escape(project.repo or "-"),
                )
            ),
            border_style="yellow",
        )

        if not self.context.builds:
            return Group(info, Text("No builds available", style="dim"))

        table = Table(header_style="bold cyan", expand=True)
        table.add_column("Build", min_width=14)
        table.add_column("Event")
        table.add_column("Commit")
        table.add_column("Status", justify="center")
        table.add_column("Started")
        table.add_column("Duration", justify="right")

        for index, build in enumerate(self.context.builds):
            table.add_row(
                short_id(build.id, 26),
                build.type or "-",
                short_id(build.commit, 8),
                status_text(build.status),
                format_time(build.start_time),
                format_duration(_duration(build)),
                style=self.row_style(index),
            )
        return Group(info, table)


def _duration(build: Build):
    if build.worker is None or build.worker.start_time is None:
        return None
    if build.worker.end_time is None:
        return None
    return build.worker.end_time - build.worker.start_time
