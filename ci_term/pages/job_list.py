"""
Job list page: the jobs of one build, in execution order.
"""

from rich.console import Group, RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ci_common.models import Job
from ci_service.contexts import JobListPageContext

from ..formatting import format_duration, format_time, short_id, status_text
from .base import ListPage

JOB_LIST_PAGE_NAME = "joblist"

BUILD_INFO_FMT = """\
[yellow]Project:[/yellow] {project}
[yellow]Build:[/yellow] {build}
[yellow]Event:[/yellow] {event}
[yellow]Commit:[/yellow] {commit}
[yellow]Started:[/yellow] {started}"""


class JobListPage(ListPage):
    name = JOB_LIST_PAGE_NAME
    title = "Jobs"

    context: JobListPageContext | None

    def items(self) -> list[Job]:
        if self.context is None:
            return []
        return self.context.jobs

    def item_id(self, item: Job) -> str:
        return item.id

    def render_content(self) -> RenderableType:
        build = self.context.build
        info = Panel(
            Text.from_markup(
                BUILD_INFO_FMT.format(
                    project=escape(self.context.project.name),
                    build=escape(build.id),
                    event=escape(build.type or "-"),
                    commit=escape(build.commit or "-"),
                    started=format_time(build.start_time),
                )
            ),
            title=status_text(build.status),
            border_style="yellow",
        )

        if not self.context.jobs:
            return Group(info, Text("No jobs available", style="dim"))

        table = Table(header_style="bold cyan", expand=True)
        table.add_column("Job", min_width=16)
        table.add_column("ID")
        table.add_column("Image")
        table.add_column("Status", justify="center")
        table.add_column("Started")
        table.add_column("Duration", justify="right")

        for index, job in enumerate(self.context.jobs):
            table.add_row(
                job.name,
                short_id(job.id, 32),
                job.image or "-",
                status_text(job.status),
                format_time(job.start_time),
                format_duration(job.duration),
                style=self.row_style(index),
            )
        return Group(info, table)
