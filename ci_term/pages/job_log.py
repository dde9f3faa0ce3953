"""
Job log page: one job's details and its complete log.
"""

from rich.console import Group, RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from ci_common.models import STATUS_RUNNING
from ci_service.contexts import JobLogPageContext

from ..commands import Command, ScrollCommand
from ..formatting import format_duration, format_time, status_text
from .base import Page

JOB_LOG_PAGE_NAME = "joblog"

JOB_INFO_FMT = """\
[{color}]Job:[/{color}] {name}
[{color}]ID:[/{color}] {id}
[{color}]Started:[/{color}] {started}
[{color}]Duration:[/{color}] {duration}"""

SCROLL_KEYS = {
    "up": "up",
    "k": "up",
    "down": "down",
    "j": "down",
    "pageup": "page_up",
    "pagedown": "page_down",
    "home": "home",
    "end": "end",
}


class JobLogPage(Page):
    name = JOB_LOG_PAGE_NAME
    title = "Job log"

    context: JobLogPageContext | None

    def handle_content_key(self, key: str) -> Command | None:
        action = SCROLL_KEYS.get(key)
        if action is None:
            return None
        return ScrollCommand(action)

    def render_content(self) -> RenderableType:
        job = self.context.job
        if job.finished_ok:
            color = "green"
        elif job.status == STATUS_RUNNING:
            color = "yellow"
        else:
            color = "red"

        info = Panel(
            Text.from_markup(
                JOB_INFO_FMT.format(
                    color=color,
                    name=escape(job.name),
                    id=escape(job.id),
                    started=format_time(job.start_time),
                    duration=format_duration(job.duration),
                )
            ),
            title=status_text(job.status),
            border_style=color,
        )
        log = Panel(
            Text.from_ansi(self.context.log.decode("utf-8", errors="replace")),
            title="Log",
        )
        return Group(info, log)

    def usage(self) -> str:
        return "[yellow](HOME/END)[/yellow] Scroll    " + super().usage()
