"""
Textual shell for the dashboard.

The shell owns the event loop and the screen. It shows the router's
current page, forwards every key press to that page, and hands the
resulting command to the router.
"""

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.events import Key
from textual.widgets import Footer, Header, Static

from .commands import ScrollCommand
from .router import Router

logger = logging.getLogger(__name__)


class PageView(VerticalScroll, can_focus=False):
    """Scrollable area the visible page is painted into."""


class DashboardApp(App):
    """Terminal dashboard over projects, builds, jobs and job logs."""

    TITLE = "ci-term"

    CSS = """
    #page {
        height: 1fr;
    }
    """

    BINDINGS = [Binding("q", "quit", "Quit", priority=True)]

    def __init__(self, router: Router):
        super().__init__()
        self.router = router

    def compose(self) -> ComposeResult:
        yield Header()
        with PageView(id="page"):
            yield Static(id="content")
        yield Footer()

    def on_mount(self) -> None:
        self.router.load_project_list()
        self.repaint(scroll_home=True)

    def on_key(self, event: Key) -> None:
        page = self.router.current_page
        if page is None:
            return
        command = page.handle_key(event.key)
        if command is None:
            return
        event.stop()

        if isinstance(command, ScrollCommand):
            self.scroll_page(command.action)
            return

        previous = (page.name, page.chain)
        if not self.router.dispatch(command):
            self.exit()
            return
        current = self.router.current_page
        self.repaint(scroll_home=previous != (current.name, current.chain))

    def scroll_page(self, action: str) -> None:
        view = self.query_one("#page", PageView)
        getattr(view, f"scroll_{action}")(animate=False)

    def repaint(self, scroll_home: bool = False) -> None:
        page = self.router.current_page
        self.sub_title = page.title
        self.query_one("#content", Static).update(page.render())
        if scroll_home:
            self.query_one("#page", PageView).scroll_home(animate=False)
