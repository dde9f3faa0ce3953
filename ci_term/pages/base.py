"""
Base classes for dashboard pages.

Every page supports the same capabilities: register itself into a page
container (exactly once), run a hook before it is loaded, refresh its
content from a page context, show an error instead of content, translate
key presses into navigation commands, and render itself as a Rich
renderable.
"""

import threading
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from ..commands import (
    BackCommand,
    Command,
    IdentifierChain,
    OpenCommand,
    RedrawCommand,
    ReloadCommand,
)
from ..container import PageContainer

RELOAD_KEYS = ("f5", "r")
BACK_KEYS = ("escape", "backspace")
UP_KEYS = ("up", "k")
DOWN_KEYS = ("down", "j")
OPEN_KEYS = ("enter",)


class Page(ABC):
    """
    A named dashboard page.

    Subclasses set ``name`` and ``title`` and implement ``render_content``.
    """

    name: ClassVar[str]
    title: ClassVar[str]
    # Whether the back key leads anywhere from this page.
    has_parent: ClassVar[bool] = True

    def __init__(self):
        self._registered = False
        self._register_lock = threading.Lock()
        self.chain = IdentifierChain()
        self.context: Any = None
        self.error: str | None = None

    def register(self, container: PageContainer) -> bool:
        """
        Add this page to the container, only the first time it is called.

        Returns:
            True if the page was added by this call
        """
        with self._register_lock:
            if self._registered:
                return False
            container.add_page(self.name, self)
            self._registered = True
            return True

    @property
    def registered(self) -> bool:
        return self._registered

    def before_load(self) -> None:
        """Hook run by the router before the page is refreshed and shown."""

    def refresh(self, chain: IdentifierChain, context: Any) -> None:
        """
        Replace the page content with a freshly fetched context.

        Any previous content or error is dropped. Key commands issued from
        now on carry ``chain``.
        """
        previous_chain = self.chain
        self.clear()
        self.chain = chain
        self.context = context
        self.on_refresh(same_chain=previous_chain == chain)

    def show_error(self, chain: IdentifierChain, message: str) -> None:
        """Replace the page content with an error; reload and back keep working."""
        if chain != self.chain:
            self.on_chain_change()
        self.clear()
        self.chain = chain
        self.error = message

    def clear(self) -> None:
        self.context = None
        self.error = None

    def on_refresh(self, same_chain: bool) -> None:
        """Called after new content is stored."""

    def on_chain_change(self) -> None:
        """Called when an error moves the page to a different chain."""

    def handle_key(self, key: str) -> Command | None:
        """
        Translate a key press into a navigation command.

        Args:
            key: Key name as reported by the terminal toolkit (e.g. "f5")

        Returns:
            The command to dispatch, or None if the page ignores the key
        """
        if key in RELOAD_KEYS:
            return ReloadCommand(self.chain)
        if key in BACK_KEYS and self.has_parent:
            return BackCommand(self.chain)
        if self.context is None:
            return None
        return self.handle_content_key(key)

    def handle_content_key(self, key: str) -> Command | None:
        return None

    def usage(self) -> str:
        parts = ["[yellow](F5)[/yellow] Reload"]
        if self.has_parent:
            parts.append("[yellow](ESC)[/yellow] Back")
        parts.append("[yellow](Q)[/yellow] Quit")
        return "    ".join(parts)

    def render(self) -> RenderableType:
        """Render the current content, or the error, as a Rich renderable."""
        if self.error is not None:
            body: RenderableType = Panel(
                Text(self.error, style="bold red"),
                title="[bold red]Error[/bold red]",
                border_style="red",
            )
        elif self.context is None:
            body = Text("Loading...", style="dim")
        else:
            body = self.render_content()
        return Group(body, Text.from_markup(self.usage()))

    @abstractmethod
    def render_content(self) -> RenderableType:
        """Render ``self.context``; only called when a context is present."""


class ListPage(Page):
    """
    A page showing a selectable list of records.

    Up/down move the selection, enter opens the selected record's page.
    """

    def __init__(self):
        super().__init__()
        self.selected = 0

    @abstractmethod
    def items(self) -> list[Any]:
        """The records shown in the list, in display order."""

    @abstractmethod
    def item_id(self, item: Any) -> str:
        """The id that extends the chain when ``item`` is opened."""

    def on_refresh(self, same_chain: bool) -> None:
        # Reloading keeps the cursor; a different chain starts at the top.
        if not same_chain:
            self.selected = 0
        count = len(self.items())
        self.selected = min(self.selected, max(count - 1, 0))

    def on_chain_change(self) -> None:
        self.selected = 0

    def selected_item(self) -> Any | None:
        items = self.items()
        if not items:
            return None
        return items[self.selected]

    def handle_content_key(self, key: str) -> Command | None:
        count = len(self.items())
        if key in UP_KEYS:
            if self.selected > 0:
                self.selected -= 1
            return RedrawCommand()
        if key in DOWN_KEYS:
            if self.selected < count - 1:
                self.selected += 1
            return RedrawCommand()
        if key in OPEN_KEYS:
            item = self.selected_item()
            if item is None:
                return None
            return OpenCommand(self.chain.child(self.item_id(item)))
        return None

    def usage(self) -> str:
        return "[yellow](ENTER)[/yellow] Open    " + super().usage()

    def row_style(self, index: int) -> str:
        return "reverse" if index == self.selected else ""
