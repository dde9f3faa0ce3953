"""
Page container: the set of registered pages, one of them visible.
"""

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .pages.base import Page

logger = logging.getLogger(__name__)


class PageContainer:
    """
    Holds pages by name and tracks which one is visible.

    Pages are added hidden. Adding the same page object twice is a no-op;
    adding a different page under a taken name is an error.
    """

    def __init__(self):
        self._pages: dict[str, "Page"] = {}
        self._visible: str | None = None

    def add_page(self, name: str, page: "Page") -> None:
        existing = self._pages.get(name)
        if existing is page:
            return
        if existing is not None:
            raise ValueError(f"Page name {name!r} is already registered")
        self._pages[name] = page
        logger.debug(f"Registered page {name}")

    @property
    def page_names(self) -> list[str]:
        return list(self._pages)

    def switch_to(self, name: str) -> None:
        """Make a registered page the visible one."""
        if name not in self._pages:
            raise KeyError(f"Page {name!r} is not registered")
        self._visible = name

    @property
    def visible_name(self) -> str | None:
        return self._visible

    @property
    def visible_page(self) -> "Page | None":
        if self._visible is None:
            return None
        return self._pages[self._visible]
