"""
Unit tests for ci_term.pages.

Tests refresh/error state, key handling and rendering of every page.
"""

import io

import pytest
from rich.console import Console

from ci_term.commands import (
    BackCommand,
    IdentifierChain,
    OpenCommand,
    RedrawCommand,
    ReloadCommand,
    ScrollCommand,
)
from ci_term.pages import BuildListPage, JobListPage, JobLogPage, ProjectListPage


def render_text(page) -> str:
    """Render a page to plain text."""
    console = Console(file=io.StringIO(), width=140, record=True, color_system=None)
    console.print(page.render())
    return console.export_text()


@pytest.fixture
def project_page(controller):
    page = ProjectListPage()
    page.refresh(IdentifierChain(), controller.project_list_context())
    return page


@pytest.fixture
def build_page(controller):
    page = BuildListPage()
    page.refresh(IdentifierChain("p-api"), controller.build_list_context("p-api"))
    return page


@pytest.fixture
def job_page(controller):
    page = JobListPage()
    page.refresh(IdentifierChain("p-api", "b2"), controller.job_list_context("p-api", "b2"))
    return page


@pytest.fixture
def log_page(controller):
    page = JobLogPage()
    page.refresh(IdentifierChain("p-api", "b2", "j2"), controller.job_log_context("j2"))
    return page


class TestRefresh:
    """Test suite for Page.refresh and Page.show_error."""

    def test_empty_page_is_loading(self):
        """Test that a page shows a placeholder before its first refresh."""
        assert "Loading..." in render_text(BuildListPage())

    def test_refresh_clears_error(self, controller):
        """Test that new content replaces a previous error."""
        page = BuildListPage()
        page.show_error(IdentifierChain("p-api"), "boom")
        assert page.error == "boom"

        page.refresh(IdentifierChain("p-api"), controller.build_list_context("p-api"))
        assert page.error is None
        assert "boom" not in render_text(page)

    def test_show_error_clears_content(self, build_page):
        """Test that an error never shows alongside stale content."""
        build_page.show_error(IdentifierChain("p-api"), "project p-api not found")

        text = render_text(build_page)
        assert build_page.context is None
        assert "project p-api not found" in text
        assert "b2" not in text

    def test_refresh_twice_renders_identically(self, controller):
        """Test that refreshing with the same data gives the same output."""
        page = JobListPage()
        chain = IdentifierChain("p-api", "b2")
        page.refresh(chain, controller.job_list_context("p-api", "b2"))
        first = render_text(page)
        page.refresh(chain, controller.job_list_context("p-api", "b2"))
        assert render_text(page) == first


class TestCommonKeys:
    """Test suite for keys every page handles."""

    @pytest.mark.parametrize("key", ["f5", "r"])
    def test_reload(self, build_page, key):
        """Test that the reload keys reload the current chain."""
        assert build_page.handle_key(key) == ReloadCommand(IdentifierChain("p-api"))

    @pytest.mark.parametrize("key", ["escape", "backspace"])
    def test_back(self, log_page, key):
        """Test that the back keys carry the current chain."""
        assert log_page.handle_key(key) == BackCommand(IdentifierChain("p-api", "b2", "j2"))

    def test_project_list_has_no_back(self, project_page):
        """Test that the top page ignores the back key."""
        assert project_page.handle_key("escape") is None

    def test_unknown_key(self, build_page):
        """Test that unbound keys are ignored."""
        assert build_page.handle_key("x") is None

    def test_keys_work_on_error_page(self):
        """Test that reload and back still work when the page shows an error."""
        page = JobListPage()
        chain = IdentifierChain("p-api", "b9")
        page.show_error(chain, "build b9 not found")

        assert page.handle_key("f5") == ReloadCommand(chain)
        assert page.handle_key("escape") == BackCommand(chain)
        assert page.handle_key("enter") is None


class TestListSelection:
    """Test suite for list navigation."""

    def test_open_first_item(self, project_page):
        """Test that enter opens the selected project's builds."""
        assert project_page.handle_key("enter") == OpenCommand(IdentifierChain("p-api"))

    def test_move_and_open(self, build_page):
        """Test that down moves the selection before opening."""
        assert build_page.handle_key("down") == RedrawCommand()
        assert build_page.handle_key("enter") == OpenCommand(IdentifierChain("p-api", "b1"))

    def test_selection_is_clamped(self, job_page):
        """Test that the cursor stays within the list."""
        job_page.handle_key("up")
        assert job_page.selected == 0
        for _ in range(5):
            job_page.handle_key("j")
        assert job_page.selected == 1
        assert job_page.handle_key("enter") == OpenCommand(IdentifierChain("p-api", "b2", "j2"))

    def test_reload_keeps_selection(self, controller, build_page):
        """Test that refreshing the same chain keeps the cursor."""
        build_page.handle_key("down")
        build_page.refresh(IdentifierChain("p-api"), controller.build_list_context("p-api"))
        assert build_page.selected == 1

    def test_new_chain_resets_selection(self, controller, build_page):
        """Test that loading another project starts at the top."""
        build_page.handle_key("down")
        build_page.refresh(IdentifierChain("p-cli"), controller.build_list_context("p-cli"))
        assert build_page.selected == 0

    def test_failed_load_of_new_chain_resets_selection(self, controller, build_page):
        """Test that a reload after a failed switch to another project starts at the top."""
        build_page.handle_key("down")
        build_page.handle_key("down")
        build_page.show_error(IdentifierChain("p-cli"), "Error contacting CI server: refused")
        assert build_page.selected == 0

        build_page.refresh(IdentifierChain("p-cli"), controller.build_list_context("p-cli"))
        assert build_page.selected == 0

    def test_failed_reload_keeps_selection(self, controller, build_page):
        """Test that a failed reload of the same chain keeps the cursor."""
        build_page.handle_key("down")
        build_page.show_error(IdentifierChain("p-api"), "down")
        build_page.refresh(IdentifierChain("p-api"), controller.build_list_context("p-api"))
        assert build_page.selected == 1

    def test_empty_list_opens_nothing(self, controller):
        """Test that enter on an empty list does nothing."""
        page = BuildListPage()
        page.refresh(IdentifierChain("p-web"), controller.build_list_context("p-web"))
        assert page.handle_key("enter") is None
        assert "No builds available" in render_text(page)


class TestJobLogPage:
    """Test suite for the job log page."""

    @pytest.mark.parametrize(
        "key,action",
        [("up", "up"), ("j", "down"), ("pagedown", "page_down"), ("home", "home"), ("end", "end")],
    )
    def test_scroll_keys(self, log_page, key, action):
        """Test that scroll keys are passed to the shell."""
        assert log_page.handle_key(key) == ScrollCommand(action)

    def test_enter_does_nothing(self, log_page):
        """Test that the log page has nothing to open."""
        assert log_page.handle_key("enter") is None

    def test_renders_info_and_log(self, log_page):
        """Test that the info box and the log text are rendered."""
        text = render_text(log_page)
        assert "Job: test" in text
        assert "ID: j2" in text
        assert "Duration: 4m00s" in text
        assert "1 failed" in text

    def test_invalid_utf8_log(self, controller, store):
        """Test that undecodable log bytes do not break rendering."""
        store.logs["j1"] = b"ok \xff\xfe done"
        page = JobLogPage()
        page.refresh(IdentifierChain("p-api", "b2", "j1"), controller.job_log_context("j1"))
        assert "done" in render_text(page)


class TestRendering:
    """Test suite for the list pages' content."""

    def test_project_list(self, project_page):
        """Test that projects render in name order with their last build."""
        text = render_text(project_page)
        assert text.index("api") < text.index("cli") < text.index("web")
        assert "github.com/acme/api" in text
        assert "Failed" in text

    def test_build_list(self, build_page):
        """Test that builds render newest first after the project info."""
        text = render_text(build_page)
        assert "Project: api" in text
        assert text.index("b2") < text.index("b1") < text.index("b3")
        assert "Pending" in text

    def test_job_list(self, job_page):
        """Test that jobs render in execution order with durations."""
        text = render_text(job_page)
        assert "Build: b2" in text
        assert text.index("build") < text.index("test")
        assert "3m00s" in text
