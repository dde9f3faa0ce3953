"""
Unit tests for ci_term.app.

Drives the Textual shell headlessly and checks that key presses reach the
visible page and move the router between pages.
"""

import pytest

from ci_common.errors import StoreError
from ci_term.app import DashboardApp


class TestDashboardApp:
    """Test suite for DashboardApp class."""

    @pytest.mark.asyncio
    async def test_starts_on_project_list(self, router):
        app = DashboardApp(router)
        async with app.run_test() as pilot:
            await pilot.pause()
            assert router.current_page.name == "projectlist"
            assert app.sub_title == "Projects"

    @pytest.mark.asyncio
    async def test_drill_down_and_back(self, router):
        app = DashboardApp(router)
        async with app.run_test() as pilot:
            await pilot.press("enter")
            assert router.current_page.name == "buildlist"
            assert app.sub_title == "Builds"

            await pilot.press("enter", "down", "enter")
            assert router.current_page.name == "joblog"
            assert router.current_page.chain.job_id == "j2"

            await pilot.press("escape")
            assert router.current_page.name == "joblist"
            assert router.current_page.chain.build_id == "b2"

    @pytest.mark.asyncio
    async def test_reload_recovers_from_error(self, store, router):
        store.errors["get_projects"] = StoreError("server unavailable")
        app = DashboardApp(router)
        async with app.run_test() as pilot:
            await pilot.pause()
            assert router.current_page.error == "server unavailable"

            del store.errors["get_projects"]
            await pilot.press("f5")
            assert router.current_page.error is None
            assert router.current_page.context is not None

    @pytest.mark.asyncio
    async def test_scroll_keys_do_not_navigate(self, router):
        app = DashboardApp(router)
        async with app.run_test() as pilot:
            router.load_job_log("p-api", "b2", "j1")
            app.repaint(scroll_home=True)
            await pilot.press("end", "home", "pagedown")
            assert router.current_page.name == "joblog"
