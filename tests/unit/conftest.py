"""
Shared fixtures for unit tests.

Provides an in-memory build store with a small CI history:

- project "api" (p-api): builds b1 (10:00), b2 (12:00), b3 (no worker)
- project "web" (p-web): no builds
- project "cli" (p-cli): build b4 (09:00)

Build b2 has jobs j1 (12:01, succeeded) and j2 (12:05, failed).
"""

import pytest

from ci_common.models import Project
from ci_service.contexts import Controller
from ci_service.service import BuildService
from ci_term.router import Router
from fakes import FakeBuildStore, at, make_build, make_job


@pytest.fixture
def store():
    """A populated in-memory store."""
    return FakeBuildStore(
        projects=[
            Project(id="p-web", name="web", repo="github.com/acme/web"),
            Project(id="p-api", name="api", repo="github.com/acme/api"),
            Project(id="p-cli", name="cli", repo="github.com/acme/cli"),
        ],
        builds=[
            make_build("b1", "p-api", at(10), type="push", commit="aaaaaaaa1"),
            make_build("b2", "p-api", at(12), status="Failed", type="push", commit="bbbbbbbb2"),
            make_build("b3", "p-api", None, type="pull_request"),
            make_build("b4", "p-cli", at(9)),
        ],
        jobs={
            "b2": [
                make_job("j2", at(12, 5), at(12, 9), status="Failed", build_id="b2", name="test"),
                make_job("j1", at(12, 1), at(12, 4), build_id="b2", name="build"),
            ],
        },
        logs={
            "j1": b"compiling...\ndone\n",
            "j2": b"running tests\n1 failed\n",
        },
    )


@pytest.fixture
def service(store):
    return BuildService(store)


@pytest.fixture
def controller(service):
    return Controller(service)


@pytest.fixture
def router(controller):
    return Router(controller)
