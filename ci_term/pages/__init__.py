"""
Dashboard pages.
"""

from .base import ListPage, Page
from .build_list import BUILD_LIST_PAGE_NAME, BuildListPage
from .job_list import JOB_LIST_PAGE_NAME, JobListPage
from .job_log import JOB_LOG_PAGE_NAME, JobLogPage
from .project_list import PROJECT_LIST_PAGE_NAME, ProjectListPage

__all__ = [
    "BUILD_LIST_PAGE_NAME",
    "BuildListPage",
    "JOB_LIST_PAGE_NAME",
    "JOB_LOG_PAGE_NAME",
    "JobListPage",
    "JobLogPage",
    "ListPage",
    "PROJECT_LIST_PAGE_NAME",
    "Page",
    "ProjectListPage",
]
