"""
ci-term dashboard module.

This module contains the page state machine (pages, page container and
router), the Textual shell that hosts it, and the ci-term command line.

The dashboard depends on ci_service for page contexts and on ci_client for
the store adapter it is started with.
"""

from .commands import IdentifierChain
from .container import PageContainer
from .router import Router

__all__ = ["IdentifierChain", "PageContainer", "Router"]
