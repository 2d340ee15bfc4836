"""
Wikipedia module for wiki_race.

This module contains functionality for talking to the live Wikipedia API,
including article links, extracts and random task selection.
"""

from .live_service import LiveWikiService
from .task_selector import select_random_task

__all__ = [
    'LiveWikiService',
    'select_random_task',
]
