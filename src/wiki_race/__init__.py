"""
wiki_race - Core Library

Automated opponents for the Wikipedia link race: navigators that walk from a
start article to a goal article using only each article's outbound links.
"""

from .events import EventBus, NavigationEvent
from .models import NavigationStep, NavigationResult, NavigatorStatus

__all__ = ['EventBus', 'NavigationEvent', 'NavigationStep', 'NavigationResult', 'NavigatorStatus']
