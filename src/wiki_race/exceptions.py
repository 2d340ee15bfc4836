"""
Custom exceptions for the wiki_race package.
"""

class WikiRaceException(Exception):
    """Base exception for the package."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

class PageNotFoundException(WikiRaceException):
    """Raised when a specific Wikipedia page cannot be found."""
    pass

class WikiServiceUnavailableException(WikiRaceException):
    """Raised when the Wikipedia API is unreachable or returns an error."""
    pass

class UnknownStrategyError(WikiRaceException):
    """Raised when a requested navigation strategy is not registered."""
    pass

class NavigatorBusyError(WikiRaceException):
    """Raised when run() is called on a navigator that is already running."""
    pass
