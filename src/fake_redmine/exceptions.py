"""
Custom exception hierarchy for the fake Redmine server.

Each exception carries a context dict for structured logging.
"""


class FakeRedmineError(Exception):
    """Base exception for all fake Redmine errors."""

    def __init__(self, message: str, context: dict = None):
        self.context = context or {}
        super().__init__(message)


class ConfigurationError(FakeRedmineError):
    """Raised when configuration is invalid."""
    pass


class ValidationError(FakeRedmineError):
    """Raised when static data fails validation."""
    pass


class StatusCatalogError(ValidationError):
    """Raised when the issue status table is malformed."""
    pass
