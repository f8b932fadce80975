class InterpretationError(Exception):
    """Raised when a report cannot be interpreted."""


class InterpretationNetworkError(InterpretationError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
