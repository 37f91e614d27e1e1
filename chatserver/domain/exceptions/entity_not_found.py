"""
EntityNotFoundError - Raised when a requested entity does not exist.
Maps to: HTTP 404 Not Found
"""


class EntityNotFoundError(Exception):
    """Exception raised when a requested entity is not found."""

    def __init__(self, message: str = "The requested entity was not found."):
        super().__init__(message)


class WorkspaceMissing(EntityNotFoundError):
    """The workspace a chat points at cannot be resolved."""

    def __init__(self, message: str = "Workspace of chat does not exist."):
        super().__init__(message)
