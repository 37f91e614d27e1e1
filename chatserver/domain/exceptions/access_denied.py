"""
AccessDeniedError - Raised when user lacks permission to act on a resource.
Maps to: HTTP 403 Forbidden
"""


class AccessDeniedError(Exception):
    """Raised when user lacks permission to access a resource"""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)


class CrossWorkspaceDenied(AccessDeniedError):
    """Acting user and chat live in different workspaces."""

    def __init__(self, message: str = "Can not update a chat in another workspace."):
        super().__init__(message)


class NotWorkspaceOwner(AccessDeniedError):
    """Acting user does not own the chat's workspace."""

    def __init__(self, message: str = "Only the workspace owner can delete the chat."):
        super().__init__(message)
