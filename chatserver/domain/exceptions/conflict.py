"""
ConflictError - Raised when a unique resource already exists.
Maps to: HTTP 409 Conflict
"""


class ConflictError(Exception):
    """Base class for duplicate-resource errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmailAlreadyExists(ConflictError):
    def __init__(self, email: str):
        super().__init__(f"email: {email} already exists")
        self.email = email


class DuplicateWorkspace(ConflictError):
    def __init__(self, name: str):
        super().__init__(f"workspace: {name} already exists")
        self.name = name


class OwnershipAssignmentFailed(Exception):
    """The owner update matched zero rows (user not a member, or already owned)."""

    def __init__(self, workspace_id: int, user_id: int):
        super().__init__(
            f"Can not assign user {user_id} as owner of workspace {workspace_id}"
        )
        self.workspace_id = workspace_id
        self.user_id = user_id
