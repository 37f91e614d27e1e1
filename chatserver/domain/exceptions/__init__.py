"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic and caught by presentation layer.
Presentation layer maps them to HTTP status codes.
"""

from chatserver.domain.exceptions.entity_not_found import (
    EntityNotFoundError,
    WorkspaceMissing,
)
from chatserver.domain.exceptions.access_denied import (
    AccessDeniedError,
    CrossWorkspaceDenied,
    NotWorkspaceOwner,
)
from chatserver.domain.exceptions.validation_error import (
    DomainValidationError,
    InvalidArgument,
    InvalidMembership,
)
from chatserver.domain.exceptions.conflict import (
    ConflictError,
    DuplicateWorkspace,
    EmailAlreadyExists,
    OwnershipAssignmentFailed,
)
from chatserver.domain.exceptions.authentication import (
    AuthenticationError,
    ExpiredToken,
    InvalidToken,
    MalformedCredential,
    MalformedToken,
    SigningError,
)

__all__ = [
    "EntityNotFoundError",
    "WorkspaceMissing",
    "AccessDeniedError",
    "CrossWorkspaceDenied",
    "NotWorkspaceOwner",
    "DomainValidationError",
    "InvalidArgument",
    "InvalidMembership",
    "ConflictError",
    "DuplicateWorkspace",
    "EmailAlreadyExists",
    "OwnershipAssignmentFailed",
    "AuthenticationError",
    "ExpiredToken",
    "InvalidToken",
    "MalformedCredential",
    "MalformedToken",
    "SigningError",
]
