"""
POLICIES - Pure authorization decisions.

No repositories here: callers load the entities and pass them in, so the
rules can be exercised without a database.
"""

from chatserver.domain.policies.chat_access import authorize_delete, authorize_update

__all__ = [
    "authorize_delete",
    "authorize_update",
]
