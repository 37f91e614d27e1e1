from .get_workspace import GetWorkspaceHandler, GetWorkspaceQuery
from .list_workspace_users import ListWorkspaceUsersHandler, ListWorkspaceUsersQuery

__all__ = [
    "GetWorkspaceHandler",
    "GetWorkspaceQuery",
    "ListWorkspaceUsersHandler",
    "ListWorkspaceUsersQuery",
]
