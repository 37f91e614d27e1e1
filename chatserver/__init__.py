"""Chat server: workspaces, users and chats behind a FastAPI API."""

__version__ = "0.1.0"
