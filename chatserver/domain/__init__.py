"""
DOMAIN LAYER - Chat membership and identity rules

This layer contains:
- Entities: Business objects with identity (User, Workspace, Chat)
- Value Objects: Immutable types (UserEmail, ChatType)
- Ports: Interfaces that infrastructure implements (repositories, unit of work)
- Policies: Pure authorization decisions (chat_access)
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, SQLAlchemy, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
4. This is where business rules live
"""
