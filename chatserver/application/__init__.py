"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (signup, signin, chat create/update/delete)
- queries/   → Read operations (chat list/get, workspace members)
- dto/       → Data Transfer Objects returned to the presentation layer
- common/    → Shared interfaces (Command, Query base classes)

Rules:
- Depends on Domain layer only (plus the security leaves it is handed)
- No HTTP/framework code here
- Coordinates entities, policies, repositories and the unit of work
"""
