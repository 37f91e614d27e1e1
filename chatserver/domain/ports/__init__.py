"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

- repositories/   → Data persistence interfaces (users, workspaces, chats)
- unit_of_work.py → Transaction boundary shared by the repositories of a request
"""
