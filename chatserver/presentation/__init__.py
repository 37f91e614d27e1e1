"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers and endpoints
- dependencies/: the Auth Gate resolving the caller from a bearer token
- middleware.py: request id and server time headers
"""
