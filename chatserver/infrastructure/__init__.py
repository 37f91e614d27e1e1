"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: SQLAlchemy engine, models, repositories and unit of work
- security/: Argon2 password hashing and EdDSA token signing
"""
