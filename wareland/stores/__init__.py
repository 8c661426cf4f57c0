"""Data stores for persistence.

Stores handle:
- PostgreSQL: DB session, repositories, ORM operations
- Memory: in-process repositories for local demos and tests

No business logic in stores - that belongs in services.
"""
