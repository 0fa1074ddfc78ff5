"""Data stores for persistence.

Stores handle:
- Database handle: engine, sessions, schema bootstrap
- Repositories: ORM reads/writes for score records

No business/ranking logic in stores - that belongs in services.
"""
