"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every feature uses (DB wiring,
settings, logging). Task SQL and request handling stay in `tasks/`.
"""
