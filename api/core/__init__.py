"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every feature uses (settings, DB
wiring, error types and the JSON envelope). Keep feature-specific SQL and
business logic in the corresponding feature package (e.g. `chirps/`).
"""
