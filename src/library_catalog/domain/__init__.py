"""
Domain Layer - Library catalog domain model.

The catalog context owns catalog items, the catalog container and the
facade the calling layer talks to.
"""
