"""
Per-domain repository modules for database access.

`reading_list.db.crud` is the facade the API layer calls.
"""
