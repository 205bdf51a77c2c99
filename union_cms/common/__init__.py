"""
Shared infrastructure for settings, logging, and database schema.
These helpers are used by the API layer and by operator scripts alike.
"""
