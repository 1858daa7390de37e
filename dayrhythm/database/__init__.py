"""
Database module - Supabase access layer.

This module handles:
- Supabase client creation
- Event CRUD scoped to the authenticated user
- camelCase <-> snake_case event mapping
- Bearer token verification
"""
from dayrhythm.database.auth import AuthenticatedUser, SupabaseAuthenticator
from dayrhythm.database.connection import create_supabase_client
from dayrhythm.database.mapping import from_row, to_row, update_to_columns
from dayrhythm.database.store import EventStore

__all__ = [
    "AuthenticatedUser",
    "SupabaseAuthenticator",
    "create_supabase_client",
    "EventStore",
    "from_row",
    "to_row",
    "update_to_columns",
]
