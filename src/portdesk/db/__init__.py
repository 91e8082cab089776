"""Database clients and utilities."""

from .supabase import DataSourceUnavailable, get_supabase_client, require_supabase_client

__all__ = ["DataSourceUnavailable", "get_supabase_client", "require_supabase_client"]
