"""
Database module for the Shoe Store backend
"""

from .connection import get_async_engine, get_async_session, init_database

__all__ = ["get_async_engine", "get_async_session", "init_database"]
