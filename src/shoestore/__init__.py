"""
Shoe Store Backend
GraphQL API for a small shoe inventory
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
