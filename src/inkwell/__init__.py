"""
Inkwell
Custom GraphQL queries for articles and author contacts
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
