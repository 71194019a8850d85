"""
Database secrets engine module.
"""

from .creds import DatabaseManager
from .models import DatabaseCredentials

__all__ = ["DatabaseManager", "DatabaseCredentials"]
