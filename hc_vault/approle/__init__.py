"""
AppRole role management module.

Login with AppRole credentials lives in hc_vault.auth.approle.
"""

from .models import ApproleOptions, SecretIDData
from .roles import ApproleManager

__all__ = ["ApproleManager", "ApproleOptions", "SecretIDData"]
