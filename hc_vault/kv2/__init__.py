"""
KV v2 secrets engine module.

Handles versioned secrets, their metadata and the engine configuration.
"""

from .models import KV2Configuration, SecretMetadata, SecretVersion
from .secrets import KV2Manager

__all__ = [
    "KV2Manager",
    "KV2Configuration",
    "SecretMetadata",
    "SecretVersion",
]
