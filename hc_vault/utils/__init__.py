"""
Shared helpers.
"""

from .http import VaultHTTPClient, parse_response, serialize_body

__all__ = ["VaultHTTPClient", "parse_response", "serialize_body"]
