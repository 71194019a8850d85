"""
Auth methods.

Pluggable ways for the client to obtain and renew a Vault token.
"""

from .approle import ApproleSession
from .base import Auth, TokenState
from .env import auth_from_env, env_approle, env_kubernetes
from .kubernetes import KubernetesSession, load_jwt
from .models import ApproleLogin, AuthInfo, KubernetesLogin, LoginResponse
from .token import TokenSession

__all__ = [
    "Auth",
    "TokenState",
    "ApproleSession",
    "KubernetesSession",
    "TokenSession",
    "load_jwt",
    "env_approle",
    "env_kubernetes",
    "auth_from_env",
    "AuthInfo",
    "LoginResponse",
    "ApproleLogin",
    "KubernetesLogin",
]
