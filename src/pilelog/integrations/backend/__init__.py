"""
Pile log web service client factory.
"""

from pilelog.integrations.backend.base import BackendError, BaseBackend
from pilelog.integrations.backend.http import HttpBackend


def get_backend() -> BaseBackend:
    """Get web service client configured from settings."""
    return HttpBackend()


__all__ = [
    "BackendError",
    "BaseBackend",
    "HttpBackend",
    "get_backend",
]
