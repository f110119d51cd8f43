"""WordPress.com API modules.

Classes:
    StatsClient: Async HTTP client with retry and typed errors

Exceptions:
    StatsError: Base exception for all stats errors
    ConfigurationError: Missing or invalid configuration
    AuthenticationError: Token rejected by the API
    APIError: API request failures
    NetworkError: Network connectivity issues
    InvalidResponseError: Unexpected payload shape
    ContractViolationError: Broken internal invariant
"""
from .client import StatsClient
from .exceptions import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    ConnectionError,
    ContractViolationError,
    InvalidResponseError,
    NetworkError,
    NotFoundError,
    ServerError,
    StatsError,
    TimeoutError,
)

__all__ = [
    # Client
    "StatsClient",
    # Exceptions
    "StatsError",
    "ConfigurationError",
    "AuthenticationError",
    "APIError",
    "NotFoundError",
    "ServerError",
    "NetworkError",
    "ConnectionError",
    "TimeoutError",
    "InvalidResponseError",
    "ContractViolationError",
]
