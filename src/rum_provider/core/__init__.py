"""
Core abstractions for the RUM resource provider.

Modules:
    protocols: Interface definitions (ResourceHandler)
    context: OperationContext, ResourceData, ProviderConfig
    registry: ResourceRegistry for resource type lookup
    config_loader: Configuration loading utilities
    exceptions: Typed error taxonomy
"""

from .protocols import ResourceHandler
from .context import OperationContext, ProviderConfig, ResourceData
from .registry import ResourceRegistry
from .exceptions import (
    ProviderError,
    ValidationError,
    NotFoundError,
    EmptyResultError,
    AmbiguousResultError,
    RemoteCallError,
    OperationCancelledError,
    ConfigurationError,
    ResourceTypeNotFoundError,
)

__all__ = [
    # Protocols
    "ResourceHandler",
    # Context
    "OperationContext",
    "ProviderConfig",
    "ResourceData",
    # Registry
    "ResourceRegistry",
    # Exceptions
    "ProviderError",
    "ValidationError",
    "NotFoundError",
    "EmptyResultError",
    "AmbiguousResultError",
    "RemoteCallError",
    "OperationCancelledError",
    "ConfigurationError",
    "ResourceTypeNotFoundError",
]
