"""
Resource registry for dynamic resource type lookup.

This module implements the Registry pattern, providing a central place
to register and retrieve resource handlers by their type name.

Design Pattern: Registry Pattern
    - Handlers register themselves when their provider package is imported
    - Lookup is done by type name (e.g., "aws_rum_metrics_destination")
    - The engine dispatches lifecycle calls without importing adapters

How Registration Works:
    The AWS provider package registers its handlers on import:

        # In providers/aws/__init__.py
        from rum_provider.core.registry import ResourceRegistry
        ResourceRegistry.register("aws_rum_metrics_destination", MetricsDestinationHandler())

    Importing rum_provider.providers triggers every provider package.
"""

from typing import Dict, TYPE_CHECKING

if TYPE_CHECKING:
    from .protocols import ResourceHandler

from .exceptions import ResourceTypeNotFoundError


class ResourceRegistry:
    """
    Central registry for resource handlers.

    Handlers are stateless, so one instance per type name is stored
    and returned on every lookup.

    Example Usage:
        handler = ResourceRegistry.get("aws_rum_metrics_destination")
        handler.create(resource, provider, context)
    """

    # Key: resource type name, Value: handler instance
    _handlers: Dict[str, 'ResourceHandler'] = {}

    @classmethod
    def register(cls, type_name: str, handler: 'ResourceHandler') -> None:
        """
        Register a handler under a resource type name.

        Registering the same handler class twice is allowed; a
        different handler class for the same name is an error.

        Raises:
            ValueError: If type_name is already registered with a different handler
        """
        if type_name in cls._handlers:
            existing = cls._handlers[type_name]
            if type(existing) is not type(handler):
                raise ValueError(
                    f"Resource type '{type_name}' is already registered with "
                    f"{type(existing).__name__}. Cannot re-register with {type(handler).__name__}."
                )
            return

        cls._handlers[type_name] = handler

    @classmethod
    def get(cls, type_name: str) -> 'ResourceHandler':
        """
        Get the handler registered for a resource type.

        Raises:
            ResourceTypeNotFoundError: If no handler is registered with that name.
        """
        if type_name not in cls._handlers:
            raise ResourceTypeNotFoundError(type_name, cls.list_types())
        return cls._handlers[type_name]

    @classmethod
    def list_types(cls) -> list[str]:
        """Return registered type names, sorted alphabetically."""
        return sorted(cls._handlers.keys())

    @classmethod
    def is_registered(cls, type_name: str) -> bool:
        return type_name in cls._handlers

    @classmethod
    def clear(cls) -> None:
        """
        Clear all registered handlers.

        This is primarily used for testing to reset state between tests.
        """
        cls._handlers.clear()
