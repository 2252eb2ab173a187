"""
Protocol definitions for resource handlers.

This module defines the interface every managed resource type exposes
to the reconciliation engine. Using Python's Protocol (structural
subtyping) allows plain objects to qualify without inheritance.

Design Pattern: Strategy Pattern
    - ResourceHandler: one strategy per resource type, looked up by
      type name through the ResourceRegistry
"""

from typing import Protocol, runtime_checkable, Any, Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    # Avoid circular imports - only import for type hints
    from .context import OperationContext, ResourceData


@runtime_checkable
class ResourceHandler(Protocol):
    """
    Protocol defining the lifecycle interface of a managed resource type.

    The engine calls create/read/update/delete with the state record it
    owns, plus the initialized provider and a per-call context.

    Example Implementation:
        class MetricsDestinationHandler:
            type_name = "aws_rum_metrics_destination"

            def create(self, resource, provider, context):
                put_metrics_destination(resource, provider, context)
            ...
    """

    type_name: str

    def create(self, resource: 'ResourceData', provider: Any, context: 'OperationContext') -> Optional[Dict[str, Any]]:
        """Create the remote object and populate the resource id."""
        ...

    def read(self, resource: 'ResourceData', provider: Any, context: 'OperationContext') -> Optional[Dict[str, Any]]:
        """
        Refresh observed attributes from the remote object.

        Returns None (and clears the id) when a previously created
        object no longer exists.
        """
        ...

    def update(self, resource: 'ResourceData', provider: Any, context: 'OperationContext') -> Optional[Dict[str, Any]]:
        """Overwrite the remote object with the desired attributes."""
        ...

    def delete(self, resource: 'ResourceData', provider: Any, context: 'OperationContext') -> None:
        """Remove the remote object; already-absent objects are not an error."""
        ...

    def import_state(self, resource_id: str, provider: Any, context: 'OperationContext') -> 'ResourceData':
        """Build a state record for an existing remote object."""
        ...

    def validate(self, attributes: Dict[str, Any]) -> Any:
        """Validate desired attributes before any lifecycle call."""
        ...
