"""
AWS resource adapters.

Each module implements the lifecycle functions of one resource type
and a handler class registered with the ResourceRegistry.
"""

from .metrics_destination import (
    MetricsDestinationHandler,
    delete_metrics_destination,
    find_metrics_destination_by_name,
    import_metrics_destination,
    put_metrics_destination,
    read_metrics_destination,
    validate_metrics_destination,
)

__all__ = [
    "MetricsDestinationHandler",
    "delete_metrics_destination",
    "find_metrics_destination_by_name",
    "import_metrics_destination",
    "put_metrics_destination",
    "read_metrics_destination",
    "validate_metrics_destination",
]
