"""
AWS Provider package.

Auto-Registration:
    Importing this package registers every AWS resource handler with the
    ResourceRegistry. This happens automatically when the providers
    package is imported.

Package Structure:
    aws/
    ├── __init__.py           # This file - registers resource handlers
    ├── provider.py           # AWSProvider class
    ├── clients.py            # boto3 client initialization
    ├── schema.py             # pydantic attribute schemas
    ├── util_aws.py           # Error-code and console-link helpers
    └── resources/
        └── metrics_destination.py

Usage:
    import rum_provider.providers

    from rum_provider.core import ResourceRegistry
    handler = ResourceRegistry.get("aws_rum_metrics_destination")
"""

from ...core.registry import ResourceRegistry
from ... import constants as CONSTANTS
from .provider import AWSProvider
from .resources import MetricsDestinationHandler

# Auto-register handlers when the module is imported
ResourceRegistry.register(CONSTANTS.RUM_METRICS_DESTINATION_TYPE, MetricsDestinationHandler())

__all__ = ["AWSProvider", "MetricsDestinationHandler"]
