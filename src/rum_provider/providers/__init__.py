"""
Provider implementations package.

Importing this package triggers registration of every resource handler
with the ResourceRegistry, because each provider's __init__.py calls
ResourceRegistry.register() when imported.

Usage:
    import rum_provider.providers

    from rum_provider.core import ResourceRegistry
    handler = ResourceRegistry.get("aws_rum_metrics_destination")
"""

# Import provider modules to trigger auto-registration
from . import aws
