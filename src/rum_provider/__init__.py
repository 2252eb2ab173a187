"""
Declarative-infrastructure resource adapters for AWS CloudWatch RUM.

Usage:
    from pathlib import Path
    from rum_provider import setup_provider, ResourceRegistry

    provider = setup_provider(Path("/app/projects/my-rum"))
    handler = ResourceRegistry.get("aws_rum_metrics_destination")
"""

from pathlib import Path

from .core import OperationContext, ResourceData, ResourceRegistry
from .core.config_loader import load_provider_config
from .logger import configure_logger
from .providers.aws import AWSProvider

__version__ = "0.1.0"


def setup_provider(project_path: Path) -> AWSProvider:
    """
    Load project configuration and return an initialized AWSProvider.

    Also switches the shared logger to debug output when the project
    runs in DEBUG mode.

    Raises:
        ConfigurationError: If the project configuration is invalid
    """
    config = load_provider_config(project_path)
    configure_logger(config.mode)

    provider = AWSProvider()
    provider.initialize_clients(config.get_credentials("aws"), config)
    return provider


__all__ = [
    "AWSProvider",
    "OperationContext",
    "ResourceData",
    "ResourceRegistry",
    "setup_provider",
]
