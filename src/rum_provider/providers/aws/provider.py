"""
AWS provider implementation.

This module holds the boto3 clients used by the AWS resource adapters.
Adapters receive the provider explicitly instead of reaching for a
process-wide client.

Usage:
    provider = AWSProvider()
    provider.initialize_clients({
        "aws_access_key_id": "...",
        "aws_secret_access_key": "...",
        "aws_region": "eu-central-1"
    }, config)

    rum_client = provider.clients["rum"]
"""

from typing import Optional, TYPE_CHECKING

from ..base import BaseProvider
from ... import constants as CONSTANTS
from ...logger import logger

if TYPE_CHECKING:
    from ...core.context import ProviderConfig


class AWSProvider(BaseProvider):
    """
    AWS provider holding initialized boto3 clients.

    Attributes:
        name: Always "aws" for this provider
        clients: Dictionary of initialized boto3 clients
        region: AWS region the clients talk to
    """

    name: str = "aws"

    def __init__(self):
        """Initialize AWS provider with empty state."""
        super().__init__()
        self._region: str = ""

    @property
    def region(self) -> str:
        """Get the AWS region for this provider instance."""
        return self._region

    def initialize_clients(self, credentials: dict, config: Optional['ProviderConfig'] = None) -> None:
        """
        Initialize boto3 clients for AWS services.

        Args:
            credentials: AWS credentials dictionary containing:
                - aws_access_key_id: AWS access key
                - aws_secret_access_key: AWS secret key
                - aws_region: AWS region (default: "eu-central-1")
                - aws_session_token: Optional STS session token
            config: Optional ProviderConfig supplying the retry policy
        """
        from .clients import create_aws_clients, build_client_config

        self._region = credentials.get("aws_region") or CONSTANTS.DEFAULT_AWS_REGION

        if config is not None:
            client_config = build_client_config(config.max_retries, config.retry_mode)
        else:
            client_config = build_client_config()

        self._clients = create_aws_clients(
            access_key_id=credentials.get("aws_access_key_id"),
            secret_access_key=credentials.get("aws_secret_access_key"),
            region=self._region,
            session_token=credentials.get("aws_session_token"),
            client_config=client_config
        )

        self._initialized = True
        logger.debug(f"AWS clients initialized for region {self._region}")
