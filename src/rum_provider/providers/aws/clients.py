"""
AWS SDK client initialization.

This module provides centralized client creation for the AWSProvider.

Design Decision:
    We return a dictionary of clients rather than individual module-level
    variables. This allows the provider to manage client lifecycle and
    enables easy testing via mocking.

Usage:
    from rum_provider.providers.aws.clients import create_aws_clients

    clients = create_aws_clients(
        access_key_id="...",
        secret_access_key="...",
        region="eu-central-1"
    )
    # clients["rum"]
"""

from typing import Dict, Any, Optional
import boto3
from botocore.config import Config

from ... import constants as CONSTANTS


def build_client_config(
    max_retries: int = CONSTANTS.DEFAULT_MAX_RETRIES,
    retry_mode: str = CONSTANTS.DEFAULT_RETRY_MODE
) -> Config:
    """
    Build the botocore client configuration.

    Retries are delegated entirely to botocore; the adapter itself
    never retries a failed call.

    Args:
        max_retries: Retries after the first attempt (0 disables retries)
        retry_mode: botocore retry mode

    Returns:
        botocore Config carrying the retry policy
    """
    return Config(retries={"max_attempts": max_retries, "mode": retry_mode})


def create_aws_clients(
    access_key_id: Optional[str],
    secret_access_key: Optional[str],
    region: str,
    session_token: Optional[str] = None,
    client_config: Optional[Config] = None
) -> Dict[str, Any]:
    """
    Create and return all AWS boto3 clients the provider needs.

    Empty credentials are passed as None so boto3 falls back to its
    default credential chain (environment, shared config, instance role).

    Args:
        access_key_id: AWS access key ID
        secret_access_key: AWS secret access key
        region: AWS region (e.g., "eu-central-1")
        session_token: Optional STS session token
        client_config: Optional botocore Config (retry policy)

    Returns:
        Dictionary mapping service names to boto3 client instances.

    Client Keys:
        - rum: CloudWatch RUM
    """
    config = {
        "aws_access_key_id": access_key_id or None,
        "aws_secret_access_key": secret_access_key or None,
        "aws_session_token": session_token or None,
        "region_name": region,
        "config": client_config or build_client_config(),
    }

    return {
        "rum": boto3.client("rum", **config),
    }
