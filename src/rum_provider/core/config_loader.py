"""
Configuration loading utilities.

This module provides functions to load and parse provider configuration
from JSON files in a project directory.

File Loading Order:
    1. config.json - Core settings (mode, retry policy)
    2. config_credentials_aws.json - AWS credentials (optional)

Usage:
    from rum_provider.core.config_loader import load_provider_config

    config = load_provider_config(Path("/app/projects/my-rum"))
"""

import json
from pathlib import Path
from typing import Any, Dict

from .context import ProviderConfig
from .exceptions import ConfigurationError
from .. import constants as CONSTANTS


def _load_json_file(file_path: Path, required: bool = True) -> Dict[str, Any]:
    """
    Load a JSON file and return its contents as a dictionary.

    Args:
        file_path: Path to the JSON file
        required: If True, raise error when file is missing. If False, return empty dict.

    Returns:
        Parsed JSON content as dictionary

    Raises:
        ConfigurationError: If file is missing (when required) or has invalid JSON
    """
    if not file_path.exists():
        if required:
            raise ConfigurationError(
                f"Required configuration file not found: {file_path.name}",
                config_file=str(file_path)
            )
        return {}

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            content = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Invalid JSON in configuration file: {e}",
            config_file=str(file_path)
        )

    if not isinstance(content, dict):
        raise ConfigurationError(
            "Configuration file must contain a JSON object",
            config_file=str(file_path)
        )
    return content


def _require_fields(content: Dict[str, Any], file_name: str, file_path: Path) -> None:
    for field in CONSTANTS.CONFIG_SCHEMAS.get(file_name, []):
        if field not in content:
            raise ConfigurationError(
                f"Missing required field '{field}' in {file_name}",
                config_file=str(file_path)
            )


def load_provider_config(project_path: Path) -> ProviderConfig:
    """
    Load all configuration files for a project.

    Args:
        project_path: Path to the project directory containing config files

    Returns:
        ProviderConfig with mode, retry policy and credentials

    Raises:
        ConfigurationError: If required config files are missing or invalid

    Example:
        config = load_provider_config(Path("/app/projects/my-rum"))
        print(config.mode)  # "DEBUG"
    """
    config_path = project_path / CONSTANTS.CONFIG_FILE
    core_config = _load_json_file(config_path, required=True)
    _require_fields(core_config, CONSTANTS.CONFIG_FILE, config_path)

    mode = str(core_config["mode"]).upper()
    if mode not in CONSTANTS.VALID_MODES:
        raise ConfigurationError(
            f"Invalid mode '{core_config['mode']}'. Expected one of {CONSTANTS.VALID_MODES}",
            config_file=str(config_path)
        )

    max_retries = core_config.get("max_retries", CONSTANTS.DEFAULT_MAX_RETRIES)
    if not isinstance(max_retries, int) or isinstance(max_retries, bool) or max_retries < 0:
        raise ConfigurationError(
            f"'max_retries' must be a non-negative integer, got {max_retries!r}",
            config_file=str(config_path)
        )

    retry_mode = core_config.get("retry_mode", CONSTANTS.DEFAULT_RETRY_MODE)
    if retry_mode not in CONSTANTS.VALID_RETRY_MODES:
        raise ConfigurationError(
            f"Invalid retry_mode '{retry_mode}'. Expected one of {CONSTANTS.VALID_RETRY_MODES}",
            config_file=str(config_path)
        )

    return ProviderConfig(
        mode=mode,
        max_retries=max_retries,
        retry_mode=retry_mode,
        credentials=load_credentials(project_path),
    )


def load_credentials(project_path: Path) -> Dict[str, dict]:
    """
    Load credentials for the configured providers.

    Args:
        project_path: Path to the project directory

    Returns:
        Dictionary mapping provider names to their credentials
        e.g., {"aws": {"aws_access_key_id": "...", ...}}

    Note:
        Credentials files are optional - only loaded if they exist.
        This allows using environment variables or IAM roles instead.
    """
    credentials = {}

    aws_path = project_path / CONSTANTS.CONFIG_CREDENTIALS_AWS_FILE
    aws_creds = _load_json_file(aws_path, required=False)
    if aws_creds:
        _require_fields(aws_creds, CONSTANTS.CONFIG_CREDENTIALS_AWS_FILE, aws_path)
        credentials["aws"] = aws_creds

    return credentials
