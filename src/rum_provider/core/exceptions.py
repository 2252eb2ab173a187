"""
Custom exceptions for the RUM resource provider.

This module defines the hierarchy of exceptions raised by resource
adapters so that the reconciliation engine can tell recoverable outcomes
(nothing exists remotely) apart from hard failures.

Exception Hierarchy:
    ProviderError (base)
    ├── ValidationError - Desired configuration fails schema checks
    ├── NotFoundError - Target object does not exist remotely
    │   └── EmptyResultError - A lookup returned zero records
    ├── AmbiguousResultError - A lookup returned more than one record
    ├── RemoteCallError - Any other failure reported by the remote service
    ├── OperationCancelledError - Caller aborted the operation
    ├── ConfigurationError - Invalid or missing configuration
    └── ResourceTypeNotFoundError - Unknown resource type requested
"""

from typing import Any, Optional


class ProviderError(Exception):
    """
    Base exception for all provider errors.

    All custom exceptions inherit from this class, allowing broad
    exception handling by the engine when needed.

    Attributes:
        message: Human-readable error description
        operation: Optional operation name (e.g., "putting", "deleting")
        resource_id: Optional identifier of the resource involved
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        resource_id: Optional[str] = None
    ):
        self.message = message
        self.operation = operation
        self.resource_id = resource_id

        # Build detailed message with context
        details = []
        if operation:
            details.append(f"operation={operation}")
        if resource_id:
            details.append(f"id={resource_id}")

        if details:
            full_message = f"{message} [{', '.join(details)}]"
        else:
            full_message = message

        super().__init__(full_message)


class ValidationError(ProviderError):
    """
    Raised when a desired configuration fails schema validation.

    Attributes:
        errors: List of "field: reason" strings, one per failing field

    Example:
        >>> validate_metrics_destination({"destination": "Datadog"})
        ValidationError: Invalid configuration: app_monitor_name: Field required; ...
    """

    def __init__(self, errors: list[str], resource_id: Optional[str] = None):
        self.errors = errors
        message = f"Invalid configuration: {'; '.join(errors)}"
        super().__init__(message, operation="validating", resource_id=resource_id)


class NotFoundError(ProviderError):
    """
    Raised when the target object does not exist remotely.

    Recoverable by the caller: Read drops the object from state and
    Delete treats it as success.

    Attributes:
        last_error: The remote error that reported the absence, if any
        last_request: The request parameters that produced no result
    """

    def __init__(
        self,
        message: str = "couldn't find resource",
        last_error: Optional[Exception] = None,
        last_request: Optional[dict] = None,
        resource_id: Optional[str] = None
    ):
        self.last_error = last_error
        self.last_request = last_request
        if last_error is not None:
            message = f"{message}: {last_error}"
        super().__init__(message, resource_id=resource_id)


class EmptyResultError(NotFoundError):
    """Raised when a lookup completes successfully but returns no records."""

    def __init__(self, last_request: Optional[dict] = None, resource_id: Optional[str] = None):
        super().__init__(
            "empty result",
            last_request=last_request,
            resource_id=resource_id
        )


class AmbiguousResultError(ProviderError):
    """
    Raised when a lookup keyed by a supposedly unique name returns more
    than one record.

    The adapter never picks one of the records; the count is surfaced
    so the caller can report the inconsistency.

    Attributes:
        count: Number of records the lookup returned
        last_request: The request parameters of the lookup
    """

    def __init__(
        self,
        count: int,
        last_request: Optional[dict] = None,
        resource_id: Optional[str] = None
    ):
        self.count = count
        self.last_request = last_request
        super().__init__(
            f"too many results: wanted 1, got {count}",
            resource_id=resource_id
        )


class RemoteCallError(ProviderError):
    """
    Raised when the remote service rejects or fails a call.

    This wraps boto3/botocore errors with the operation and the
    resource identifier. It is not retried here; the retry policy
    belongs to the botocore client configuration and the engine.

    Attributes:
        cause: The underlying SDK exception
    """

    def __init__(
        self,
        operation: str,
        resource_id: str,
        cause: Exception,
        resource_type: str = "resource"
    ):
        self.cause = cause
        message = f"{operation} {resource_type} ({resource_id}): {cause}"
        super().__init__(message, operation=operation, resource_id=resource_id)

    @property
    def error_code(self) -> Optional[str]:
        """Return the AWS error code of the cause, if it carries one."""
        response: Any = getattr(self.cause, "response", None)
        if not isinstance(response, dict):
            return None
        return response.get("Error", {}).get("Code")


class OperationCancelledError(ProviderError):
    """Raised when the caller's cancellation signal is set mid-operation."""

    def __init__(self, operation: str, resource_id: Optional[str] = None):
        super().__init__(
            "operation cancelled",
            operation=operation,
            resource_id=resource_id
        )


class ConfigurationError(ProviderError):
    """
    Raised when configuration is invalid or missing required fields.

    This typically occurs when:
    - Required config file is missing
    - Config file has invalid JSON
    - Required field is missing from config
    - Field value fails validation

    Example:
        >>> load_provider_config(Path("nonexistent"))
        ConfigurationError: Required configuration file not found: config.json
    """

    def __init__(self, message: str, config_file: Optional[str] = None):
        self.config_file = config_file
        if config_file:
            message = f"{message} (file: {config_file})"
        super().__init__(message)


class ResourceTypeNotFoundError(ProviderError):
    """
    Raised when an unknown resource type name is requested.

    Example:
        >>> ResourceRegistry.get("aws_rum_unknown")
        ResourceTypeNotFoundError: Resource type 'aws_rum_unknown' not found. Available: [...]
    """

    def __init__(self, type_name: str, available_types: list[str]):
        self.type_name = type_name
        self.available_types = available_types
        message = (
            f"Resource type '{type_name}' not found. "
            f"Available: {available_types}"
        )
        super().__init__(message)
