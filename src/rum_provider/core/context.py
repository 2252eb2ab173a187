"""
Operation context and resource state classes.

Instead of reading global state, every adapter function receives the
state record it works on (ResourceData) and an OperationContext that
carries the caller's cancellation signal.

Design Pattern: Dependency Injection
    - The engine owns ResourceData and hands it to each lifecycle call
    - OperationContext is created per call and passed explicitly
    - SDK clients live on the provider object, never in module globals
"""

import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .exceptions import OperationCancelledError
from .. import constants as CONSTANTS


@dataclass
class ProviderConfig:
    """
    Parsed provider configuration from the project's JSON files.

    Attributes:
        mode: Run mode ("DEBUG" enables debug logging)
        max_retries: Retries botocore makes after the first attempt
        retry_mode: botocore retry mode ("standard", "adaptive", "legacy")
        credentials: Raw credentials by provider name
            e.g., {"aws": {"aws_access_key_id": "...", "aws_region": "..."}}
    """

    mode: str
    max_retries: int = CONSTANTS.DEFAULT_MAX_RETRIES
    retry_mode: str = CONSTANTS.DEFAULT_RETRY_MODE
    credentials: Dict[str, dict] = field(default_factory=dict)

    @property
    def debug(self) -> bool:
        return self.mode.upper() == "DEBUG"

    def get_credentials(self, provider_name: str) -> dict:
        """
        Return credentials for a provider, or an empty dict.

        An empty dict lets boto3 fall back to its default credential chain.
        """
        return self.credentials.get(provider_name, {})


@dataclass
class ResourceData:
    """
    Schema-typed state record for one managed resource.

    The reconciliation engine creates this record, fills in the desired
    attributes and passes it to the lifecycle functions, which update
    `id` and the observed attributes in place.

    Attributes:
        id: Resource identifier; empty string means "not assigned"
        attributes: Attribute values keyed by schema attribute name
        is_new_resource: True while the engine is creating the resource

    Example Usage:
        resource = ResourceData(
            attributes={"app_monitor_name": "app1", "destination": "CloudWatch"},
            is_new_resource=True,
        )
        put_metrics_destination(resource, provider, OperationContext())
        resource.id  # "app1"
    """

    id: str = ""
    attributes: Dict[str, Any] = field(default_factory=dict)
    is_new_resource: bool = False

    def get(self, key: str) -> Any:
        """Return the attribute value, or None when it was never set."""
        return self.attributes.get(key)

    def get_ok(self, key: str) -> Tuple[Any, bool]:
        """
        Return the attribute value and whether it is set.

        An attribute counts as set only when it holds a non-empty value,
        so optional request fields can be omitted rather than sent empty.

        Returns:
            Tuple of (value, is_set)

        Example:
            >>> ResourceData(attributes={"destination_arn": ""}).get_ok("destination_arn")
            ("", False)
        """
        value = self.attributes.get(key)
        return value, value not in (None, "")

    def set(self, key: str, value: Any) -> None:
        """Store an observed attribute value."""
        self.attributes[key] = value


@dataclass
class OperationContext:
    """
    Per-call execution context supplied by the engine.

    Cancellation is cooperative: adapters call check_cancelled() before
    each remote call and before each result page.

    Attributes:
        cancel_event: Event the caller sets to abort the operation
        request_id: Optional correlation id used in log lines
    """

    cancel_event: threading.Event = field(default_factory=threading.Event)
    request_id: Optional[str] = None

    def cancel(self) -> None:
        """Signal cancellation to the running operation."""
        self.cancel_event.set()

    @property
    def cancelled(self) -> bool:
        return self.cancel_event.is_set()

    def check_cancelled(self, operation: str, resource_id: Optional[str] = None) -> None:
        """
        Raise if the caller has cancelled the operation.

        Raises:
            OperationCancelledError: If the cancellation signal is set
        """
        if self.cancel_event.is_set():
            raise OperationCancelledError(operation, resource_id=resource_id)
