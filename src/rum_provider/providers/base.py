"""
Shared base classes for provider implementations.

Contents:
    - BaseProvider: client storage and consistent lifecycle log lines
"""

from typing import Optional
from ..logger import logger


class BaseProvider:
    """
    Base class for cloud provider implementations.

    Common Functionality:
        - SDK client storage with an initialization guard
        - Consistent log format for resource lifecycle events
    """

    name: str = ""

    def __init__(self):
        """Initialize base provider state."""
        self._clients: dict = {}
        self._initialized: bool = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def clients(self) -> dict:
        """Return initialized SDK clients."""
        if not self._initialized:
            raise RuntimeError(
                "Provider not initialized. Call initialize_clients() first."
            )
        return self._clients

    def log_resource_put(self, resource_type: str, resource_id: str, request_id: Optional[str] = None) -> None:
        """
        Log a successful create-or-update.

        Args:
            resource_type: Display name of the resource type
            resource_id: Identifier of the resource
            request_id: Optional correlation id from the operation context
        """
        logger.info(f"{_prefix(request_id)}✓ Put {resource_type}: {resource_id}")

    def log_resource_deletion(self, resource_type: str, resource_id: str, request_id: Optional[str] = None) -> None:
        logger.info(f"{_prefix(request_id)}✓ Deleted {resource_type}: {resource_id}")

    def log_resource_not_found(self, resource_type: str, resource_id: str, request_id: Optional[str] = None) -> None:
        """
        Log that a resource was not found (during deletion).
        """
        logger.info(f"{_prefix(request_id)}{resource_type} not found (already deleted?): {resource_id}")

    def log_resource_removed_from_state(self, resource_type: str, resource_id: str, request_id: Optional[str] = None) -> None:
        logger.warning(f"{_prefix(request_id)}{resource_type} {resource_id} not found, removing from state")


def _prefix(request_id: Optional[str]) -> str:
    return f"[{request_id}] " if request_id else ""
