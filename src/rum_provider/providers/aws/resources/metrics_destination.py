"""
CloudWatch RUM Metrics Destination resource for AWS.

This module reconciles a desired metrics destination of a RUM app
monitor against the CloudWatch RUM service.

Lifecycle:
    create/update -> put_metrics_destination (full overwrite, then read)
    read          -> read_metrics_destination (via the name lookup)
    delete        -> delete_metrics_destination (not-found is success)
    import        -> import_metrics_destination (id is the monitor name)

Lookup Policy:
    All pages of ListRumMetricsDestinations are drained first. Zero
    records (or a ResourceNotFoundException) is a NotFoundError, exactly
    one record is returned, and more than one is an AmbiguousResultError.

Note:
    Delete maps only the service's ResourceNotFoundException to success.
    It never lists destinations first.
"""

from typing import TYPE_CHECKING, Any, Dict, Iterable, Iterator, List, Optional

import pydantic
from botocore.exceptions import BotoCoreError, ClientError

from ..schema import MetricsDestinationConfig
from ..util_aws import error_code_equals, link_to_rum_app_monitor
from .... import constants as CONSTANTS
from ....core.context import OperationContext, ResourceData
from ....core.exceptions import (
    AmbiguousResultError,
    EmptyResultError,
    NotFoundError,
    RemoteCallError,
    ValidationError,
)
from ....logger import logger

if TYPE_CHECKING:
    from ..provider import AWSProvider


RESOURCE_TYPE = CONSTANTS.RUM_METRICS_DESTINATION_TYPE
DISPLAY_NAME = CONSTANTS.RUM_METRICS_DESTINATION_DISPLAY_NAME


# ==========================================
# Helper Functions
# ==========================================

def _rum_client(provider: 'AWSProvider'):
    if provider is None:
        raise ValueError("provider is required")
    return provider.clients["rum"]


def _drain_pages(pages: Iterable[Optional[dict]], context: OperationContext, name: str) -> Iterator[Optional[dict]]:
    """
    Yield result pages, checking for cancellation before each fetch.

    botocore fetches a page lazily when the iterator is advanced, so the
    check runs before every remote call.
    """
    iterator = iter(pages)
    while True:
        context.check_cancelled("listing", name)
        try:
            page = next(iterator)
        except StopIteration:
            return
        yield page


# ==========================================
# Lookup
# ==========================================

def find_metrics_destination_by_name(
    name: str,
    provider: 'AWSProvider',
    context: Optional[OperationContext] = None
) -> Dict[str, Any]:
    """
    Find the single metrics destination of an app monitor.

    Args:
        name: App monitor name
        provider: Initialized AWSProvider
        context: Per-call context carrying the cancellation signal

    Returns:
        The MetricDestinationSummary dict (Destination, DestinationArn, IamRoleArn)

    Raises:
        NotFoundError: The monitor is unknown or has no destination
        AmbiguousResultError: More than one destination was returned
        RemoteCallError: Any other remote failure
        OperationCancelledError: The caller cancelled the lookup
    """
    context = context or OperationContext()
    client = _rum_client(provider)

    request = {"AppMonitorName": name}
    output: List[Dict[str, Any]] = []

    try:
        paginator = client.get_paginator("list_rum_metrics_destinations")
        for page in _drain_pages(paginator.paginate(**request), context, name):
            if not page:
                continue
            for destination in page.get("Destinations") or []:
                if destination is not None:
                    output.append(destination)
    except (ClientError, BotoCoreError) as e:
        if error_code_equals(e, CONSTANTS.ERR_CODE_RESOURCE_NOT_FOUND):
            raise NotFoundError(last_error=e, last_request=request, resource_id=name) from e
        raise RemoteCallError("listing", name, e, resource_type=DISPLAY_NAME) from e

    if len(output) == 0:
        raise EmptyResultError(last_request=request, resource_id=name)

    if len(output) > 1:
        raise AmbiguousResultError(len(output), last_request=request, resource_id=name)

    return output[0]


# ==========================================
# Lifecycle Operations
# ==========================================

def put_metrics_destination(
    resource: ResourceData,
    provider: 'AWSProvider',
    context: Optional[OperationContext] = None
) -> Optional[Dict[str, Any]]:
    """
    Create or fully overwrite the metrics destination, then read it back.

    Optional ARNs are only sent when set; every put replaces the whole
    remote record. The resource id is assigned only after a successful
    call.

    Args:
        resource: State record with the desired attributes
        provider: Initialized AWSProvider
        context: Per-call context carrying the cancellation signal

    Returns:
        The remote record as observed by the follow-up read

    Raises:
        RemoteCallError: If the put call fails
        OperationCancelledError: If cancelled before the call
    """
    context = context or OperationContext()
    client = _rum_client(provider)

    name = resource.get(CONSTANTS.ATTR_APP_MONITOR_NAME)
    request = {
        "AppMonitorName": name,
        "Destination": resource.get(CONSTANTS.ATTR_DESTINATION),
    }

    destination_arn, ok = resource.get_ok(CONSTANTS.ATTR_DESTINATION_ARN)
    if ok:
        request["DestinationArn"] = destination_arn

    iam_role_arn, ok = resource.get_ok(CONSTANTS.ATTR_IAM_ROLE_ARN)
    if ok:
        request["IamRoleArn"] = iam_role_arn

    context.check_cancelled("putting", name)
    logger.debug(f"Putting {DISPLAY_NAME}: {request}")

    try:
        client.put_rum_metrics_destination(**request)
    except (ClientError, BotoCoreError) as e:
        raise RemoteCallError("putting", name, e, resource_type=DISPLAY_NAME) from e

    if resource.is_new_resource or not resource.id:
        resource.id = name

    provider.log_resource_put(DISPLAY_NAME, name, context.request_id)
    logger.debug(f"  Console: {link_to_rum_app_monitor(name, provider.region)}")

    return read_metrics_destination(resource, provider, context)


def read_metrics_destination(
    resource: ResourceData,
    provider: 'AWSProvider',
    context: Optional[OperationContext] = None
) -> Optional[Dict[str, Any]]:
    """
    Refresh the resource's observed attributes from CloudWatch RUM.

    Returns:
        The remote record, or None when a previously created destination
        is gone. In that case the resource id is cleared so the engine
        drops it from state.

    Raises:
        NotFoundError: If a resource being created cannot be read back
        AmbiguousResultError: If the monitor has more than one destination
        RemoteCallError: Any other remote failure, labelled as "reading"
    """
    context = context or OperationContext()

    try:
        destination = find_metrics_destination_by_name(resource.id, provider, context)
    except NotFoundError:
        if resource.is_new_resource:
            raise
        provider.log_resource_removed_from_state(DISPLAY_NAME, resource.id, context.request_id)
        resource.id = ""
        return None
    except RemoteCallError as e:
        raise RemoteCallError("reading", resource.id, e.cause, resource_type=DISPLAY_NAME) from e

    # The list call does not echo the monitor name
    resource.set(CONSTANTS.ATTR_APP_MONITOR_NAME, resource.id)
    resource.set(CONSTANTS.ATTR_DESTINATION, destination.get("Destination"))
    resource.set(CONSTANTS.ATTR_DESTINATION_ARN, destination.get("DestinationArn"))
    resource.set(CONSTANTS.ATTR_IAM_ROLE_ARN, destination.get("IamRoleArn"))

    return destination


def delete_metrics_destination(
    resource: ResourceData,
    provider: 'AWSProvider',
    context: Optional[OperationContext] = None
) -> None:
    """
    Delete the metrics destination.

    A ResourceNotFoundException from the service counts as success.

    Raises:
        RemoteCallError: Any other remote failure
        OperationCancelledError: If cancelled before the call
    """
    context = context or OperationContext()
    client = _rum_client(provider)

    request = {
        "AppMonitorName": resource.id,
        "Destination": resource.get(CONSTANTS.ATTR_DESTINATION),
    }

    destination_arn, ok = resource.get_ok(CONSTANTS.ATTR_DESTINATION_ARN)
    if ok:
        request["DestinationArn"] = destination_arn

    context.check_cancelled("deleting", resource.id)
    logger.debug(f"Deleting {DISPLAY_NAME}: {resource.id}")

    try:
        client.delete_rum_metrics_destination(**request)
    except ClientError as e:
        if error_code_equals(e, CONSTANTS.ERR_CODE_RESOURCE_NOT_FOUND):
            provider.log_resource_not_found(DISPLAY_NAME, resource.id, context.request_id)
            return
        raise RemoteCallError("deleting", resource.id, e, resource_type=DISPLAY_NAME) from e
    except BotoCoreError as e:
        raise RemoteCallError("deleting", resource.id, e, resource_type=DISPLAY_NAME) from e

    provider.log_resource_deletion(DISPLAY_NAME, resource.id, context.request_id)


def import_metrics_destination(
    resource_id: str,
    provider: 'AWSProvider',
    context: Optional[OperationContext] = None
) -> ResourceData:
    """
    Import an existing metrics destination by app monitor name.

    Raises:
        NotFoundError: If the app monitor has no metrics destination
    """
    resource = ResourceData(id=resource_id)
    if read_metrics_destination(resource, provider, context) is None:
        raise NotFoundError(
            f"Cannot import non-existent remote object {DISPLAY_NAME}",
            resource_id=resource_id
        )
    return resource


def validate_metrics_destination(attributes: Dict[str, Any]) -> MetricsDestinationConfig:
    """
    Validate desired attributes against the resource schema.

    Raises:
        ValidationError: Listing every failing field
    """
    try:
        return MetricsDestinationConfig(**attributes)
    except pydantic.ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise ValidationError(errors, resource_id=attributes.get(CONSTANTS.ATTR_APP_MONITOR_NAME)) from e


# ==========================================
# Registry Handler
# ==========================================

class MetricsDestinationHandler:
    """ResourceHandler for aws_rum_metrics_destination."""

    type_name: str = RESOURCE_TYPE

    def create(self, resource, provider, context):
        return put_metrics_destination(resource, provider, context)

    def read(self, resource, provider, context):
        return read_metrics_destination(resource, provider, context)

    def update(self, resource, provider, context):
        return put_metrics_destination(resource, provider, context)

    def delete(self, resource, provider, context):
        delete_metrics_destination(resource, provider, context)

    def import_state(self, resource_id, provider, context):
        return import_metrics_destination(resource_id, provider, context)

    def validate(self, attributes):
        return validate_metrics_destination(attributes)
