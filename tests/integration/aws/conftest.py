import pytest
from unittest.mock import MagicMock

from botocore.exceptions import ClientError


def client_error(code: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": f"{code} raised"}}, operation)


class FakeRumService:
    """
    In-memory stand-in for the CloudWatch RUM metrics destination API.

    moto has no CloudWatch RUM backend, so the client is a MagicMock whose
    calls are routed here. Records are keyed by (app monitor, destination,
    destination ARN) like the real service.
    """

    def __init__(self, app_monitors=("app1",), page_size=1):
        self.app_monitors = set(app_monitors)
        self.page_size = page_size
        self.records = {}

    def put_rum_metrics_destination(self, AppMonitorName, Destination, DestinationArn=None, IamRoleArn=None):
        if AppMonitorName not in self.app_monitors:
            raise client_error("ResourceNotFoundException", "PutRumMetricsDestination")
        record = {"Destination": Destination}
        if DestinationArn is not None:
            record["DestinationArn"] = DestinationArn
        if IamRoleArn is not None:
            record["IamRoleArn"] = IamRoleArn
        self.records[(AppMonitorName, Destination, DestinationArn)] = record
        return {}

    def delete_rum_metrics_destination(self, AppMonitorName, Destination, DestinationArn=None):
        key = (AppMonitorName, Destination, DestinationArn)
        if AppMonitorName not in self.app_monitors or key not in self.records:
            raise client_error("ResourceNotFoundException", "DeleteRumMetricsDestination")
        del self.records[key]
        return {}

    def paginate(self, AppMonitorName):
        if AppMonitorName not in self.app_monitors:
            raise client_error("ResourceNotFoundException", "ListRumMetricsDestinations")
        matches = [r for (name, _, _), r in self.records.items() if name == AppMonitorName]
        if not matches:
            yield {"Destinations": []}
            return
        for start in range(0, len(matches), self.page_size):
            yield {"Destinations": matches[start:start + self.page_size]}


@pytest.fixture(scope="function")
def rum_service():
    return FakeRumService()


@pytest.fixture(scope="function")
def mock_provider(rum_service):
    """
    Create an AWSProvider whose "rum" client is backed by FakeRumService.
    """
    from rum_provider.providers.aws.provider import AWSProvider

    rum_client = MagicMock()
    rum_client.put_rum_metrics_destination.side_effect = rum_service.put_rum_metrics_destination
    rum_client.delete_rum_metrics_destination.side_effect = rum_service.delete_rum_metrics_destination
    rum_client.get_paginator.return_value.paginate.side_effect = rum_service.paginate

    provider = AWSProvider()
    provider._region = "eu-central-1"
    provider._clients = {"rum": rum_client}
    provider._initialized = True  # Mark as initialized to bypass property check
    yield provider


@pytest.fixture(scope="function")
def paged_provider():
    """
    Create an AWSProvider whose list paginator returns pages set by the test.

    Usage:
        paged_provider.clients["rum"].get_paginator.return_value.paginate.return_value = [...]
    """
    from rum_provider.providers.aws.provider import AWSProvider

    provider = AWSProvider()
    provider._region = "eu-central-1"
    provider._clients = {"rum": MagicMock()}
    provider._initialized = True
    yield provider
