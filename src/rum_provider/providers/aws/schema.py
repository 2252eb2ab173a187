"""
Attribute schemas for AWS resources.

Desired configurations are validated with pydantic models before the
engine invokes an adapter. Each model mirrors one resource's attribute
names so raw state attributes can be validated directly.
"""

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ... import constants as CONSTANTS

ARN_PARTITION_PATTERN = re.compile(r"^aws(-[a-z]+)*$")
ARN_REGION_PATTERN = re.compile(r"^[a-z]{2}(-[a-z]+)+-\d$")
ARN_ACCOUNT_ID_PATTERN = re.compile(r"^(aws|aws-managed|third-party|aws-marketplace|\d{12}|cw.{10})$")


def validate_arn(value: str) -> str:
    """
    Validate an Amazon Resource Name.

    Format: arn:partition:service:region:account-id:resource
    Region and account id may be empty (e.g., IAM and S3 ARNs).

    Raises:
        ValueError: If the value is not a syntactically valid ARN
    """
    parts = value.split(":", 5)
    if len(parts) != 6 or parts[0] != "arn":
        raise ValueError(f"({value}) is an invalid ARN: arn: invalid prefix or section count")

    _, partition, service, region, account_id, resource = parts

    if not ARN_PARTITION_PATTERN.match(partition):
        raise ValueError(f"({value}) is an invalid ARN: invalid partition value (expecting to match regular expression: {ARN_PARTITION_PATTERN.pattern})")
    if not service:
        raise ValueError(f"({value}) is an invalid ARN: missing service")
    if region and not ARN_REGION_PATTERN.match(region):
        raise ValueError(f"({value}) is an invalid ARN: invalid region value (expecting to match regular expression: {ARN_REGION_PATTERN.pattern})")
    if account_id and not ARN_ACCOUNT_ID_PATTERN.match(account_id):
        raise ValueError(f"({value}) is an invalid ARN: invalid account ID value (expecting to match regular expression: {ARN_ACCOUNT_ID_PATTERN.pattern})")
    if not resource:
        raise ValueError(f"({value}) is an invalid ARN: missing resource value")

    return value


class MetricsDestinationConfig(BaseModel):
    """Desired configuration of a CloudWatch RUM metrics destination."""

    app_monitor_name: str = Field(..., min_length=1, description="Name of the app monitor the destination belongs to. Used as the resource id.")
    destination: str = Field(..., description=f"Destination kind, one of {CONSTANTS.RUM_METRIC_DESTINATION_VALUES}.")
    destination_arn: Optional[str] = Field(None, description="ARN of the destination (required for Evidently).")
    iam_role_arn: Optional[str] = Field(None, description="ARN of the IAM role used to send metrics to the destination.")

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "app_monitor_name": "my-app-monitor",
                "destination": "Evidently",
                "destination_arn": "arn:aws:evidently:eu-central-1:123456789012:project/my-project",
                "iam_role_arn": "arn:aws:iam::123456789012:role/rum-evidently"
            }
        }
    )

    @field_validator("destination")
    @classmethod
    def _destination_in_enum(cls, value: str) -> str:
        if value not in CONSTANTS.RUM_METRIC_DESTINATION_VALUES:
            raise ValueError(f"expected destination to be one of {CONSTANTS.RUM_METRIC_DESTINATION_VALUES}, got {value}")
        return value

    @field_validator("destination_arn", "iam_role_arn")
    @classmethod
    def _valid_arn(cls, value: Optional[str]) -> Optional[str]:
        if value in (None, ""):
            return None
        return validate_arn(value)
