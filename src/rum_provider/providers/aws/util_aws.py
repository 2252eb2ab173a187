"""
AWS Utility Functions.

This module provides utility functions for AWS operations including:
- Error code inspection for botocore ClientError
- Console link generation for resources
"""

from typing import Optional

from botocore.exceptions import ClientError

from ... import constants as CONSTANTS


# ==========================================
# Error Helpers
# ==========================================

def error_code(err: Optional[BaseException]) -> Optional[str]:
    """Return the AWS error code of a ClientError, or None."""
    if isinstance(err, ClientError):
        return err.response.get("Error", {}).get("Code")
    return None


def error_code_equals(err: Optional[BaseException], *codes: str) -> bool:
    """
    Check whether an exception is a ClientError with one of the given codes.

    Example:
        >>> error_code_equals(e, "ResourceNotFoundException")
        True
    """
    code = error_code(err)
    return code is not None and code in codes


# ==========================================
# Console Link Functions
# ==========================================

def link_to_rum_app_monitor(app_monitor_name: str, region: Optional[str] = None) -> str:
    """Generate AWS Console link to a CloudWatch RUM app monitor."""
    region = region or CONSTANTS.DEFAULT_AWS_REGION
    return f"https://{region}.console.aws.amazon.com/cloudwatch/home?region={region}#rum:dashboard/{app_monitor_name}"
