# ==========================================
# 1. Configuration Filenames
# ==========================================
CONFIG_FILE = "config.json"
CONFIG_CREDENTIALS_AWS_FILE = "config_credentials_aws.json"

# Keys required in specific config files
CONFIG_SCHEMAS = {
    CONFIG_FILE: ["mode"],
    CONFIG_CREDENTIALS_AWS_FILE: ["aws_access_key_id", "aws_secret_access_key"],
}

VALID_MODES = ["DEBUG", "PRODUCTION"]

# ==========================================
# 2. AWS Defaults
# ==========================================
DEFAULT_AWS_REGION = "eu-central-1"
DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_MODE = "standard"
VALID_RETRY_MODES = ["legacy", "standard", "adaptive"]

# ==========================================
# 3. CloudWatch RUM
# ==========================================
RUM_METRICS_DESTINATION_TYPE = "aws_rum_metrics_destination"
RUM_METRICS_DESTINATION_DISPLAY_NAME = "CloudWatch RUM Metrics Destination"

# Values of the RUM "MetricDestination" enum
RUM_METRIC_DESTINATION_VALUES = ["CloudWatch", "Evidently"]

ERR_CODE_RESOURCE_NOT_FOUND = "ResourceNotFoundException"

# Attribute names of the metrics destination resource
ATTR_APP_MONITOR_NAME = "app_monitor_name"
ATTR_DESTINATION = "destination"
ATTR_DESTINATION_ARN = "destination_arn"
ATTR_IAM_ROLE_ARN = "iam_role_arn"

