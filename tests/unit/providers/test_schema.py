"""
Unit tests for metrics destination schema validation.
"""

import pytest

from rum_provider.core.exceptions import ValidationError
from rum_provider.providers.aws.schema import MetricsDestinationConfig, validate_arn
from rum_provider.providers.aws.resources.metrics_destination import validate_metrics_destination


class TestValidateArn:

    @pytest.mark.parametrize("arn", [
        "arn:aws:iam::123456789012:role/rum-role",
        "arn:aws:evidently:eu-central-1:123456789012:project/shop",
        "arn:aws-us-gov:logs:us-gov-west-1:123456789012:log-group:/x",
        "arn:aws:s3:::bucket/key:with:colons",
    ])
    def test_valid(self, arn):
        assert validate_arn(arn) == arn

    @pytest.mark.parametrize("arn,reason", [
        ("not-an-arn", "invalid prefix"),
        ("arn:aws:iam::123456789012", "invalid prefix"),
        ("arn:azure:iam::123456789012:role/r", "invalid partition"),
        ("arn:aws::eu-central-1:123456789012:thing", "missing service"),
        ("arn:aws:iam:EU:123456789012:role/r", "invalid region"),
        ("arn:aws:iam::1234:role/r", "invalid account ID"),
        ("arn:aws:iam::123456789012:", "missing resource"),
    ])
    def test_invalid(self, arn, reason):
        with pytest.raises(ValueError, match=reason):
            validate_arn(arn)


class TestMetricsDestinationConfig:

    def test_minimal_config(self):
        config = MetricsDestinationConfig(app_monitor_name="app1", destination="CloudWatch")
        assert config.destination_arn is None
        assert config.iam_role_arn is None

    def test_empty_arn_is_absent(self):
        config = MetricsDestinationConfig(app_monitor_name="app1", destination="CloudWatch", iam_role_arn="")
        assert config.iam_role_arn is None


class TestValidateMetricsDestination:

    def test_valid_attributes(self):
        config = validate_metrics_destination({
            "app_monitor_name": "app1",
            "destination": "Evidently",
            "destination_arn": "arn:aws:evidently:eu-central-1:123456789012:project/shop",
            "iam_role_arn": "arn:aws:iam::123456789012:role/rum-role",
        })
        assert config.destination == "Evidently"

    def test_unknown_destination(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_metrics_destination({"app_monitor_name": "app1", "destination": "Datadog"})

        assert exc_info.value.resource_id == "app1"
        assert len(exc_info.value.errors) == 1
        assert exc_info.value.errors[0].startswith("destination:")

    def test_every_failing_field_is_reported(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_metrics_destination({
                "destination": "Datadog",
                "destination_arn": "bad",
                "iam_role_arn": "also-bad",
            })

        fields = sorted(e.split(":")[0] for e in exc_info.value.errors)
        assert fields == ["app_monitor_name", "destination", "destination_arn", "iam_role_arn"]

    def test_unknown_attribute_rejected(self):
        with pytest.raises(ValidationError):
            validate_metrics_destination({"app_monitor_name": "app1", "destination": "CloudWatch", "tags": {}})

    def test_handler_validate_delegates(self):
        from rum_provider.providers.aws.resources import MetricsDestinationHandler

        config = MetricsDestinationHandler().validate({"app_monitor_name": "app1", "destination": "CloudWatch"})
        assert config.app_monitor_name == "app1"
