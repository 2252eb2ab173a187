import json
import pytest
from rum_provider.core.config_loader import load_provider_config, load_credentials
from rum_provider.core.exceptions import ConfigurationError


def test_load_provider_config_success(project_dir):
    """Test loading a valid project configuration."""
    config = load_provider_config(project_dir)

    assert config.mode == "DEBUG"
    assert config.debug is True
    assert config.max_retries == 5
    assert config.retry_mode == "standard"
    assert config.get_credentials("aws")["aws_region"] == "eu-west-1"


def test_load_provider_config_defaults(tmp_path):
    (tmp_path / "config.json").write_text(json.dumps({"mode": "production"}))

    config = load_provider_config(tmp_path)

    assert config.mode == "PRODUCTION"
    assert config.debug is False
    assert config.max_retries == 3
    assert config.credentials == {}
    assert config.get_credentials("aws") == {}


def test_missing_config_file_raises(tmp_path):
    """Test that missing config.json raises ConfigurationError."""
    with pytest.raises(ConfigurationError) as exc:
        load_provider_config(tmp_path)

    assert "Required configuration file not found" in str(exc.value)
    assert exc.value.config_file.endswith("config.json")


def test_invalid_json_raises(tmp_path):
    (tmp_path / "config.json").write_text("{not json")

    with pytest.raises(ConfigurationError) as exc:
        load_provider_config(tmp_path)

    assert "Invalid JSON" in str(exc.value)


def test_non_object_json_raises(tmp_path):
    (tmp_path / "config.json").write_text(json.dumps(["DEBUG"]))

    with pytest.raises(ConfigurationError):
        load_provider_config(tmp_path)


def test_missing_mode_raises(tmp_path):
    (tmp_path / "config.json").write_text(json.dumps({"max_retries": 2}))

    with pytest.raises(ConfigurationError) as exc:
        load_provider_config(tmp_path)

    assert "Missing required field 'mode'" in str(exc.value)


def test_invalid_mode_raises(tmp_path):
    (tmp_path / "config.json").write_text(json.dumps({"mode": "VERBOSE"}))

    with pytest.raises(ConfigurationError) as exc:
        load_provider_config(tmp_path)

    assert "Invalid mode" in str(exc.value)


@pytest.mark.parametrize("max_retries", [-1, "3", True])
def test_invalid_max_retries_raises(tmp_path, max_retries):
    (tmp_path / "config.json").write_text(json.dumps({"mode": "DEBUG", "max_retries": max_retries}))

    with pytest.raises(ConfigurationError):
        load_provider_config(tmp_path)


def test_invalid_retry_mode_raises(tmp_path):
    (tmp_path / "config.json").write_text(json.dumps({"mode": "DEBUG", "retry_mode": "eager"}))

    with pytest.raises(ConfigurationError) as exc:
        load_provider_config(tmp_path)

    assert "Invalid retry_mode" in str(exc.value)


def test_load_credentials_without_file(tmp_path):
    assert load_credentials(tmp_path) == {}


def test_load_credentials_missing_key_raises(tmp_path):
    (tmp_path / "config_credentials_aws.json").write_text(json.dumps({"aws_access_key_id": "x"}))

    with pytest.raises(ConfigurationError) as exc:
        load_credentials(tmp_path)

    assert "aws_secret_access_key" in str(exc.value)
