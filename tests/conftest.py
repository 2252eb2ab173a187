import os
import pytest


@pytest.fixture(scope="function", autouse=True)
def mock_env_vars():
    """Set mock environment variables to prevent accidental cloud calls."""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "eu-central-1"


@pytest.fixture(scope="function")
def project_dir(tmp_path):
    """
    Create a temporary project directory with valid config files.
    """
    import json

    project = tmp_path / "rum_project"
    project.mkdir()
    (project / "config.json").write_text(json.dumps({"mode": "DEBUG", "max_retries": 5}))
    (project / "config_credentials_aws.json").write_text(json.dumps({
        "aws_access_key_id": "testing",
        "aws_secret_access_key": "testing",
        "aws_region": "eu-west-1",
    }))
    return project
