"""Shared fixtures for aws_manager tests."""

from unittest.mock import MagicMock, patch

import pytest

AWS_ENV_VARS = (
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_REGION",
    "AWS_BUCKET",
    "AWS_TOKEN",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run each test without AWS_* variables and away from any real .env file."""
    for name in AWS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def aws_env(monkeypatch):
    """Set the AWS_* variables the configuration resolver reads."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "env-access-key")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "env-secret-key")
    monkeypatch.setenv("AWS_BUCKET", "env-bucket")


@pytest.fixture
def mock_session():
    """Patch boto3.session.Session and return the mocked class."""
    with patch("aws_manager.s3.client.boto3.session.Session") as session_cls:
        session_cls.return_value.client.return_value = MagicMock()
        yield session_cls


@pytest.fixture
def mock_s3(mock_session):
    """The mocked S3 client created by the patched session."""
    return mock_session.return_value.client.return_value
