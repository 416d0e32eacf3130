"""Exceptions raised by aws_manager.

Errors coming from boto3/botocore are not wrapped and propagate as-is.
"""


class AwsManagerError(Exception):
    """Base class for aws_manager errors."""


class ConfigurationError(AwsManagerError):
    """Credentials or default bucket could not be resolved."""


class InvalidRequestError(AwsManagerError, ValueError):
    """An upload or download request cannot be sent as given."""

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(message)
