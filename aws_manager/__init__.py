"""Upload and download objects in AWS S3 with configuration from the environment."""

from .exceptions import AwsManagerError, ConfigurationError, InvalidRequestError
from .config.settings import Options, resolve_options
from .s3 import (
    AwsManager,
    AwsManagerInterface,
    DownloadInput,
    UploadInput,
    UploadResult,
    new,
)

__all__ = [
    "AwsManager",
    "AwsManagerInterface",
    "AwsManagerError",
    "ConfigurationError",
    "DownloadInput",
    "InvalidRequestError",
    "Options",
    "UploadInput",
    "UploadResult",
    "new",
    "resolve_options",
]
