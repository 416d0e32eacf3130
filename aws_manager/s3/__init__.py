"""S3 storage module: upload/download facade over boto3."""

from .client import AwsManager, AwsManagerInterface, new
from .schemas import DownloadInput, UploadInput, UploadResult

__all__ = [
    "AwsManager",
    "AwsManagerInterface",
    "new",
    "DownloadInput",
    "UploadInput",
    "UploadResult",
]
