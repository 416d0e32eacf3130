"""AWS S3 manager: uploads and downloads through boto3 managed transfers."""

import io
from contextlib import contextmanager
from pathlib import Path
from typing import Any, BinaryIO, Iterator, Optional, Protocol, Union

import boto3
from boto3.exceptions import S3UploadFailedError
from boto3.s3.transfer import S3Transfer, TransferConfig
from botocore.exceptions import BotoCoreError, ClientError

from aws_manager.config.logger import get_logger
from aws_manager.config.settings import Options, resolve_options
from aws_manager.exceptions import InvalidRequestError
from aws_manager.s3.mapping import (
    split_transfer_args,
    to_get_object_params,
    to_upload_params,
)
from aws_manager.s3.schemas import DownloadInput, UploadInput, UploadResult

logger = get_logger(__name__)

DOWNLOAD_CHUNK_SIZE = 1024 * 1024

SDK_ERRORS = (ClientError, BotoCoreError, S3UploadFailedError)


class AwsManagerInterface(Protocol):
    def upload(
        self, upload_in: UploadInput, config: Optional[TransferConfig] = None
    ) -> UploadResult: ...

    def download(
        self,
        path: Union[str, Path],
        download_in: DownloadInput,
        config: Optional[TransferConfig] = None,
    ) -> int: ...


class AwsManager:
    """
    Thin facade over the boto3 S3 client.

    Request options are translated field by field (see field_mappings.yaml);
    multipart transfer, retries and concurrency are left to boto3.
    """

    def __init__(self, options: Options, client: Optional[Any] = None):
        self.cfg = options
        if client is None:
            session = boto3.session.Session(
                aws_access_key_id=options.access_key_id,
                aws_secret_access_key=options.secret_access_key,
                aws_session_token=options.token or None,
                region_name=options.region,
            )
            client = session.client("s3")
        self.client = client
        logger.info(
            "S3 manager initialized for bucket: %s (region %s)",
            options.bucket,
            options.region,
        )

    @property
    def bucket(self) -> str:
        return self.cfg.bucket

    def upload(
        self, upload_in: UploadInput, config: Optional[TransferConfig] = None
    ) -> UploadResult:
        """
        Upload an object.

        The body is taken from upload_in.body, or read from upload_in.path when
        no body is given. The default bucket is used when upload_in.bucket is
        empty. upload_in itself is left untouched.

        Args:
            upload_in: Upload options
            config: Optional boto3 TransferConfig (part size, concurrency)

        Returns:
            UploadResult with the bucket, key and s3:// location

        Raises:
            InvalidRequestError: no body/path, no key, or an option the
                managed uploader does not accept
        """
        request = upload_in.model_copy(
            update={"bucket": upload_in.bucket or self.cfg.bucket}
        )
        params = to_upload_params(request)
        bucket, key, extra_args, rejected = split_transfer_args(
            params, S3Transfer.ALLOWED_UPLOAD_ARGS
        )

        if not key:
            raise InvalidRequestError("file_name (object key) is required", field="file_name")
        if rejected:
            raise InvalidRequestError(
                f"Not supported by managed upload: {', '.join(rejected)}",
                field=rejected[0],
            )

        with _open_body(request) as body:
            logger.info("Uploading S3 object: s3://%s/%s", bucket, key)
            try:
                self.client.upload_fileobj(
                    body, bucket, key, ExtraArgs=extra_args, Config=config
                )
            except SDK_ERRORS as e:
                logger.error("Error uploading s3://%s/%s: %s", bucket, key, e)
                raise

        logger.info("Successfully uploaded s3://%s/%s", bucket, key)
        return UploadResult(bucket=bucket, key=key, location=f"s3://{bucket}/{key}")

    def download(
        self,
        path: Union[str, Path],
        download_in: DownloadInput,
        config: Optional[TransferConfig] = None,
    ) -> int:
        """
        Download an object into a local file.

        The file is created (or truncated) and its parent directories are
        created as needed. Options the managed downloader cannot pass along
        (conditional headers, Range, PartNumber, response overrides) switch
        to a single get_object call streamed into the file.

        Returns:
            Number of bytes written
        """
        request = download_in.model_copy(
            update={"bucket": download_in.bucket or self.cfg.bucket}
        )
        params = to_get_object_params(request)
        bucket, key, extra_args, rejected = split_transfer_args(
            params, S3Transfer.ALLOWED_DOWNLOAD_ARGS
        )

        if not key:
            raise InvalidRequestError("file_name (object key) is required", field="file_name")

        dest = Path(path)
        dest.parent.mkdir(parents=True, exist_ok=True)

        logger.info("Downloading S3 object: s3://%s/%s to %s", bucket, key, dest)
        with open(dest, "wb") as f:
            try:
                if rejected:
                    logger.debug("Using single GET for options: %s", rejected)
                    self._get_object_into(f, params)
                else:
                    self.client.download_fileobj(
                        bucket, key, f, ExtraArgs=extra_args, Config=config
                    )
            except SDK_ERRORS as e:
                logger.error("Error downloading s3://%s/%s: %s", bucket, key, e)
                raise

        written = dest.stat().st_size
        logger.info("Downloaded s3://%s/%s, size: %d bytes", bucket, key, written)
        return written

    def _get_object_into(self, f: BinaryIO, params: dict) -> None:
        response = self.client.get_object(**params)
        for chunk in response["Body"].iter_chunks(chunk_size=DOWNLOAD_CHUNK_SIZE):
            f.write(chunk)


@contextmanager
def _open_body(request: UploadInput) -> Iterator[BinaryIO]:
    body = request.body
    if body is not None:
        if isinstance(body, (bytes, bytearray)):
            body = io.BytesIO(body)
        yield body
        return

    if not request.path:
        raise InvalidRequestError("Either body or path is required", field="body")

    with open(request.path, "rb") as f:
        yield f


def new(
    access_key_id: Optional[str] = None,
    secret_access_key: Optional[str] = None,
    region: Optional[str] = None,
    bucket: Optional[str] = None,
    token: Optional[str] = None,
) -> AwsManager:
    """
    Build an AwsManager from explicit options, falling back to AWS_* environment
    variables for anything left empty.

    Raises:
        ConfigurationError: required settings are missing from both
    """
    options = resolve_options(
        access_key_id=access_key_id,
        secret_access_key=secret_access_key,
        region=region,
        bucket=bucket,
        token=token,
    )
    return AwsManager(options)
