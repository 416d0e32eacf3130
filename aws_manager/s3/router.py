"""FastAPI router for S3 upload and download."""

import tempfile
from functools import lru_cache
from pathlib import Path
from typing import Optional

from boto3.exceptions import S3UploadFailedError
from botocore.exceptions import BotoCoreError, ClientError
from fastapi import APIRouter, Depends, File, HTTPException, Query, Response, UploadFile

from aws_manager.config.logger import get_logger
from aws_manager.exceptions import ConfigurationError, InvalidRequestError
from aws_manager.s3.client import AwsManagerInterface, new
from aws_manager.s3.schemas import DownloadInput, UploadInput, UploadResult

logger = get_logger(__name__)
router = APIRouter(tags=["S3"])

NOT_FOUND_CODES = {"404", "NoSuchKey", "NoSuchBucket"}


@lru_cache(maxsize=1)
def get_manager() -> AwsManagerInterface:
    """Manager built from AWS_* environment variables, created on first use."""
    try:
        return new()
    except ConfigurationError as e:
        logger.error("S3 manager is not configured: %s", e)
        raise HTTPException(status_code=500, detail=str(e))


def _to_http_error(e: ClientError) -> HTTPException:
    code = str(e.response.get("Error", {}).get("Code", ""))
    if code in NOT_FOUND_CODES:
        return HTTPException(status_code=404, detail=f"Object not found: {code}")
    return HTTPException(status_code=502, detail=f"S3 error: {code or str(e)}")


# =======================
# POST Endpoints
# =======================
@router.post("/upload", response_model=UploadResult)
def upload_object(
    key: str = Query(..., description="S3 object key"),
    file: UploadFile = File(..., description="File to upload"),
    bucket: Optional[str] = Query(None, description="Bucket, defaults to AWS_BUCKET"),
    content_type: Optional[str] = Query(None, description="Content-Type, defaults to the part's type"),
    storage_class: Optional[str] = Query(None, description="S3 storage class"),
    manager: AwsManagerInterface = Depends(get_manager),
):
    """Upload a file to S3 under the given key."""
    upload_in = UploadInput(
        body=file.file,
        file_name=key,
        bucket=bucket or "",
        content_type=content_type or file.content_type or "application/octet-stream",
        storage_class=storage_class or "",
    )
    try:
        return manager.upload(upload_in)
    except InvalidRequestError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except ClientError as e:
        logger.error("Error uploading object %s: %s", key, e)
        raise _to_http_error(e)
    except (BotoCoreError, S3UploadFailedError) as e:
        logger.error("Error uploading object %s: %s", key, e)
        raise HTTPException(status_code=502, detail=f"Error uploading object: {e}")


# =======================
# GET Endpoints
# =======================
@router.get("/download")
def download_object(
    key: str = Query(..., description="S3 object key"),
    bucket: Optional[str] = Query(None, description="Bucket, defaults to AWS_BUCKET"),
    version_id: Optional[str] = Query(None, description="Object version"),
    range_: Optional[str] = Query(None, alias="range", description="HTTP range, e.g. bytes=0-99"),
    manager: AwsManagerInterface = Depends(get_manager),
):
    """
    Download an object from S3.

    Returns the raw object bytes.
    """
    download_in = DownloadInput(
        file_name=key,
        bucket=bucket or "",
        version_id=version_id or "",
        range=range_ or "",
    )
    with tempfile.TemporaryDirectory() as tmp_dir:
        dest = Path(tmp_dir) / "object"
        try:
            manager.download(dest, download_in)
        except InvalidRequestError as e:
            raise HTTPException(status_code=400, detail=e.message)
        except ClientError as e:
            logger.error("Error downloading object %s: %s", key, e)
            raise _to_http_error(e)
        except BotoCoreError as e:
            logger.error("Error downloading object %s: %s", key, e)
            raise HTTPException(status_code=502, detail=f"Error downloading object: {e}")
        data = dest.read_bytes()

    filename = key.rsplit("/", 1)[-1]
    return Response(
        content=data,
        media_type="application/octet-stream",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


__all__ = ["router", "get_manager"]
