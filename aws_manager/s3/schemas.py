from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


# =======================
# Request Schemas
# =======================


class UploadInput(BaseModel):
    """
    Upload request options.

    Empty strings, empty metadata and None datetimes are treated as unset and
    are not sent to S3. Either body (bytes or a binary file object) or path
    must be given.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    acl: str = ""
    body: Optional[Any] = None
    path: str = ""
    bucket: str = ""
    cache_control: str = ""
    content_disposition: str = ""
    content_encoding: str = ""
    content_language: str = ""
    content_md5: str = ""
    content_type: str = ""
    expires: Optional[datetime] = None
    grant_full_control: str = ""
    grant_read: str = ""
    grant_read_acp: str = ""
    grant_write_acp: str = ""
    file_name: str = ""
    metadata: Dict[str, str] = Field(default_factory=dict)
    object_lock_legal_hold_status: str = ""
    object_lock_mode: str = ""
    object_lock_retain_until_date: Optional[datetime] = None
    request_payer: str = ""
    sse_customer_algorithm: str = ""
    sse_customer_key: str = ""
    sse_customer_key_md5: str = ""
    ssekms_encryption_context: str = ""
    ssekms_key_id: str = ""
    server_side_encryption: str = ""
    storage_class: str = ""
    tagging: str = ""
    website_redirect_location: str = ""


class DownloadInput(BaseModel):
    """Download request options. part_number 0 means "whole object"."""

    bucket: str = ""
    if_match: str = ""
    if_modified_since: Optional[datetime] = None
    if_none_match: str = ""
    if_unmodified_since: Optional[datetime] = None
    file_name: str = ""
    part_number: int = 0
    range: str = ""
    request_payer: str = ""
    response_cache_control: str = ""
    response_content_disposition: str = ""
    response_content_encoding: str = ""
    response_content_language: str = ""
    response_content_type: str = ""
    response_expires: Optional[datetime] = None
    sse_customer_algorithm: str = ""
    sse_customer_key: str = ""
    sse_customer_key_md5: str = ""
    version_id: str = ""


# =======================
# Response Schemas
# =======================


class UploadResult(BaseModel):
    """Where an uploaded object ended up."""

    bucket: str
    key: str
    location: str
    version_id: Optional[str] = None
    etag: Optional[str] = None
