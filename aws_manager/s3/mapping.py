"""Translation of request options into boto3 S3 parameters."""

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple

import yaml
from pydantic import BaseModel

from aws_manager.config.logger import get_logger
from aws_manager.s3.schemas import DownloadInput, UploadInput

logger = get_logger(__name__)

MAPPINGS_PATH = Path(__file__).parent / "field_mappings.yaml"
MAPPINGS = yaml.safe_load(MAPPINGS_PATH.read_text())

logger.debug("Loaded S3 field mappings from %s", MAPPINGS_PATH)


def is_unset(value: Any) -> bool:
    """Empty string, None, empty mapping, 0 and the zero datetime are unset."""
    if value is None:
        return True
    if isinstance(value, datetime):
        return value.replace(tzinfo=None) == datetime.min
    if isinstance(value, (str, dict, list)):
        return len(value) == 0
    if isinstance(value, int) and not isinstance(value, bool):
        return value == 0
    return False


def translate(model: BaseModel, table: List[Dict[str, str]]) -> Dict[str, Any]:
    params = {}
    for entry in table:
        value = getattr(model, entry["field"])
        if is_unset(value):
            continue
        params[entry["param"]] = dict(value) if isinstance(value, dict) else value
    return params


def to_upload_params(upload_in: UploadInput, mappings: Dict = MAPPINGS) -> Dict[str, Any]:
    return translate(upload_in, mappings["upload"])


def to_get_object_params(
    download_in: DownloadInput, mappings: Dict = MAPPINGS
) -> Dict[str, Any]:
    return translate(download_in, mappings["download"])


def split_transfer_args(
    params: Dict[str, Any], allowed: Iterable[str]
) -> Tuple[str, str, Dict[str, Any], List[str]]:
    """
    Split translated parameters for a managed transfer call.

    Returns:
        (bucket, key, extra_args, rejected) where rejected lists parameter
        names the managed transfer does not accept as ExtraArgs.
    """
    allowed = set(allowed)
    extra = {k: v for k, v in params.items() if k not in ("Bucket", "Key")}
    rejected = sorted(k for k in extra if k not in allowed)
    extra_args = {k: v for k, v in extra.items() if k in allowed}
    return params.get("Bucket", ""), params.get("Key", ""), extra_args, rejected
