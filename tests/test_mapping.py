"""Tests for request option translation."""

from datetime import datetime, timezone

from aws_manager.s3.mapping import (
    MAPPINGS,
    is_unset,
    split_transfer_args,
    to_get_object_params,
    to_upload_params,
)
from aws_manager.s3.schemas import DownloadInput, UploadInput


class TestIsUnset:
    """Tests for is_unset."""

    def test_empty_values(self):
        assert is_unset("")
        assert is_unset(None)
        assert is_unset({})
        assert is_unset(0)

    def test_zero_datetime(self):
        assert is_unset(datetime.min)
        assert is_unset(datetime.min.replace(tzinfo=timezone.utc))

    def test_set_values(self):
        assert not is_unset("x")
        assert not is_unset({"a": "b"})
        assert not is_unset(2)
        assert not is_unset(datetime(2024, 1, 1))


class TestMappingTables:
    """The YAML tables cover every request option."""

    def test_upload_table_covers_model(self):
        fields = {entry["field"] for entry in MAPPINGS["upload"]}
        assert fields == set(UploadInput.model_fields) - {"body", "path"}

    def test_download_table_covers_model(self):
        fields = {entry["field"] for entry in MAPPINGS["download"]}
        assert fields == set(DownloadInput.model_fields)


class TestToUploadParams:
    """Tests for to_upload_params."""

    def test_empty_input_gives_no_params(self):
        assert to_upload_params(UploadInput()) == {}

    def test_only_set_fields_are_translated(self):
        expires = datetime(2030, 5, 1, tzinfo=timezone.utc)
        params = to_upload_params(
            UploadInput(
                bucket="b",
                file_name="dir/report.csv",
                acl="private",
                content_type="text/csv",
                expires=expires,
                metadata={"owner": "etl"},
                ssekms_key_id="kms-key",
                server_side_encryption="aws:kms",
                grant_read_acp="id=abc",
            )
        )

        assert params == {
            "Bucket": "b",
            "Key": "dir/report.csv",
            "ACL": "private",
            "ContentType": "text/csv",
            "Expires": expires,
            "Metadata": {"owner": "etl"},
            "SSEKMSKeyId": "kms-key",
            "ServerSideEncryption": "aws:kms",
            "GrantReadACP": "id=abc",
        }

    def test_zero_datetimes_are_skipped(self):
        params = to_upload_params(
            UploadInput(expires=datetime.min, object_lock_retain_until_date=datetime.min)
        )
        assert "Expires" not in params
        assert "ObjectLockRetainUntilDate" not in params

    def test_body_and_path_are_not_params(self):
        params = to_upload_params(UploadInput(body=b"data", path="/tmp/x"))
        assert params == {}


class TestToGetObjectParams:
    """Tests for to_get_object_params."""

    def test_part_number_zero_is_skipped(self):
        params = to_get_object_params(DownloadInput(bucket="b", file_name="k"))
        assert params == {"Bucket": "b", "Key": "k"}

    def test_part_number_is_translated(self):
        params = to_get_object_params(
            DownloadInput(bucket="b", file_name="k", part_number=3)
        )
        assert params["PartNumber"] == 3

    def test_conditional_and_response_fields(self):
        since = datetime(2024, 2, 1, tzinfo=timezone.utc)
        params = to_get_object_params(
            DownloadInput(
                file_name="k",
                if_match='"etag"',
                if_modified_since=since,
                range="bytes=0-9",
                response_content_type="application/json",
                version_id="v1",
            )
        )

        assert params == {
            "Key": "k",
            "IfMatch": '"etag"',
            "IfModifiedSince": since,
            "Range": "bytes=0-9",
            "ResponseContentType": "application/json",
            "VersionId": "v1",
        }


class TestSplitTransferArgs:
    """Tests for split_transfer_args."""

    def test_splits_bucket_key_and_extra(self):
        bucket, key, extra, rejected = split_transfer_args(
            {"Bucket": "b", "Key": "k", "VersionId": "v1", "Range": "bytes=0-1"},
            ["VersionId"],
        )

        assert bucket == "b"
        assert key == "k"
        assert extra == {"VersionId": "v1"}
        assert rejected == ["Range"]

    def test_missing_bucket_and_key(self):
        bucket, key, extra, rejected = split_transfer_args({}, [])
        assert (bucket, key, extra, rejected) == ("", "", {}, [])
