from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from archiver.logging.logger import Log
from archiver.storage.base import BaseObjectStorage
from archiver.storage.exceptions import StorageError
from archiver.storage.models import StorageItem


class S3ObjectStorage(BaseObjectStorage):
    """Object storage backed by one S3 bucket.

    The boto3 client is passed in so tests and callers control its lifetime.
    """

    def __init__(self, client: Any, bucket_name: str) -> None:
        if not bucket_name:
            raise ValueError("bucket_name is required")
        self._client = client
        self._bucket = bucket_name

    def put_objects(self, items: list[StorageItem]) -> None:
        for item in items:
            Log.info(f"Uploading s3://{self._bucket}/{item.key}")
            try:
                self._client.put_object(
                    Bucket=self._bucket,
                    Key=item.key,
                    Body=item.body,
                    ContentType=item.content_type,
                )
            except (BotoCoreError, ClientError) as exc:
                raise StorageError(f"Failed to upload '{item.key}': {exc}") from exc
        Log.info(f"All {len(items)} items uploaded successfully")

    def list_folders(self, prefix: str) -> list[str]:
        folders: list[str] = []
        for page in self._paginate(prefix, delimiter="/"):
            folders.extend(p["Prefix"] for p in page.get("CommonPrefixes", []))
        Log.debug(f"Found {len(folders)} folders under '{prefix}'")
        return folders

    def list_pdf_keys(self, prefix: str) -> list[str]:
        keys: list[str] = []
        for page in self._paginate(prefix):
            keys.extend(
                obj["Key"] for obj in page.get("Contents", []) if obj["Key"].endswith(".pdf")
            )
        Log.debug(f"Found {len(keys)} PDF keys under '{prefix}'")
        return keys

    def presigned_url(self, key: str, expires_in: int) -> str:
        if not key:
            raise ValueError("key is required to generate a presigned URL")
        try:
            url = self._client.generate_presigned_url(
                "get_object",
                Params={"Bucket": self._bucket, "Key": key},
                ExpiresIn=expires_in,
            )
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(f"Failed to presign '{key}': {exc}") from exc
        Log.info(f"Generated presigned URL for {key} (valid for {expires_in}s)")
        return str(url)

    def read_text(self, key: str) -> str:
        if not key:
            raise ValueError("key is required to read an object")
        try:
            response = self._client.get_object(Bucket=self._bucket, Key=key)
            body = response["Body"].read()
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(f"Failed to read '{key}': {exc}") from exc
        return body.decode("utf-8") if isinstance(body, bytes) else str(body)

    def _paginate(self, prefix: str, delimiter: str | None = None) -> list[dict[str, Any]]:
        params: dict[str, Any] = {"Bucket": self._bucket, "Prefix": prefix}
        if delimiter is not None:
            params["Delimiter"] = delimiter
        try:
            paginator = self._client.get_paginator("list_objects_v2")
            return list(paginator.paginate(**params))
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(f"Failed to list objects under '{prefix}': {exc}") from exc
