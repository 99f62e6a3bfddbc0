"""S3 object backend implementing ITextStore."""

from __future__ import annotations

import boto3
from botocore.exceptions import ClientError

from staffroll.core.exceptions import StorageError

_MISSING_CODES = {"404", "NoSuchKey", "NotFound"}


class S3TextStore:
    """Production ITextStore backed by a single S3 object."""

    def __init__(self, bucket: str, key: str, region: str = "us-east-1",
                 endpoint_url: str | None = None, encoding: str = "utf-8") -> None:
        self._bucket = bucket
        self._key = key
        self._region = region
        self._endpoint_url = endpoint_url
        self._encoding = encoding
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._client = boto3.client("s3", **kwargs)

    @property
    def location(self) -> str:
        return f"s3://{self._bucket}/{self._key}"

    def exists(self) -> bool:
        try:
            self._client.head_object(Bucket=self._bucket, Key=self._key)
            return True
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") in _MISSING_CODES:
                return False
            raise StorageError(f"S3 head failed for {self.location!r}: {exc}") from exc

    def read(self) -> str:
        try:
            resp = self._client.get_object(Bucket=self._bucket, Key=self._key)
            return resp["Body"].read().decode(self._encoding)
        except ClientError as exc:
            raise StorageError(f"S3 read failed for {self.location!r}: {exc}") from exc

    def write(self, data: str) -> None:
        try:
            self._client.put_object(
                Bucket=self._bucket, Key=self._key, Body=data.encode(self._encoding),
                ContentType="text/plain; charset=utf-8",
            )
        except ClientError as exc:
            raise StorageError(f"S3 write failed for {self.location!r}: {exc}") from exc
