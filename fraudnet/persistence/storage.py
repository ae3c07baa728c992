"""S3/MinIO-backed durable store for fraud records and analytics snapshots."""

import json
from typing import Any

import structlog
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from fraudnet.domains.ledger.models import FraudRecord
from fraudnet.domains.ledger.store import RecordListing
from fraudnet.shared.errors import RecordDecodeError, StoreError

logger = structlog.get_logger()

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

DEFAULT_BUCKET = "fraud-detection-service-data"
DEFAULT_REGION = "us-east-1"

_S3_ERRORS = (ClientError, BotoCoreError)


def _get_s3_client(
    endpoint_url: str | None = None,
    region: str = DEFAULT_REGION,
    access_key: str | None = None,
    secret_key: str | None = None,
):
    """Create a boto3 S3 client; without explicit keys boto3's default chain applies."""
    import boto3

    kwargs: dict[str, Any] = {"region_name": region}
    if endpoint_url:
        kwargs["endpoint_url"] = endpoint_url
    if access_key and secret_key:
        kwargs["aws_access_key_id"] = access_key
        kwargs["aws_secret_access_key"] = secret_key
    return boto3.client("s3", **kwargs)


def _is_missing(exc: ClientError) -> bool:
    code = exc.response.get("Error", {}).get("Code", "")
    return code in ("NoSuchKey", "404", "NotFound")


class FraudRecordStore:
    """One JSON object per fraud record, under keys chosen by the ledger."""

    def __init__(
        self,
        bucket: str = DEFAULT_BUCKET,
        endpoint_url: str | None = None,
        region: str = DEFAULT_REGION,
        access_key: str | None = None,
        secret_key: str | None = None,
        client=None,
    ):
        self.bucket = bucket
        self.endpoint_url = endpoint_url
        self.region = region
        self.access_key = access_key
        self.secret_key = secret_key
        self._client = client

    @classmethod
    def from_settings(cls, settings) -> "FraudRecordStore":
        return cls(
            bucket=settings.s3_bucket_name,
            endpoint_url=settings.s3_endpoint_url,
            region=settings.s3_region,
            access_key=settings.aws_access_key_id,
            secret_key=settings.aws_secret_access_key,
        )

    @property
    def client(self):
        if self._client is None:
            self._client = _get_s3_client(
                self.endpoint_url, self.region, self.access_key, self.secret_key
            )
        return self._client

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def put_json(self, key: str, payload: dict[str, Any]) -> None:
        body = json.dumps(payload, indent=2).encode("utf-8")
        try:
            self.client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=body,
                ContentType="application/json",
            )
        except _S3_ERRORS as exc:
            raise StoreError(f"Failed to write {key}: {exc}") from exc
        logger.debug("store_object_written", key=key, size_bytes=len(body))

    def put_record(self, key: str, record: FraudRecord) -> None:
        self.put_json(key, record.to_wire())

    def delete_key(self, key: str) -> None:
        try:
            self.client.delete_object(Bucket=self.bucket, Key=key)
        except _S3_ERRORS as exc:
            raise StoreError(f"Failed to delete {key}: {exc}") from exc
        logger.info("store_object_deleted", key=key)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def _read_body(self, key: str) -> bytes | None:
        try:
            resp = self.client.get_object(Bucket=self.bucket, Key=key)
            return resp["Body"].read()
        except ClientError as exc:
            if _is_missing(exc):
                return None
            raise StoreError(f"Failed to read {key}: {exc}") from exc
        except BotoCoreError as exc:
            raise StoreError(f"Failed to read {key}: {exc}") from exc

    def get_json(self, key: str) -> dict[str, Any] | None:
        data = self._read_body(key)
        if data is None:
            return None
        try:
            return json.loads(data)
        except ValueError as exc:
            raise RecordDecodeError(key, str(exc)) from exc

    def _decode_record(self, key: str, data: bytes) -> FraudRecord:
        try:
            return FraudRecord.model_validate_json(data)
        except ValidationError as exc:
            raise RecordDecodeError(key, str(exc)) from exc

    def get_record(self, key: str) -> FraudRecord | None:
        data = self._read_body(key)
        if data is None:
            return None
        return self._decode_record(key, data)

    # ------------------------------------------------------------------
    # List
    # ------------------------------------------------------------------

    def list_keys(self, prefix: str, max_items: int | None = None) -> list[str]:
        """List object keys under a prefix, stopping after max_items."""
        search_prefix = prefix if prefix.endswith("/") else prefix + "/"
        keys: list[str] = []
        try:
            paginator = self.client.get_paginator("list_objects_v2")
            for page in paginator.paginate(Bucket=self.bucket, Prefix=search_prefix):
                for obj in page.get("Contents", []):
                    if obj["Key"].endswith(".json"):
                        keys.append(obj["Key"])
                        if max_items is not None and len(keys) >= max_items:
                            return keys
        except _S3_ERRORS as exc:
            raise StoreError(f"Failed to list {search_prefix}: {exc}") from exc
        return keys

    def list_records(self, prefix: str, max_items: int) -> RecordListing:
        """Fetch and decode the newest max_items records under prefix.

        Keys are date-partitioned, so the newest are the last in key order;
        they are fetched oldest first. Objects that fail to decode are
        reported in the listing's errors and skipped; I/O failures raise
        StoreError.
        """
        listing = RecordListing()
        if max_items <= 0:
            return listing
        for key in sorted(self.list_keys(prefix))[-max_items:]:
            data = self._read_body(key)
            if data is None:
                # deleted between list and get
                continue
            try:
                listing.records.append(self._decode_record(key, data))
            except RecordDecodeError as exc:
                listing.errors.append(exc)
        return listing

    def find_record_key(self, prefix: str, fraud_id: str) -> str | None:
        suffix = f"/{fraud_id}.json"
        for key in self.list_keys(prefix):
            if key.endswith(suffix):
                return key
        return None

    def check_connection(self) -> bool:
        """Check that the bucket is reachable with the configured credentials."""
        try:
            self.client.list_objects_v2(Bucket=self.bucket, MaxKeys=1)
            return True
        except _S3_ERRORS:
            logger.warning("store_connection_check_failed", bucket=self.bucket)
            return False
