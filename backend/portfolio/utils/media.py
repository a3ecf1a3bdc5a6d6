import uuid
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Protocol

import boto3
from flask import current_app
from werkzeug.utils import secure_filename

from portfolio.errors import InvalidInput


@dataclass(frozen=True)
class UploadPolicy:
    """Content types and size ceiling accepted for one kind of upload."""

    kind: str
    content_types: Dict[str, str]  # content type -> file extension
    max_bytes_key: str
    rejection: str

    def max_bytes(self) -> int:
        return current_app.config[self.max_bytes_key]


IMAGE_POLICY = UploadPolicy(
    kind="image",
    content_types={
        "image/jpeg": "jpg",
        "image/png": "png",
        "image/gif": "gif",
        "image/webp": "webp",
    },
    max_bytes_key="IMAGE_MAX_BYTES",
    rejection="Invalid file type. Only JPG, PNG, GIF, WebP are allowed.",
)

DOCUMENT_POLICY = UploadPolicy(
    kind="document",
    content_types={"application/pdf": "pdf"},
    max_bytes_key="DOCUMENT_MAX_BYTES",
    rejection="Invalid file type. Only PDF is allowed.",
)


@dataclass
class StoredBlob:
    url: str
    public_id: str
    filename: str
    content_type: str
    size: int

    def to_dict(self):
        return {
            "url": self.url,
            "public_id": self.public_id,
            "filename": self.filename,
            "content_type": self.content_type,
            "size": self.size,
        }


class BlobStore(Protocol):
    """Operations the API needs from external object storage."""

    def upload(self, data: bytes, *, key: str, content_type: str) -> str:
        """Stores the object and returns its public URL."""
        ...

    def delete(self, key: str) -> None:
        ...


@dataclass
class InMemoryBlobStore:
    """Blob store kept in process memory, for development and tests."""

    base_url: str = "https://blobs.example.test"
    objects: Dict[str, bytes] = field(default_factory=dict)
    deleted: list = field(default_factory=list)

    def upload(self, data: bytes, *, key: str, content_type: str) -> str:
        self.objects[key] = data
        return f"{self.base_url}/{key}"

    def delete(self, key: str) -> None:
        self.objects.pop(key, None)
        self.deleted.append(key)


@dataclass
class S3BlobStore:
    """S3-compatible object storage."""

    bucket: str
    region: str
    endpoint_url: Optional[str] = None
    public_base_url: Optional[str] = None
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None

    def __post_init__(self):
        self._client = boto3.client(
            "s3",
            endpoint_url=self.endpoint_url,
            region_name=self.region,
            aws_access_key_id=self.access_key_id,
            aws_secret_access_key=self.secret_access_key,
        )
        if not self.public_base_url:
            self.public_base_url = f"https://{self.bucket}.s3.{self.region}.amazonaws.com"

    def upload(self, data: bytes, *, key: str, content_type: str) -> str:
        self._client.put_object(
            Bucket=self.bucket,
            Key=key,
            Body=data,
            ContentType=content_type,
        )
        return f"{self.public_base_url.rstrip('/')}/{key}"

    def delete(self, key: str) -> None:
        self._client.delete_object(Bucket=self.bucket, Key=key)


def build_blob_store(config) -> BlobStore:
    backend = config.get("BLOB_BACKEND", "s3")
    if backend == "memory":
        return InMemoryBlobStore()

    if backend == "s3":
        return S3BlobStore(
            bucket=config["S3_BUCKET"],
            region=config["S3_REGION"],
            endpoint_url=config.get("S3_ENDPOINT_URL"),
            public_base_url=config.get("S3_PUBLIC_BASE_URL"),
            access_key_id=config.get("AWS_ACCESS_KEY_ID"),
            secret_access_key=config.get("AWS_SECRET_ACCESS_KEY"),
        )

    raise ValueError(f"Unknown BLOB_BACKEND: {backend}")


def get_blob_store() -> BlobStore:
    return current_app.extensions["blob_store"]


def validate_upload(data: bytes, content_type: Optional[str], policy: UploadPolicy) -> None:
    if content_type not in policy.content_types:
        raise InvalidInput(policy.rejection)

    max_bytes = policy.max_bytes()
    if len(data) > max_bytes:
        limit_mb = max_bytes / (1024 * 1024)
        raise InvalidInput(f"File size exceeds the limit of {limit_mb:g}MB.")


def read_upload(file, policy: UploadPolicy) -> bytes:
    """
    Reads a werkzeug FileStorage after checking its declared type.

    At most one byte past the limit is read, so oversized payloads are
    rejected without buffering them completely.
    """
    if file is None or not file.filename:
        raise InvalidInput(f"No {policy.kind} file provided.")

    if file.mimetype not in policy.content_types:
        raise InvalidInput(policy.rejection)

    data = file.read(policy.max_bytes() + 1)
    validate_upload(data, file.mimetype, policy)
    return data


def store_upload(file, policy: UploadPolicy, folder: str) -> StoredBlob:
    data = read_upload(file, policy)

    filename = secure_filename(file.filename) or f"upload.{policy.content_types[file.mimetype]}"
    key = f"{folder}/{uuid.uuid4().hex}-{filename.lower()}"

    url = get_blob_store().upload(data, key=key, content_type=file.mimetype)
    return StoredBlob(
        url=url,
        public_id=key,
        filename=file.filename,
        content_type=file.mimetype,
        size=len(data),
    )


def delete_blobs(public_ids: Iterable[Optional[str]]) -> int:
    """
    Best-effort deletion of stored blobs.

    Failures are logged and never raised: the owning database rows have
    already been changed when this runs. Returns the number deleted.
    """
    store = get_blob_store()
    deleted = 0
    for public_id in public_ids:
        if not public_id:
            continue
        try:
            store.delete(public_id)
            deleted += 1
        except Exception as e:
            current_app.logger.error(f"Failed to delete blob {public_id}: {e}")
    return deleted
