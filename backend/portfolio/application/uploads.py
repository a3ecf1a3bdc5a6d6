from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from portfolio.errors import RateLimited
from portfolio.utils.media import (
    DOCUMENT_POLICY,
    IMAGE_POLICY,
    StoredBlob,
    delete_blobs,
    store_upload,
)
from portfolio.utils.rate_limit import client_address, get_rate_limiter
from .settings import set_resume


def upload_image(file) -> StoredBlob:
    return store_upload(file, IMAGE_POLICY, folder="images")


def check_resume_rate_limit() -> None:
    config = current_app.config
    limit = config["RESUME_UPLOAD_RATE_LIMIT"]
    window = config["RESUME_UPLOAD_RATE_WINDOW"]

    allowed, remaining, reset_after = get_rate_limiter().hit(
        f"resume-upload:{client_address()}", limit, window
    )
    if not allowed:
        raise RateLimited(
            "Too many requests. Please try again later.",
            headers={
                "X-RateLimit-Limit": str(limit),
                "X-RateLimit-Remaining": str(remaining),
                "X-RateLimit-Reset": str(int(reset_after + 0.999)),
            },
        )


def upload_resume(file):
    """
    Stores a PDF resume and points the settings at it.

    If the settings cannot be updated the new blob is removed again; the
    previous resume blob is deleted only after the settings commit.
    """
    check_resume_rate_limit()

    blob = store_upload(file, DOCUMENT_POLICY, folder="resumes")
    try:
        setting, previous = set_resume(blob.url, blob.public_id)
    except SQLAlchemyError:
        delete_blobs([blob.public_id])
        raise

    if previous and previous != blob.public_id:
        delete_blobs([previous])

    return setting, blob
