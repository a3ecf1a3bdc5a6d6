import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Hard ceiling for request bodies; per-kind upload limits are enforced
    # by the upload policies below it.
    MAX_CONTENT_LENGTH = 32 * 1024 * 1024

    # Blob storage
    BLOB_BACKEND = os.getenv("BLOB_BACKEND", "s3")
    S3_BUCKET = os.getenv("S3_BUCKET")
    S3_REGION = os.getenv("S3_REGION", "us-east-1")
    S3_ENDPOINT_URL = os.getenv("S3_ENDPOINT_URL")
    S3_PUBLIC_BASE_URL = os.getenv("S3_PUBLIC_BASE_URL")
    AWS_ACCESS_KEY_ID = os.getenv("AWS_ACCESS_KEY_ID")
    AWS_SECRET_ACCESS_KEY = os.getenv("AWS_SECRET_ACCESS_KEY")

    IMAGE_MAX_BYTES = int(os.getenv("IMAGE_MAX_BYTES", 10 * 1024 * 1024))
    DOCUMENT_MAX_BYTES = int(os.getenv("DOCUMENT_MAX_BYTES", 5 * 1024 * 1024))

    RESUME_UPLOAD_RATE_LIMIT = int(os.getenv("RESUME_UPLOAD_RATE_LIMIT", 5))
    RESUME_UPLOAD_RATE_WINDOW = int(os.getenv("RESUME_UPLOAD_RATE_WINDOW", 10))

    # Mail (contact form); unset backend disables sending
    MAIL_BACKEND = os.getenv("MAIL_BACKEND")
    SMTP_HOST = os.getenv("SMTP_HOST", "localhost")
    SMTP_PORT = int(os.getenv("SMTP_PORT", 587))
    SMTP_USERNAME = os.getenv("SMTP_USERNAME")
    SMTP_PASSWORD = os.getenv("SMTP_PASSWORD")
    SMTP_USE_TLS = _env_bool("SMTP_USE_TLS", True)
    MAIL_FROM = os.getenv("MAIL_FROM", "Portfolio <no-reply@localhost>")
    ADMIN_EMAIL = os.getenv("ADMIN_EMAIL")

    # Ordering engine
    REORDER_MAX_ATTEMPTS = int(os.getenv("REORDER_MAX_ATTEMPTS", 3))
    REORDER_BASE_DELAY = float(os.getenv("REORDER_BASE_DELAY", 0.1))


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///portfolio-dev.db")
    BLOB_BACKEND = os.getenv("BLOB_BACKEND", "memory")
    MAIL_BACKEND = os.getenv("MAIL_BACKEND", "outbox")


class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")


class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    BLOB_BACKEND = "memory"
    MAIL_BACKEND = "outbox"
    ADMIN_EMAIL = "owner@example.com"
    REORDER_BASE_DELAY = 0.0


config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
