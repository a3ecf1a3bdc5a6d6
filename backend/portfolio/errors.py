from flask import current_app, jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from portfolio.extensions import db


class ApiError(Exception):
    """Base class for errors rendered as the JSON error envelope."""

    status_code = 500

    def __init__(self, message, error=None, headers=None):
        super().__init__(message)
        self.message = message
        self.error = error
        self.headers = headers or {}

    def to_dict(self):
        body = {"message": self.message}
        if self.error:
            body["error"] = self.error
        return body


class InvalidInput(ApiError):
    status_code = 400


class InvalidCredentials(ApiError):
    status_code = 401

    def __init__(self, message="Invalid credentials", **kwargs):
        super().__init__(message, **kwargs)


class NotFound(ApiError):
    status_code = 404


class Conflict(ApiError):
    status_code = 409


class ConflictRetriesExhausted(Conflict):
    status_code = 503


class RateLimited(ApiError):
    status_code = 429


class InternalError(ApiError):
    status_code = 500


class ExternalServiceUnavailable(ApiError):
    status_code = 503


def error_response(error: ApiError):
    response = jsonify(error.to_dict())
    response.status_code = error.status_code
    for name, value in error.headers.items():
        response.headers[name] = value
    return response


def register_error_handlers(app):
    # Imported here so the storage classifier can depend on this module.
    from portfolio.utils.store_errors import classify_store_error

    @app.errorhandler(ApiError)
    def handle_api_error(error):
        return error_response(error)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        response = jsonify({"message": error.description or error.name})
        response.status_code = error.code or 500
        return response

    @app.errorhandler(RequestEntityTooLarge)
    def handle_body_too_large(error):
        limit_mb = (current_app.config.get("MAX_CONTENT_LENGTH") or 0) / (1024 * 1024)
        return error_response(InvalidInput(f"File size exceeds the limit of {limit_mb:g}MB."))

    @app.errorhandler(SQLAlchemyError)
    def handle_store_error(error):
        db.session.rollback()
        classified = classify_store_error(error)
        if isinstance(classified, InternalError):
            current_app.logger.exception("Unclassified storage failure")
        return error_response(classified)

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        current_app.logger.exception("Unhandled error")
        return error_response(InternalError("Internal Server Error"))
