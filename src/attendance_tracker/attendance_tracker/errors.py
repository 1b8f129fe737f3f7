from __future__ import annotations

import logging

from flask import Flask, jsonify

from .core.exceptions import (
    AlreadyCheckedInError,
    AuthorizationError,
    DomainError,
    InvalidDurationError,
    NoOpenCheckInError,
    RecordNotFoundError,
    StoreUnavailableError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Most specific first; the first isinstance match wins.
ERROR_STATUS = (
    (ValidationError, 400, "validation_error"),
    (AuthorizationError, 403, "forbidden"),
    (RecordNotFoundError, 404, "not_found"),
    (AlreadyCheckedInError, 409, "already_checked_in"),
    (NoOpenCheckInError, 409, "no_open_check_in"),
    (InvalidDurationError, 409, "invalid_duration"),
    (DomainError, 400, "domain_error"),
)


def error_response(*, status_code: int, code: str, message: str):
    payload = {"error": {"code": code, "message": message}}
    return jsonify(payload), status_code


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(exc: DomainError):
        for exc_type, status_code, code in ERROR_STATUS:
            if isinstance(exc, exc_type):
                return error_response(status_code=status_code, code=code, message=str(exc))
        return error_response(status_code=400, code="domain_error", message=str(exc))

    @app.errorhandler(StoreUnavailableError)
    def handle_store_unavailable(exc: StoreUnavailableError):
        logger.error("Store unavailable: %s", exc)
        return error_response(
            status_code=503,
            code="store_unavailable",
            message="Attendance store is temporarily unavailable",
        )
