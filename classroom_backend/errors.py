import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server Error"


class ServiceError(Exception):
    """Base error for the classroom backend.

    Raised from route handlers or the code they call; the handlers installed by
    ``register_error_handlers`` turn it into a ``{"message": ...}`` response.
    """

    status_code = 400

    def __init__(self, message, status_code=None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationError(ServiceError):
    """Payload breaks a structural rule (missing field, wrong type, arity)."""

    status_code = 400


class NotFoundError(ServiceError):
    status_code = 404


class AuthorizationError(ServiceError):
    status_code = 403


class PersistenceFault(ServiceError):
    """Document store failure; the message is for logs only."""

    status_code = 500


def register_error_handlers(app):
    @app.errorhandler(PersistenceFault)
    def _persistence_fault(exc):
        logger.error("Persistence fault: %s", exc.message, exc_info=exc.__cause__ or exc)
        return jsonify({"message": SERVER_ERROR_MESSAGE}), exc.status_code

    @app.errorhandler(ServiceError)
    def _service_error(exc):
        return jsonify({"message": exc.message}), exc.status_code

    @app.errorhandler(HTTPException)
    def _http_exception(exc):
        return jsonify({"message": exc.description}), exc.code

    @app.errorhandler(Exception)
    def _unexpected(exc):
        logger.exception("Unhandled error: %s", exc)
        return jsonify({"message": SERVER_ERROR_MESSAGE}), 500
