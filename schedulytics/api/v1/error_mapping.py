"""
Maps application errors onto gRPC status codes.

Servicer methods are wrapped with ``map_errors`` (unary) or
``map_stream_errors`` (server streaming). Categorized errors abort the
call with the matching status and the error's message; anything else is
logged with its traceback and reported as INTERNAL.
"""

import functools
import logging

import grpc

from ...domain.errors import ApplicationError, ErrorCategory

logger = logging.getLogger(__name__)

STATUS_CODES = {
    ErrorCategory.INVALID_ARGUMENT: grpc.StatusCode.INVALID_ARGUMENT,
    ErrorCategory.NOT_FOUND: grpc.StatusCode.NOT_FOUND,
    ErrorCategory.INTERNAL: grpc.StatusCode.INTERNAL,
    ErrorCategory.UNAVAILABLE: grpc.StatusCode.UNAVAILABLE,
}


def status_code_for(category: ErrorCategory) -> grpc.StatusCode:
    """Return the gRPC status code for an error category."""
    return STATUS_CODES.get(category, grpc.StatusCode.INTERNAL)


def abort_with(context: grpc.ServicerContext, error: ApplicationError) -> None:
    """Abort the call with the status and message of an application error."""
    code = status_code_for(error.category)
    logger.info(f"Aborting call with {code.name}: {error.to_dict()}")
    context.abort(code, str(error))


def _abort_unexpected(context: grpc.ServicerContext, method_name: str, error: Exception) -> None:
    logger.exception(f"Unexpected error in {method_name}: {error}")
    context.abort(grpc.StatusCode.INTERNAL, f"Unexpected error: {error}")


def map_errors(method):
    """Translate errors raised by a unary servicer method into a status."""

    @functools.wraps(method)
    def wrapper(self, request, context):
        try:
            return method(self, request, context)
        except ApplicationError as e:
            abort_with(context, e)
        except Exception as e:
            _abort_unexpected(context, method.__name__, e)

    return wrapper


def map_stream_errors(method):
    """Translate errors raised while producing a response stream into a status."""

    @functools.wraps(method)
    def wrapper(self, request, context):
        try:
            yield from method(self, request, context)
        except ApplicationError as e:
            abort_with(context, e)
        except Exception as e:
            _abort_unexpected(context, method.__name__, e)

    return wrapper
