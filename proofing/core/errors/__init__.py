"""Application error taxonomy and request-boundary error handling."""

from proofing.core.errors.authentication import AuthenticationError
from proofing.core.errors.authentication import AuthorizationError
from proofing.core.errors.authentication import TokenError
from proofing.core.errors.base import GENERIC_CLIENT_MESSAGE
from proofing.core.errors.base import BaseError
from proofing.core.errors.conflict import ConflictError
from proofing.core.errors.handlers import DEFAULT_ERROR_RESPONSE_OPTIONS
from proofing.core.errors.handlers import ErrorResponseOptions
from proofing.core.errors.handlers import build_error_response
from proofing.core.errors.handlers import handle_route_error
from proofing.core.errors.handlers import register_error_handlers
from proofing.core.errors.handlers import with_error_handling
from proofing.core.errors.logging import create_error_logger
from proofing.core.errors.logging import log_error
from proofing.core.errors.logging import log_error_at_level
from proofing.core.errors.not_found import NotFoundError
from proofing.core.errors.utils import get_client_error_message
from proofing.core.errors.utils import get_error_status_code
from proofing.core.errors.utils import is_base_error
from proofing.core.errors.utils import is_validation_error
from proofing.core.errors.utils import serialize_error_for_client
from proofing.core.errors.utils import serialize_error_for_logging
from proofing.core.errors.utils import should_log_error
from proofing.core.errors.utils import to_base_error
from proofing.core.errors.validation import ValidationError

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "BaseError",
    "ConflictError",
    "DEFAULT_ERROR_RESPONSE_OPTIONS",
    "ErrorResponseOptions",
    "GENERIC_CLIENT_MESSAGE",
    "NotFoundError",
    "TokenError",
    "ValidationError",
    "build_error_response",
    "create_error_logger",
    "get_client_error_message",
    "get_error_status_code",
    "handle_route_error",
    "is_base_error",
    "is_validation_error",
    "log_error",
    "log_error_at_level",
    "register_error_handlers",
    "serialize_error_for_client",
    "serialize_error_for_logging",
    "should_log_error",
    "to_base_error",
    "with_error_handling",
]
