from .request_validation import build_validator, error_response, init_app, validate_request

__all__ = [
    'build_validator',
    'error_response',
    'init_app',
    'validate_request'
]
