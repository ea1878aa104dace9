"""
Exception hierarchy for the Lambda OTEL plugin.

Every error raised by the plugin itself derives from LambdaOtelError and carries
a stable error code. Faults coming from AWS (botocore exceptions) are never
wrapped; they propagate to the caller unchanged.
"""

from typing import Any, Dict


class LambdaOtelError(Exception):
    """Base exception class for plugin errors."""

    def __init__(self, message: str, error_code: str):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for structured logging."""
        return {
            'error_code': self.error_code,
            'message': self.message,
        }


class TypeConfigError(LambdaOtelError):
    """Raised when a recognized option holds a value of the wrong type."""

    def __init__(self, scope: str, key: str, expected_type: str):
        path = f'{scope}.{key}' if scope else key
        super().__init__(
            message=f'{path} must be {expected_type}',
            error_code='INVALID_CONFIG_TYPE',
        )
        self.scope = scope
        self.key = key
        self.expected_type = expected_type

    def to_dict(self) -> Dict[str, Any]:
        error = super().to_dict()
        error.update({'scope': self.scope, 'key': self.key, 'expected_type': self.expected_type})
        return error


class LayerNotFoundError(LambdaOtelError):
    """Raised when an explicitly requested layer version does not exist."""

    def __init__(self, layer_arn: str):
        super().__init__(
            message=f"LambdaOTEL layer '{layer_arn}' doesn't exist. Check the provided version.",
            error_code='LAYER_NOT_FOUND',
        )
        self.layer_arn = layer_arn

    def to_dict(self) -> Dict[str, Any]:
        error = super().to_dict()
        error['layer_arn'] = self.layer_arn
        return error


__all__ = [
    'LambdaOtelError',
    'TypeConfigError',
    'LayerNotFoundError',
]
