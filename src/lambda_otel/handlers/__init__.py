"""
Plugin entry points.
"""

from lambda_otel.handlers.plugin import LambdaOtelPlugin

__all__ = ['LambdaOtelPlugin']
