"""
Lambda OTEL - Serverless Framework plugin for the AWS Distro for OpenTelemetry.

Attaches the ADOT Lambda layer, the exec wrapper environment variable and the
X-Ray managed policy to the functions of a deployment descriptor:

- handlers: the plugin and its hook
- logic: option resolution, runtime classification and layer ARN construction
- dal: region and layer registry collaborators
- models: option and environment models
"""

__version__ = "1.0.0"

from lambda_otel.exceptions import LambdaOtelError, LayerNotFoundError, TypeConfigError
from lambda_otel.handlers.plugin import LambdaOtelPlugin
from lambda_otel.handlers.utils.observability import logger, tracer

__all__ = [
    "LambdaOtelPlugin",
    "LambdaOtelError",
    "LayerNotFoundError",
    "TypeConfigError",
    "logger",
    "tracer",
]
