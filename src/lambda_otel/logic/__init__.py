"""
Plugin logic: option resolution, runtime classification and layer ARNs.
"""

from lambda_otel.logic.config_resolver import resolve_function_config, resolve_global_options
from lambda_otel.logic.layer_arn import LayerArnBuilder, load_layer_versions
from lambda_otel.logic.runtime import classify_runtime, resolve_architecture, resolve_runtime

__all__ = [
    'resolve_global_options',
    'resolve_function_config',
    'LayerArnBuilder',
    'load_layer_versions',
    'classify_runtime',
    'resolve_runtime',
    'resolve_architecture',
]
