"""
Runtime and architecture classification for ADOT layer selection.
"""

from typing import Any, Mapping, Optional, Tuple

from lambda_otel.models.options import Architecture, RuntimeFamily

DEFAULT_RUNTIME = 'nodejs12.x'

# Evaluated in order, first matching prefix wins
RUNTIME_FAMILY_RULES: Tuple[Tuple[str, RuntimeFamily], ...] = (
    ('nodejs', RuntimeFamily.NODEJS),
    ('java', RuntimeFamily.JAVA_WRAPPER),
    ('python', RuntimeFamily.PYTHON),
)


def classify_runtime(runtime: Optional[str]) -> RuntimeFamily:
    """Map a Lambda runtime identifier such as "python3.9" to its layer family."""
    if not isinstance(runtime, str):
        return RuntimeFamily.COLLECTOR
    for prefix, family in RUNTIME_FAMILY_RULES:
        if runtime.startswith(prefix):
            return family
    return RuntimeFamily.COLLECTOR


def resolve_runtime(function: Mapping[str, Any], provider: Optional[Mapping[str, Any]]) -> RuntimeFamily:
    """
    Classify the effective runtime of a function.

    The function's own runtime wins, then the provider runtime, then the
    framework default.
    """
    runtime = function.get('runtime') or (provider or {}).get('runtime') or DEFAULT_RUNTIME
    return classify_runtime(runtime)


def resolve_architecture(function: Mapping[str, Any], provider: Optional[Mapping[str, Any]]) -> Architecture:
    """Return arm64 when the function, or failing that the provider, declares it."""
    architecture = function.get('architecture')
    if not architecture:
        architecture = (provider or {}).get('architecture')
    if architecture == Architecture.ARM64.value:
        return Architecture.ARM64
    return Architecture.AMD64
