"""
Resolution of plugin options from the deployment descriptor.

Global options come from custom.lambdaOTEL and are resolved once per run;
function options are the function's own otelEnable/otelVersion keys merged
over the global ones. Type errors reported by pydantic are translated into
TypeConfigError naming the offending key.
"""

from typing import Any, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from lambda_otel.exceptions import TypeConfigError
from lambda_otel.models.options import FunctionOverrides, GlobalOptions, ResolvedFunctionConfig

CUSTOM_SECTION = 'lambdaOTEL'
GLOBAL_SCOPE = f'custom.{CUSTOM_SECTION}'

# JSON schema type names, keyed by the option name as written in serverless.yml
EXPECTED_TYPES = {
    'enable': 'boolean',
    'version': 'string',
    'xrayPolicy': 'boolean',
    'otelEnable': 'boolean',
    'otelVersion': 'string',
}

M = TypeVar('M', bound=BaseModel)


def _validate(model: Type[M], data: Any, scope: str) -> M:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        error = e.errors()[0]
        if not error['loc']:
            # the section itself is not a mapping
            parent, _, key = scope.rpartition('.')
            raise TypeConfigError(parent, key, 'object') from e
        key = str(error['loc'][0])
        raise TypeConfigError(scope, key, EXPECTED_TYPES.get(key, 'valid')) from e


def resolve_global_options(custom: Optional[Mapping[str, Any]]) -> GlobalOptions:
    """
    Resolve the plugin-wide options from the custom section.

    Args:
        custom: The descriptor's custom section, possibly absent

    Returns:
        Validated options, defaults applied for missing keys

    Raises:
        TypeConfigError: If a recognized option has the wrong type
    """
    section = custom.get(CUSTOM_SECTION) if isinstance(custom, Mapping) else None
    if section is None:
        return GlobalOptions()
    return _validate(GlobalOptions, section, GLOBAL_SCOPE)


def resolve_function_config(
    function_name: str,
    function: Mapping[str, Any],
    options: GlobalOptions,
) -> ResolvedFunctionConfig:
    """
    Merge a function's overrides over the global options.

    Args:
        function_name: Name of the function in the descriptor
        function: The function descriptor
        options: Global options resolved for this run

    Returns:
        Effective enable flag and layer version for the function

    Raises:
        TypeConfigError: If otelEnable or otelVersion has the wrong type
    """
    overrides = _validate(FunctionOverrides, function, f'functions.{function_name}')

    otel_enable = options.enable if overrides.otel_enable is None else overrides.otel_enable
    otel_version = options.version if overrides.otel_version is None else overrides.otel_version

    return ResolvedFunctionConfig(otel_enable=otel_enable, otel_version=otel_version)
