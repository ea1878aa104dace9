"""
Plugin Models Package

Pydantic models for plugin options, resolved per-function configuration and
the environment of the plugin process.
"""

from .env_vars import PluginEnvVars, get_plugin_env_vars
from .options import (
    Architecture,
    FunctionOverrides,
    GlobalOptions,
    ResolvedFunctionConfig,
    RuntimeFamily,
)

__all__ = [
    "Architecture",
    "FunctionOverrides",
    "GlobalOptions",
    "ResolvedFunctionConfig",
    "RuntimeFamily",
    "PluginEnvVars",
    "get_plugin_env_vars",
]
