"""
Plugin option models for the lambdaOTEL custom section and function overrides.

Options are declared with strict types so that a YAML "true" string or an
integer version never slips through as a valid value.
"""

from enum import Enum
from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator


class RuntimeFamily(str, Enum):
    """Runtime families the ADOT Lambda layers are published for."""

    NODEJS = 'nodejs'
    JAVA_WRAPPER = 'java-wrapper'
    PYTHON = 'python'
    COLLECTOR = 'collector'


class Architecture(str, Enum):
    """Layer architectures."""

    AMD64 = 'amd64'
    ARM64 = 'arm64'


def _reject_null(value: Any) -> Any:
    # None marks an absent key; a key written as null is a wrong type
    if value is None:
        raise ValueError('null is not a valid value')
    return value


class GlobalOptions(BaseModel):
    """Options read from custom.lambdaOTEL, applied to every function."""

    model_config = ConfigDict(frozen=True, extra='ignore')

    enable: Annotated[StrictBool, Field(
        description='Instrument functions that do not set otelEnable',
    )] = False

    version: Annotated[Optional[StrictStr], Field(
        description='Layer version used when a function does not set otelVersion',
    )] = None

    xray_policy: Annotated[StrictBool, Field(
        alias='xrayPolicy',
        description='Attach the AWSXRayDaemonWriteAccess managed policy',
    )] = True

    @field_validator('version', mode='before')
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        return _reject_null(value)


class FunctionOverrides(BaseModel):
    """Per-function plugin keys declared next to handler, runtime, etc."""

    model_config = ConfigDict(frozen=True, extra='ignore')

    otel_enable: Annotated[Optional[StrictBool], Field(alias='otelEnable')] = None
    otel_version: Annotated[Optional[StrictStr], Field(alias='otelVersion')] = None

    @field_validator('otel_enable', 'otel_version', mode='before')
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        return _reject_null(value)


class ResolvedFunctionConfig(BaseModel):
    """Effective configuration of a single function."""

    model_config = ConfigDict(frozen=True)

    otel_enable: bool
    otel_version: Optional[str] = None
