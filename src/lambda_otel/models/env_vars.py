"""
Environment variable model for the plugin process.

The plugin runs inside a deployment tool rather than a Lambda function; the
environment only supplies the fallback deployment region.
"""

from typing import Annotated, Optional

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field

DEFAULT_REGION = 'us-east-1'


class PluginEnvVars(BaseModel):
    """Environment variables consumed by the plugin and its CLI."""

    AWS_REGION: Annotated[Optional[str], Field(
        description='AWS region used to build layer ARNs',
    )] = None

    # Honoured by the AWS CLI and boto3 when AWS_REGION is unset
    AWS_DEFAULT_REGION: Annotated[Optional[str], Field(
        description='Fallback AWS region',
    )] = None

    @property
    def region(self) -> str:
        """Region from the environment, the framework default when unset."""
        return self.AWS_REGION or self.AWS_DEFAULT_REGION or DEFAULT_REGION


def get_plugin_env_vars() -> PluginEnvVars:
    """
    Get typed environment variables for the plugin.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=PluginEnvVars)
