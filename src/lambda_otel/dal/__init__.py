"""
External collaborators of the plugin.

The plugin only needs two things from the outside world: the region it deploys
to and a way to confirm that a requested layer version exists. Both are
expressed as protocols so the host (or a test) can supply its own.
"""

from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class RegionProvider(Protocol):
    """Protocol for the source of the deployment region."""

    def get_region(self) -> str:
        """Return the region the service deploys to."""
        ...


@runtime_checkable
class LayerRegistry(Protocol):
    """Protocol for layer version lookups."""

    def get_layer_version_arn(self, layer_arn: str) -> str:
        """
        Return the canonical ARN of an existing layer version.

        Raises LayerNotFoundError if the layer version does not exist or is not
        accessible; any other fault propagates unchanged.
        """
        ...


class ProviderRegion:
    """
    Region resolved the way the framework does it.

    An explicit region (the --region option) wins over provider.region, which
    wins over the environment.
    """

    def __init__(self, provider: Optional[Mapping[str, Any]], region: Optional[str] = None) -> None:
        self.provider = provider if isinstance(provider, Mapping) else {}
        self.region = region

    def get_region(self) -> str:
        if self.region:
            return self.region
        if self.provider.get('region'):
            return self.provider['region']

        # Import here to avoid reading the environment at module import
        from lambda_otel.models.env_vars import get_plugin_env_vars

        return get_plugin_env_vars().region


def get_layer_registry(region: str) -> LayerRegistry:
    """
    Factory function to get the layer registry for a region.

    Args:
        region: AWS region the layers are looked up in

    Returns:
        Layer registry instance
    """
    # Import here to avoid circular imports
    from lambda_otel.dal.lambda_layer_registry import LambdaLayerRegistry

    return LambdaLayerRegistry(region_name=region)


__all__ = [
    'RegionProvider',
    'LayerRegistry',
    'ProviderRegion',
    'get_layer_registry',
]
