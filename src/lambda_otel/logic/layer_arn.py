"""
Construction of ADOT Lambda layer ARNs.

Layers are published by the AWS Observability account in every region as
aws-otel-<family>-<arch>-ver-<version>. Default versions per family ship with
the plugin in layer_versions.json; explicitly requested versions are looked up
in the layer registry before use.
"""

import json
from pathlib import Path
from typing import Dict, Mapping, Optional

from lambda_otel.dal import LayerRegistry, RegionProvider
from lambda_otel.handlers.utils.observability import logger
from lambda_otel.models.options import Architecture, RuntimeFamily

LAYER_ACCOUNT_ID = '901920570463'
LAYER_VERSIONS_FILE = Path(__file__).parent / 'layer_versions.json'


def load_layer_versions(path: Path = LAYER_VERSIONS_FILE) -> Dict[str, str]:
    """Load the default layer version of each runtime family."""
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def format_layer_arn(region: str, family: RuntimeFamily, architecture: Architecture, version: str) -> str:
    return (
        f'arn:aws:lambda:{region}:{LAYER_ACCOUNT_ID}:layer:'
        f'aws-otel-{family.value}-{architecture.value}-ver-{version}:1'
    )


class LayerArnBuilder:
    """Builds the layer ARN a function should reference."""

    def __init__(
        self,
        region_provider: RegionProvider,
        layer_registry: LayerRegistry,
        layer_versions: Optional[Mapping[str, str]] = None,
    ) -> None:
        """
        Initialize the builder.

        Args:
            region_provider: Source of the deployment region
            layer_registry: Registry used to confirm explicitly requested versions
            layer_versions: Default version per runtime family, bundled table when omitted
        """
        self.region_provider = region_provider
        self.layer_registry = layer_registry
        self.layer_versions = dict(layer_versions) if layer_versions is not None else load_layer_versions()

    def build(self, family: RuntimeFamily, architecture: Architecture, version: Optional[str] = None) -> str:
        """
        Build the layer ARN for a runtime family and architecture.

        Args:
            family: Runtime family of the function
            architecture: Effective architecture of the function
            version: Explicit layer version, the bundled default when omitted

        Returns:
            Layer version ARN

        Raises:
            LayerNotFoundError: If an explicit version does not exist
            botocore.exceptions.ClientError: If the registry lookup fails otherwise
        """
        layer_arn = format_layer_arn(
            self.region_provider.get_region(),
            family,
            architecture,
            version or self.layer_versions[family.value],
        )

        # bundled defaults are trusted as published
        if not version:
            return layer_arn

        logger.debug('Checking requested layer version', extra={'layer_arn': layer_arn})
        return self.layer_registry.get_layer_version_arn(layer_arn)
