"""
AWS Lambda implementation of the layer registry.

Looks layer versions up with GetLayerVersionByArn. Lambda answers with
AccessDeniedException, not ResourceNotFoundException, when a layer version of
another account does not exist, so both codes mean "not found" here.
"""

from typing import Any, Optional

import boto3
from botocore.exceptions import ClientError

from lambda_otel.exceptions import LayerNotFoundError
from lambda_otel.handlers.utils.observability import logger, tracer

NOT_FOUND_ERROR_CODES = frozenset({'AccessDeniedException', 'ResourceNotFoundException'})


class LambdaLayerRegistry:
    """Layer registry backed by the AWS Lambda API."""

    def __init__(self, region_name: Optional[str] = None, client: Optional[Any] = None) -> None:
        """
        Initialize the registry.

        Args:
            region_name: AWS region name
            client: Preconfigured boto3 Lambda client (for testing)
        """
        self.client = client or boto3.client('lambda', region_name=region_name)

    @tracer.capture_method
    def get_layer_version_arn(self, layer_arn: str) -> str:
        """
        Resolve a layer version ARN through Lambda.

        Args:
            layer_arn: Layer version ARN to look up

        Returns:
            The LayerVersionArn reported by Lambda

        Raises:
            LayerNotFoundError: If the layer version does not exist or is not accessible
            ClientError: For any other Lambda API error
        """
        try:
            response = self.client.get_layer_version_by_arn(Arn=layer_arn)
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code', 'Unknown')
            if error_code in NOT_FOUND_ERROR_CODES:
                logger.error('Layer version not found', extra={'layer_arn': layer_arn, 'error_code': error_code})
                raise LayerNotFoundError(layer_arn) from e
            logger.error('Layer version lookup failed', extra={'layer_arn': layer_arn, 'error_code': error_code})
            raise

        return response['LayerVersionArn']
