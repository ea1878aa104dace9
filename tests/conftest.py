"""
Pytest configuration and shared fixtures for the Lambda OTEL plugin.

This module provides the environment setup, a deployment descriptor factory and
a mocked Lambda client used across the unit tests.
"""

import os
from typing import Any, Callable, Dict
from unittest.mock import Mock

import pytest
from botocore.exceptions import ClientError

from lambda_otel.dal.lambda_layer_registry import LambdaLayerRegistry
from lambda_otel.logic.layer_arn import load_layer_versions

# Layer versions the mocked Lambda API knows about
EXISTING_LAYER_ARNS = {
    'arn:aws:lambda:us-east-1:901920570463:layer:aws-otel-nodejs-amd64-ver-2-2-2:1',
    'arn:aws:lambda:us-east-1:901920570463:layer:aws-otel-nodejs-amd64-ver-3-3-3:1',
}


# Test environment configuration
@pytest.fixture(scope="session", autouse=True)
def test_environment():
    """Set up test environment variables."""
    os.environ.update({
        "AWS_REGION": "us-east-1",
        "AWS_DEFAULT_REGION": "us-east-1",
        "AWS_ACCESS_KEY_ID": "test",
        "AWS_SECRET_ACCESS_KEY": "test",
        "POWERTOOLS_SERVICE_NAME": "test-lambda-otel",
        "LOG_LEVEL": "DEBUG",
        "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
    })


@pytest.fixture
def layer_versions() -> Dict[str, str]:
    """Bundled default layer versions."""
    return load_layer_versions()


def client_error(code: str, operation: str = "GetLayerVersionByArn") -> ClientError:
    """Build a botocore ClientError with the given error code."""
    return ClientError({"Error": {"Code": code, "Message": f"{code} raised by test"}}, operation)


@pytest.fixture
def lambda_client() -> Mock:
    """Mock Lambda client answering GetLayerVersionByArn for EXISTING_LAYER_ARNS only."""
    client = Mock()

    def get_layer_version_by_arn(Arn: str) -> Dict[str, Any]:
        if Arn in EXISTING_LAYER_ARNS:
            return {"LayerVersionArn": Arn, "Version": 1}
        raise client_error("AccessDeniedException")

    client.get_layer_version_by_arn.side_effect = get_layer_version_by_arn
    return client


@pytest.fixture
def layer_registry(lambda_client) -> LambdaLayerRegistry:
    """Layer registry backed by the mocked Lambda client."""
    return LambdaLayerRegistry(client=lambda_client)


@pytest.fixture
def region_provider() -> Mock:
    """Region provider pinned to us-east-1."""
    provider = Mock()
    provider.get_region.return_value = "us-east-1"
    return provider


@pytest.fixture
def descriptor_factory() -> Callable[[], Dict[str, Any]]:
    """Factory for a serverless descriptor with two nodejs functions and the plugin enabled."""

    def _create() -> Dict[str, Any]:
        return {
            "service": "otel-example",
            "provider": {
                "name": "aws",
                "runtime": "nodejs12.x",
                "architecture": "x86_64",
            },
            "custom": {
                "lambdaOTEL": {
                    "enable": True,
                },
            },
            "functions": {
                "myFunction": {
                    "handler": "handler.hello",
                },
                "myFunction2": {
                    "handler": "handler.hello",
                },
            },
        }

    return _create


@pytest.fixture
def descriptor(descriptor_factory) -> Dict[str, Any]:
    """A fresh deployment descriptor."""
    return descriptor_factory()
