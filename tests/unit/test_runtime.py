"""
Unit tests for runtime family and architecture resolution.
"""

import pytest

from lambda_otel.logic.runtime import classify_runtime, resolve_architecture, resolve_runtime
from lambda_otel.models.options import Architecture, RuntimeFamily


class TestClassifyRuntime:
    """Test cases for classify_runtime."""

    @pytest.mark.parametrize(
        "runtime,family",
        [
            ("nodejs12.x", RuntimeFamily.NODEJS),
            ("nodejs18.x", RuntimeFamily.NODEJS),
            ("java11", RuntimeFamily.JAVA_WRAPPER),
            ("java8.al2", RuntimeFamily.JAVA_WRAPPER),
            ("python3.9", RuntimeFamily.PYTHON),
            ("python2.7", RuntimeFamily.PYTHON),
            ("go1.x", RuntimeFamily.COLLECTOR),
            ("dotnet6", RuntimeFamily.COLLECTOR),
            ("provided.al2", RuntimeFamily.COLLECTOR),
            ("", RuntimeFamily.COLLECTOR),
            (None, RuntimeFamily.COLLECTOR),
        ],
    )
    def test_families(self, runtime, family):
        """Test prefix classification."""
        assert classify_runtime(runtime) is family


class TestResolveRuntime:
    """Test cases for resolve_runtime."""

    def test_function_runtime_wins(self):
        """Test that the function runtime overrides the provider."""
        assert resolve_runtime({"runtime": "python3.9"}, {"runtime": "nodejs18.x"}) is RuntimeFamily.PYTHON

    def test_provider_runtime(self):
        """Test the provider runtime as fallback."""
        assert resolve_runtime({}, {"runtime": "java11"}) is RuntimeFamily.JAVA_WRAPPER

    def test_framework_default(self):
        """Test that nothing declared means nodejs12.x."""
        assert resolve_runtime({}, {}) is RuntimeFamily.NODEJS
        assert resolve_runtime({}, None) is RuntimeFamily.NODEJS


class TestResolveArchitecture:
    """Test cases for resolve_architecture."""

    @pytest.mark.parametrize(
        "function_arch,provider_arch,expected",
        [
            ("arm64", None, Architecture.ARM64),
            ("arm64", "x86_64", Architecture.ARM64),
            (None, "arm64", Architecture.ARM64),
            ("x86_64", "arm64", Architecture.AMD64),
            ("amd64", "arm64", Architecture.AMD64),
            (None, "x86_64", Architecture.AMD64),
            (None, None, Architecture.AMD64),
        ],
    )
    def test_architecture(self, function_arch, provider_arch, expected):
        """Test function and provider architecture combinations."""
        function = {"architecture": function_arch} if function_arch else {}
        provider = {"architecture": provider_arch} if provider_arch else {}

        assert resolve_architecture(function, provider) is expected
