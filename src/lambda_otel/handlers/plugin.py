"""
Serverless Framework plugin attaching the ADOT Lambda layer.

The plugin hooks into packaging and, for every function with instrumentation
enabled, appends the matching aws-otel layer, sets the exec wrapper environment
variable and finally grants X-Ray write access to the service role.
"""

from typing import Any, Callable, Dict, Mapping, MutableMapping, Optional

from lambda_otel.dal import LayerRegistry, RegionProvider
from lambda_otel.exceptions import TypeConfigError
from lambda_otel.handlers.utils.observability import logger, tracer
from lambda_otel.logic.config_resolver import CUSTOM_SECTION, resolve_function_config, resolve_global_options
from lambda_otel.logic.layer_arn import LayerArnBuilder
from lambda_otel.logic.runtime import resolve_architecture, resolve_runtime
from lambda_otel.models.options import RuntimeFamily

XRAY_DAEMON_MANAGED_POLICY = 'arn:aws:iam::aws:policy/AWSXRayDaemonWriteAccess'
EXEC_WRAPPER_ENV = 'AWS_LAMBDA_EXEC_WRAPPER'
PACKAGE_HOOK = 'before:package:setupProviderConfiguration'

# Families without an entry run the collector extension only
EXEC_WRAPPERS: Dict[RuntimeFamily, str] = {
    RuntimeFamily.NODEJS: '/opt/otel-handler',
    RuntimeFamily.JAVA_WRAPPER: '/opt/otel-handler',
    RuntimeFamily.PYTHON: '/opt/otel-instrument',
}

FUNCTION_PROPERTIES_SCHEMA = {
    'properties': {
        'otelEnable': {'type': 'boolean'},
        'otelVersion': {'type': 'string'},
    },
}

CUSTOM_PROPERTIES_SCHEMA = {
    'properties': {
        CUSTOM_SECTION: {
            'type': 'object',
            'properties': {
                'enable': {'type': 'boolean'},
                'version': {'type': 'string'},
                'xrayPolicy': {'type': 'boolean'},
            },
        },
    },
}


def supports_schema_validation(schema_handler: Any) -> bool:
    """Check whether the host exposes the schema extension methods."""
    return (
        schema_handler is not None
        and callable(getattr(schema_handler, 'define_function_properties', None))
        and callable(getattr(schema_handler, 'define_custom_properties', None))
    )


class LambdaOtelPlugin:
    """
    Instruments the functions of a deployment descriptor with ADOT.

    The descriptor is owned by the host and mutated in place; the plugin is its
    only writer while instrument_functions runs. Runs are not idempotent:
    instrumenting the same descriptor twice appends layers and the managed
    policy twice.
    """

    def __init__(
        self,
        descriptor: MutableMapping[str, Any],
        region_provider: RegionProvider,
        layer_registry: LayerRegistry,
        schema_handler: Optional[Any] = None,
        layer_versions: Optional[Mapping[str, str]] = None,
    ) -> None:
        """
        Initialize the plugin.

        Args:
            descriptor: Deployment descriptor with provider, custom and functions sections
            region_provider: Source of the deployment region
            layer_registry: Registry confirming explicitly requested layer versions
            schema_handler: Host config schema handler, if the host supports validation
            layer_versions: Default layer version per runtime family
        """
        self.descriptor = descriptor
        self.layer_arn_builder = LayerArnBuilder(region_provider, layer_registry, layer_versions)
        self.hooks: Dict[str, Callable[[], None]] = {
            PACKAGE_HOOK: self.instrument_functions,
        }

        if supports_schema_validation(schema_handler):
            schema_handler.define_function_properties('aws', FUNCTION_PROPERTIES_SCHEMA)
            schema_handler.define_custom_properties(CUSTOM_PROPERTIES_SCHEMA)

    @property
    def provider(self) -> MutableMapping[str, Any]:
        if not self.descriptor.get('provider'):
            self.descriptor['provider'] = {}
        return self.descriptor['provider']

    @tracer.capture_method
    def instrument_functions(self) -> None:
        """
        Attach the ADOT layer to every enabled function.

        Raises:
            TypeConfigError: If a plugin option or the provider section has the wrong type
            LayerNotFoundError: If an explicitly requested layer version does not exist
            botocore.exceptions.ClientError: If a layer version lookup fails otherwise
        """
        functions = self.descriptor.get('functions')
        if not isinstance(functions, Mapping):
            return

        provider = self.descriptor.get('provider')
        if provider is not None and not isinstance(provider, Mapping):
            raise TypeConfigError('', 'provider', 'object')

        options = resolve_global_options(self.descriptor.get('custom'))

        instrumented = 0
        for function_name, function in functions.items():
            config = resolve_function_config(function_name, function, options)
            if not config.otel_enable:
                logger.debug('Instrumentation disabled', extra={'function_name': function_name})
                continue

            architecture = resolve_architecture(function, provider)
            family = resolve_runtime(function, provider)

            layer_arn = self.layer_arn_builder.build(family, architecture, config.otel_version)
            function['layers'] = function.get('layers') or []
            function['layers'].append(layer_arn)

            wrapper = EXEC_WRAPPERS.get(family)
            if wrapper:
                function['environment'] = function.get('environment') or {}
                function['environment'][EXEC_WRAPPER_ENV] = wrapper

            instrumented += 1
            logger.info(
                'Function instrumented',
                extra={
                    'function_name': function_name,
                    'layer_arn': layer_arn,
                    'runtime_family': family.value,
                    'architecture': architecture.value,
                },
            )

        if instrumented and options.xray_policy:
            policies = self.provider.get('iamManagedPolicies') or []
            policies.append(XRAY_DAEMON_MANAGED_POLICY)
            self.provider['iamManagedPolicies'] = policies
            logger.info('X-Ray managed policy attached', extra={'policy_arn': XRAY_DAEMON_MANAGED_POLICY})
