#!/usr/bin/env python3
"""
Command-line entry point: instrument a serverless.yml outside the framework.

Reads a YAML or JSON deployment descriptor, runs the plugin against it and
writes the instrumented descriptor back out.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from botocore.exceptions import BotoCoreError, ClientError

from lambda_otel.dal import ProviderRegion, get_layer_registry
from lambda_otel.exceptions import LambdaOtelError
from lambda_otel.handlers.plugin import LambdaOtelPlugin
from lambda_otel.handlers.utils.observability import logger


def load_descriptor(path: Path) -> Dict[str, Any]:
    """Load a deployment descriptor; JSON is read as YAML."""
    with open(path, 'r', encoding='utf-8') as f:
        descriptor = yaml.safe_load(f)
    if not isinstance(descriptor, dict):
        raise ValueError(f'{path} does not contain a deployment descriptor')
    return descriptor


def dump_descriptor(descriptor: Dict[str, Any], output_format: str) -> str:
    if output_format == 'json':
        return json.dumps(descriptor, indent=2, ensure_ascii=False) + '\n'
    return yaml.dump(descriptor, default_flow_style=False, allow_unicode=True, sort_keys=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='lambda-otel',
        description='Attach the AWS Distro for OpenTelemetry layer to serverless functions'
    )
    parser.add_argument(
        'descriptor',
        type=Path,
        help='Path to serverless.yml (or a JSON descriptor)'
    )
    parser.add_argument(
        '--region',
        help='Deployment region, overrides provider.region (default: AWS_REGION)'
    )
    parser.add_argument(
        '--format',
        choices=['json', 'yaml'],
        default='yaml',
        help='Output format (default: yaml)'
    )
    parser.add_argument(
        '--output', '-o',
        type=Path,
        help='Output file (default: stdout)'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function for the lambda-otel command."""
    args = build_parser().parse_args(argv)

    try:
        descriptor = load_descriptor(args.descriptor)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f'Error reading {args.descriptor}: {e}', file=sys.stderr)
        return 1

    region_provider = ProviderRegion(descriptor.get('provider'), region=args.region)
    region = region_provider.get_region()
    plugin = LambdaOtelPlugin(
        descriptor,
        region_provider=region_provider,
        layer_registry=get_layer_registry(region),
    )

    try:
        plugin.instrument_functions()
    except LambdaOtelError as e:
        logger.error('Instrumentation failed', extra={'error': e.to_dict()})
        print(f'Error: {e.message}', file=sys.stderr)
        return 1
    except (ClientError, BotoCoreError) as e:
        logger.exception('Layer lookup failed')
        print(f'Error: {e}', file=sys.stderr)
        return 1

    output = dump_descriptor(descriptor, args.format)
    if args.output:
        args.output.write_text(output, encoding='utf-8')
    else:
        sys.stdout.write(output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
