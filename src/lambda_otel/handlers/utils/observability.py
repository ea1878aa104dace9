"""
Centralized observability utilities for the Lambda OTEL plugin.

This module provides configured instances of AWS Lambda Powertools for logging
and tracing, shared by the plugin driver, the layer registry and the CLI.
"""

import os
import sys

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.tracing import Tracer

SERVICE_NAME = 'lambda-otel'

# JSON output format on stderr, stdout carries the CLI output
# Level is read from "LOG_LEVEL", service name from "POWERTOOLS_SERVICE_NAME"
logger: Logger = Logger(service=os.getenv("POWERTOOLS_SERVICE_NAME", SERVICE_NAME), stream=sys.stderr)

# Inactive outside of Lambda; disabled explicitly by setting POWERTOOLS_TRACE_DISABLED to "true"
tracer: Tracer = Tracer(service=os.getenv("POWERTOOLS_SERVICE_NAME", SERVICE_NAME))
