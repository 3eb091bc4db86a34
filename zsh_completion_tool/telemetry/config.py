"""Telemetry configuration.

Loads configuration from environment variables following OpenTelemetry conventions.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum

from zsh_completion_tool import __version__

SERVICE_NAME = "zsh-completion-tool"
DEFAULT_OTLP_ENDPOINT = "http://localhost:4317"

_TRUTHY = ("true", "1", "yes")


class ExporterType(str, Enum):
    """Supported telemetry exporters."""

    CONSOLE = "console"
    OTLP = "otlp"


@dataclass
class TelemetryConfig:
    """Configuration for OpenTelemetry.

    Attributes:
        enabled: Whether telemetry is enabled.
        service_name: Name of the service in traces.
        service_version: Version of the service.
        exporter_type: Console (development) or OTLP (collector).
        otlp_endpoint: OTLP collector endpoint.
        otlp_insecure: Whether to use an insecure OTLP connection.
    """

    enabled: bool = False
    service_name: str = SERVICE_NAME
    service_version: str = field(default_factory=lambda: __version__)
    exporter_type: ExporterType = ExporterType.CONSOLE
    otlp_endpoint: str = DEFAULT_OTLP_ENDPOINT
    otlp_insecure: bool = True

    @classmethod
    def from_env(cls) -> TelemetryConfig:
        """Create configuration from environment variables.

        Environment Variables:
            OTEL_ENABLED: Enable telemetry (default: false)
            OTEL_SERVICE_NAME: Service name (default: zsh-completion-tool)
            OTEL_EXPORTER_TYPE: console or otlp (default: console)
            OTEL_EXPORTER_OTLP_ENDPOINT: OTLP endpoint (default: http://localhost:4317)
            OTEL_EXPORTER_OTLP_INSECURE: Use insecure connection (default: true)

        Returns:
            TelemetryConfig populated from the environment.
        """
        exporter_str = os.environ.get("OTEL_EXPORTER_TYPE", "console").lower()
        try:
            exporter_type = ExporterType(exporter_str)
        except ValueError:
            exporter_type = ExporterType.CONSOLE

        return cls(
            enabled=os.environ.get("OTEL_ENABLED", "false").lower() in _TRUTHY,
            service_name=os.environ.get("OTEL_SERVICE_NAME", SERVICE_NAME),
            exporter_type=exporter_type,
            otlp_endpoint=os.environ.get("OTEL_EXPORTER_OTLP_ENDPOINT", DEFAULT_OTLP_ENDPOINT),
            otlp_insecure=os.environ.get("OTEL_EXPORTER_OTLP_INSECURE", "true").lower()
            in _TRUTHY,
        )
