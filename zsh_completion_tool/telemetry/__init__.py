"""OpenTelemetry integration for zsh-completion-tool.

Traces tree loading and script generation. Enable with the --telemetry
flag or OTEL_ENABLED=true; without either, every helper is a no-op and
OpenTelemetry is never imported.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from zsh_completion_tool.telemetry.config import ExporterType, TelemetryConfig
from zsh_completion_tool.telemetry.service import TelemetryService, trace_span, traced

__all__ = [
    "ExporterType",
    "TelemetryConfig",
    "TelemetryService",
    "traced",
    "trace_span",
]
