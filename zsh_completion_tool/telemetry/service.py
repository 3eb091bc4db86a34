"""TelemetryService singleton for OpenTelemetry.

Sets up tracing and log export for one CLI run and flushes them on exit.
Generating a completion script takes milliseconds, so only traces and logs
are exported; there are no long-running metrics worth collecting.

``trace_span`` and ``traced`` wrap a block or a function in a span and
call straight through while telemetry is disabled.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from contextlib import contextmanager
from functools import wraps
from typing import TYPE_CHECKING, Any, TypeVar

from zsh_completion_tool.telemetry.config import ExporterType, TelemetryConfig

if TYPE_CHECKING:
    from opentelemetry.sdk._logs.export import LogExporter
    from opentelemetry.sdk.trace.export import SpanExporter
    from opentelemetry.trace import Span, Tracer

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def create_span_exporter(config: TelemetryConfig) -> SpanExporter:
    """Create the span exporter selected by the configuration.

    Raises:
        ImportError: If the OTLP exporter is selected but not installed.
    """
    if config.exporter_type == ExporterType.OTLP:
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (
            OTLPSpanExporter,
        )

        return OTLPSpanExporter(endpoint=config.otlp_endpoint, insecure=config.otlp_insecure)

    from opentelemetry.sdk.trace.export import ConsoleSpanExporter

    return ConsoleSpanExporter()


def create_log_exporter(config: TelemetryConfig) -> LogExporter:
    """Create the log exporter selected by the configuration.

    Raises:
        ImportError: If the OTLP exporter is selected but not installed.
    """
    if config.exporter_type == ExporterType.OTLP:
        from opentelemetry.exporter.otlp.proto.grpc._log_exporter import (
            OTLPLogExporter,
        )

        return OTLPLogExporter(  # type: ignore[return-value]
            endpoint=config.otlp_endpoint, insecure=config.otlp_insecure
        )

    from opentelemetry.sdk._logs.export import ConsoleLogExporter

    return ConsoleLogExporter()  # type: ignore[return-value]


class TelemetryService:
    """Singleton service for OpenTelemetry instrumentation.

    Example:
        >>> TelemetryService.get_instance().initialize(TelemetryConfig.from_env())
        >>> tracer = TelemetryService.get_instance().tracer
        >>> TelemetryService.get_instance().shutdown()
    """

    _instance: TelemetryService | None = None
    _initialized: bool = False

    def __new__(cls) -> TelemetryService:
        """Create singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def get_instance(cls) -> TelemetryService:
        """Get the singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def initialize(self, config: TelemetryConfig) -> None:
        """Initialize telemetry with configuration.

        Safe to call multiple times; subsequent calls are no-ops. Missing
        OpenTelemetry packages disable telemetry with a warning.

        Args:
            config: Telemetry configuration.
        """
        if self._initialized:
            logger.debug("Telemetry already initialized, skipping")
            return

        self._config = config

        if not config.enabled:
            logger.debug("Telemetry disabled, using no-op providers")
            self._initialized = True
            return

        try:
            self._setup_providers(config)
            logger.info(
                "Telemetry initialized: service=%s, exporter=%s",
                config.service_name,
                config.exporter_type.value,
            )
        except ImportError as e:
            logger.warning("OpenTelemetry dependencies not installed, telemetry disabled: %s", e)
            self._config = TelemetryConfig(enabled=False)
        self._initialized = True

    def _setup_providers(self, config: TelemetryConfig) -> None:
        """Set up the tracer and logger providers."""
        from opentelemetry import _logs, trace
        from opentelemetry.sdk._logs import LoggerProvider, LoggingHandler
        from opentelemetry.sdk._logs.export import BatchLogRecordProcessor
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import BatchSpanProcessor

        resource = Resource.create(
            {
                "service.name": config.service_name,
                "service.version": config.service_version,
            }
        )

        tracer_provider = TracerProvider(resource=resource)
        tracer_provider.add_span_processor(BatchSpanProcessor(create_span_exporter(config)))
        trace.set_tracer_provider(tracer_provider)
        self._tracer_provider = tracer_provider

        logger_provider = LoggerProvider(resource=resource)
        logger_provider.add_log_record_processor(
            BatchLogRecordProcessor(create_log_exporter(config))
        )
        _logs.set_logger_provider(logger_provider)
        self._logger_provider = logger_provider

        # Forward Python logging records as OpenTelemetry logs
        logging.getLogger().addHandler(
            LoggingHandler(level=logging.NOTSET, logger_provider=logger_provider)
        )

    @property
    def tracer(self) -> Tracer:
        """Tracer for creating spans."""
        from opentelemetry import trace

        if not self._initialized or not getattr(self, "_config", None):
            return trace.get_tracer(__name__)

        return trace.get_tracer(self._config.service_name, self._config.service_version)

    @property
    def is_enabled(self) -> bool:
        """True if telemetry is enabled and initialized."""
        return (
            self._initialized
            and getattr(self, "_config", None) is not None
            and self._config.enabled
        )

    def shutdown(self) -> None:
        """Flush and shut down telemetry providers.

        Critical for a CLI: spans still batched at exit are lost otherwise.
        """
        if not self._initialized:
            return

        for attr in ("_tracer_provider", "_logger_provider"):
            provider = getattr(self, attr, None)
            if provider is None:
                continue
            try:
                provider.force_flush()
                provider.shutdown()
                logger.debug("%s shut down", attr.strip("_").replace("_", " "))
            except Exception as e:
                logger.warning("Error shutting down %s: %s", attr.strip("_"), e)
            delattr(self, attr)

        logger.debug("Telemetry shutdown complete")

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance.

        Primarily for testing purposes.
        """
        if cls._instance is not None:
            cls._instance.shutdown()
        cls._instance = None
        cls._initialized = False


@contextmanager
def trace_span(
    name: str,
    attributes: dict[str, Any] | None = None,
) -> Generator[Span | None, None, None]:
    """Trace a code block; yields None when telemetry is disabled.

    Exceptions leaving the block are recorded on the span, which is then
    marked as failed, before they propagate.

    Example:
        >>> with trace_span("generate_zsh", {"command.name": "tool"}) as span:
        ...     if span:
        ...         span.set_attribute("script.lines", 42)
    """
    service = TelemetryService.get_instance()
    if not service.is_enabled:
        yield None
        return

    with service.tracer.start_as_current_span(
        name,
        attributes=attributes,
        record_exception=True,
        set_status_on_exception=True,
    ) as span:
        yield span


def traced(
    name: str | None = None,
    attributes: dict[str, Any] | None = None,
) -> Callable[[F], F]:
    """Run the decorated function inside ``trace_span``.

    Args:
        name: Span name. Defaults to the function name.
        attributes: Additional span attributes.
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with trace_span(name or func.__name__, attributes):
                return func(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator
