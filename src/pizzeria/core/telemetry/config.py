import logging
import structlog

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import SpanProcessor, TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.trace import SpanKind, Status, StatusCode

NOISY_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "aiosqlite")


class FilteringSpanProcessor(SpanProcessor):
    """
    Wraps another processor. Server spans start as OK, and the per-message
    ASGI spans (``http send``/``http receive``) are never exported.
    """

    def __init__(self, inner: SpanProcessor):
        self._inner = inner

    def on_start(self, span, parent_context=None):
        if span.kind is SpanKind.SERVER and span.status.status_code is StatusCode.UNSET:
            span.set_status(Status(StatusCode.OK))
        self._inner.on_start(span, parent_context)

    def on_end(self, span):
        if "asgi.event.type" in (span.attributes or {}):
            return
        self._inner.on_end(span)

    def shutdown(self):
        self._inner.shutdown()

    def force_flush(self, timeout_millis: int = 30000) -> bool:
        return self._inner.force_flush(timeout_millis)


def add_service_name(service_name: str, service_version: str):
    """structlog processor stamping the service and the active span on each event."""

    def processor(logger, method_name, event_dict):
        event_dict.setdefault("service", {"name": service_name, "version": service_version})
        span = trace.get_current_span()
        if span.is_recording():
            span_context = span.get_span_context()
            event_dict["trace_id"] = trace.format_trace_id(span_context.trace_id)
            event_dict["span_id"] = trace.format_span_id(span_context.span_id)
        return event_dict

    return processor


def configure_structlog(service_name: str, service_version: str, log_level: str = "INFO"):
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(format="%(message)s", level=level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            add_service_name(service_name, service_version),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def setup_tracing(service_name: str, service_version: str) -> TracerProvider:
    """Installs the global tracer provider, exporting to the console."""
    provider = TracerProvider(
        resource=Resource.create(
            {"service.name": service_name, "service.version": service_version}
        )
    )
    provider.add_span_processor(
        FilteringSpanProcessor(BatchSpanProcessor(ConsoleSpanExporter()))
    )
    trace.set_tracer_provider(provider)
    return provider
