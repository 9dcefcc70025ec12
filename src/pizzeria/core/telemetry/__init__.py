from .config import (
    FilteringSpanProcessor,
    add_service_name,
    configure_structlog,
    setup_tracing,
)

__all__ = [
    "FilteringSpanProcessor",
    "add_service_name",
    "configure_structlog",
    "setup_tracing",
]
