"""Optional OpenTelemetry tracing for bake engine calls."""

import logging
import os
from contextlib import contextmanager
from typing import Any, Iterator

from .config import settings

logger = logging.getLogger(__name__)

_tracer_ready = False


def init_tracing() -> None:
    """Export spans over OTLP/HTTP when OTEL_EXPORTER_OTLP_ENDPOINT is set."""
    global _tracer_ready

    otlp_endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
    if not otlp_endpoint:
        logger.debug("Tracing disabled: OTEL_EXPORTER_OTLP_ENDPOINT not set")
        return

    try:
        from opentelemetry import trace
        from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import BatchSpanProcessor
    except ImportError as e:
        logger.warning(f"Tracing requested but the 'tracing' extra is not installed: {e}")
        return

    exporter = OTLPSpanExporter(endpoint=f"{otlp_endpoint.rstrip('/')}/v1/traces")
    provider = TracerProvider(resource=Resource.create({"service.name": settings.SERVICE_NAME}))
    provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)

    _tracer_ready = True
    logger.info(f"Tracing enabled: {otlp_endpoint}")


@contextmanager
def trace_span(name: str, attributes: dict[str, Any] | None = None) -> Iterator[None]:
    """Wrap the block in a span when tracing is enabled; otherwise do nothing.

    Exceptions raised inside the block are recorded on the span and re-raised.
    """
    if not _tracer_ready:
        yield
        return

    from opentelemetry import trace

    with trace.get_tracer(__name__).start_as_current_span(name, attributes=attributes):
        yield
