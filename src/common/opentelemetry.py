import logging
from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource, SERVICE_NAME, SERVICE_VERSION
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor  # type: ignore

logger = logging.getLogger(__name__)

TRACER_NAME = "mission_control"


def setup_opentelemetry(
    service_name: str,
    app: FastAPI,
    service_version: str | None = None,
    exporter_endpoint: str | None = None,
) -> None:
    logger.info("Setting up instrumentation...")

    attributes = {SERVICE_NAME: service_name}
    if service_version:
        attributes[SERVICE_VERSION] = service_version
    trace_provider = TracerProvider(resource=Resource(attributes=attributes))
    trace.set_tracer_provider(trace_provider)

    # Without an explicit endpoint the exporter honours OTEL_EXPORTER_OTLP_* env vars
    exporter = (
        OTLPSpanExporter(endpoint=exporter_endpoint)
        if exporter_endpoint
        else OTLPSpanExporter()
    )
    trace_provider.add_span_processor(BatchSpanProcessor(exporter))

    FastAPIInstrumentor.instrument_app(app)  # type: ignore
    logger.info("FastAPI Instrumentation enabled.")


def get_tracer() -> trace.Tracer:
    return trace.get_tracer(TRACER_NAME)
