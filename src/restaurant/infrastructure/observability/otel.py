from __future__ import annotations

import logging
import os

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.propagate import set_global_textmap
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import ParentBased, TraceIdRatioBased
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator

_OTEL_CONFIGURED = False
logger = logging.getLogger(__name__)


def _sampling_ratio() -> float:
    raw_value = os.getenv("OTEL_TRACES_SAMPLER_RATIO", "1.0")
    try:
        ratio = float(raw_value)
    except ValueError:
        logger.warning("otel_invalid_sampler_ratio")
        return 1.0
    return min(max(ratio, 0.0), 1.0)


def _build_provider() -> TracerProvider:
    service_name = os.getenv("OTEL_SERVICE_NAME", "restaurant-orders")
    provider = TracerProvider(
        resource=Resource.create({SERVICE_NAME: service_name}),
        sampler=ParentBased(TraceIdRatioBased(_sampling_ratio())),
    )

    endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
    if endpoint:
        try:
            exporter = OTLPSpanExporter(
                endpoint=endpoint,
                insecure=endpoint.startswith("http://"),
            )
            provider.add_span_processor(BatchSpanProcessor(exporter))
        except Exception:
            logger.exception("otel_exporter_setup_failed")
    return provider


def configure_otel(app: FastAPI) -> None:
    """Trace inbound requests and every statement sent through SQLAlchemy."""
    global _OTEL_CONFIGURED
    if _OTEL_CONFIGURED:
        return

    provider = _build_provider()
    trace.set_tracer_provider(provider)
    set_global_textmap(TraceContextTextMapPropagator())
    FastAPIInstrumentor.instrument_app(app, tracer_provider=provider)
    SQLAlchemyInstrumentor().instrument(tracer_provider=provider)
    _OTEL_CONFIGURED = True

