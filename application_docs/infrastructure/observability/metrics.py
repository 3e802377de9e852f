"""Prometheus metrics for document generation outcomes and latency"""

from prometheus_client import Counter, Histogram
from application_docs.domain.generator import GenerationResult

# Generation metrics
documents_generated_counter = Counter(
    "documents_generated_total",
    "PDF documents generated",
    ["state"],  # Pending | Activated | InReview
)

generation_failures_counter = Counter(
    "document_generation_failures_total",
    "Generation calls that produced no document",
    ["reason"],  # not_found | lookup_failure | unsupported_state | precondition_violation | rendering_failure
)

render_duration_histogram = Histogram(
    "document_render_duration_seconds",
    "End-to-end document generation time",
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_generation(result: GenerationResult, duration_seconds: float) -> None:
    """Record outcome metrics so failure causes stay distinguishable"""
    render_duration_histogram.observe(duration_seconds)

    if result.ok:
        documents_generated_counter.labels(state=str(result.state)).inc()
    else:
        reason = result.failure.value if result.failure else "unknown"
        generation_failures_counter.labels(reason=reason).inc()
