"""
Prometheus metrics for the Talent Portal.

Service timings are fed by the @measure_operation decorator; geocoding and
radius-resolution counters are recorded directly by the search subsystem.
"""

from typing import Optional

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

# Create a custom registry to avoid conflicts with default metrics
REGISTRY = CollectorRegistry()

service_operation_duration_seconds = Histogram(
    "talent_portal_service_operation_duration_seconds",
    "Service operation duration in seconds",
    ["service", "operation"],
    registry=REGISTRY,
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 10.0),
)

service_operations_total = Counter(
    "talent_portal_service_operations_total",
    "Total number of service operations",
    ["service", "operation", "status"],
    registry=REGISTRY,
)

errors_total = Counter(
    "talent_portal_errors_total",
    "Total number of errors",
    ["service", "operation", "error_type"],
    registry=REGISTRY,
)

geocode_lookups_total = Counter(
    "talent_portal_geocode_lookups_total",
    "Geocoding lookups by kind (zip|city) and the source that answered",
    ["kind", "source"],
    registry=REGISTRY,
)

radius_resolution_total = Counter(
    "talent_portal_radius_resolution_total",
    "Radius resolution attempts by strategy and outcome",
    ["strategy", "outcome"],
    registry=REGISTRY,
)

contact_requests_total = Counter(
    "talent_portal_contact_requests_total",
    "Contact requests received, by email dispatch status",
    ["email_status"],
    registry=REGISTRY,
)


class PrometheusMetrics:
    """Thin facade over the module-level collectors."""

    @staticmethod
    def record_service_operation(
        service: str,
        operation: str,
        duration: float,
        status: str = "success",
        error_type: Optional[str] = None,
    ) -> None:
        """
        Record service operation metrics from @measure_operation decorator.

        Args:
            service: Service name (e.g., 'ProfileSearchService')
            operation: Operation/method name (e.g., 'search_profiles')
            duration: Operation duration in seconds
            status: Operation status ('success' or 'error')
            error_type: Type of error if status is 'error'
        """
        service_operation_duration_seconds.labels(service=service, operation=operation).observe(
            duration
        )
        service_operations_total.labels(service=service, operation=operation, status=status).inc()
        if status == "error" and error_type:
            errors_total.labels(service=service, operation=operation, error_type=error_type).inc()

    @staticmethod
    def record_geocode(kind: str, source: str) -> None:
        geocode_lookups_total.labels(kind=kind, source=source).inc()

    @staticmethod
    def record_radius_resolution(strategy: str, outcome: str) -> None:
        radius_resolution_total.labels(strategy=strategy, outcome=outcome).inc()

    @staticmethod
    def record_contact_request(email_status: str) -> None:
        contact_requests_total.labels(email_status=email_status).inc()

    @staticmethod
    def get_metrics() -> bytes:
        return generate_latest(REGISTRY)

    @staticmethod
    def get_content_type() -> str:
        return CONTENT_TYPE_LATEST


prometheus_metrics = PrometheusMetrics()
