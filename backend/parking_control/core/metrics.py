"""Prometheus Metrics.

This module defines and exports Prometheus metrics for monitoring the application.
Metrics include counters, gauges and histograms for tracking:
- API requests and responses
- Parking spot writes and uniqueness conflicts
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Gauge,
    Histogram,
    Info,
    generate_latest,
)

# ========================================
# Parking Spot Metrics
# ========================================

parking_spots_created_total = Counter(
    'parking_spots_created_total',
    'Total number of parking spots created'
)

parking_spots_updated_total = Counter(
    'parking_spots_updated_total',
    'Total number of parking spots updated'
)

parking_spots_deleted_total = Counter(
    'parking_spots_deleted_total',
    'Total number of parking spots deleted'
)

parking_spot_conflicts_total = Counter(
    'parking_spot_conflicts_total',
    'Total number of writes rejected by a uniqueness invariant',
    ['field']
)

# ========================================
# API Metrics
# ========================================

http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status_code']
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint'],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0)
)

http_requests_in_progress = Gauge(
    'http_requests_in_progress',
    'Number of HTTP requests currently being processed',
    ['method', 'endpoint']
)

# ========================================
# System Info
# ========================================

app_info = Info(
    'parking_control_app',
    'Application information'
)


def set_app_info(version: str, environment: str):
    """Set application information.

    Args:
        version: Application version
        environment: Environment (development, staging, production)
    """
    app_info.info({
        'version': version,
        'environment': environment
    })


def record_conflict(field: str | None):
    """Count a write rejected by a uniqueness invariant."""
    parking_spot_conflicts_total.labels(field=field or 'unknown').inc()


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format.

    Returns:
        Metrics data in Prometheus text format
    """
    return generate_latest()


def get_content_type() -> str:
    """Get Prometheus content type."""
    return CONTENT_TYPE_LATEST
