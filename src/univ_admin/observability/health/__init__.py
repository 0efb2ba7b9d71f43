"""Observability – readiness health checks."""
from univ_admin.observability.health.builtin import DatabaseHealthCheck, LambdaHealthCheck
from univ_admin.observability.health.check import HealthCheck, HealthStatus
from univ_admin.observability.health.registry import HealthRegistry, HealthReport

__all__ = [
    "DatabaseHealthCheck",
    "HealthCheck",
    "HealthRegistry",
    "HealthReport",
    "HealthStatus",
    "LambdaHealthCheck",
]
