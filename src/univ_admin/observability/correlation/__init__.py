"""Observability – request correlation context."""
from univ_admin.observability.correlation.context import CorrelationContext, RequestContext

__all__ = ["CorrelationContext", "RequestContext"]
