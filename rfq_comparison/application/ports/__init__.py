"""Application ports (interfaces) for the RFQ comparison service."""

from .audit_sink import AuditEvent, AuditSinkPort
from .comparison_repository import (
    ComparisonRepositoryPort,
    ListCriteria,
    ListResult,
)

__all__ = [
    "AuditEvent",
    "AuditSinkPort",
    "ComparisonRepositoryPort",
    "ListCriteria",
    "ListResult",
]
