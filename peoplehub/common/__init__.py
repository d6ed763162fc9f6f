"""Common module — shared utilities for PeopleHub."""

from peoplehub.common.audit import AuditTrail, TimestampMixin, create_audit_entry
from peoplehub.common.exceptions import (
    AppException,
    BadRequestException,
    ConflictError,
    NotFoundException,
    ValidationException,
    register_exception_handlers,
)
from peoplehub.common.filters import apply_filters, apply_search
from peoplehub.common.formatters import (
    format_currency,
    is_valid_currency,
    is_valid_iso_date,
    parse_currency,
    parse_iso_date,
)
from peoplehub.common.pagination import (
    Page,
    PaginationMeta,
    PaginationParams,
    paginate,
)

__all__ = [
    # Audit
    "AuditTrail",
    "TimestampMixin",
    "create_audit_entry",
    # Exceptions
    "AppException",
    "BadRequestException",
    "ConflictError",
    "NotFoundException",
    "ValidationException",
    "register_exception_handlers",
    # Filters
    "apply_filters",
    "apply_search",
    # Formatters
    "format_currency",
    "is_valid_currency",
    "is_valid_iso_date",
    "parse_currency",
    "parse_iso_date",
    # Pagination
    "Page",
    "PaginationMeta",
    "PaginationParams",
    "paginate",
]
