"""Error Hierarchy — typed, categorized exceptions for every customer/image failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; storage/internal errors (500-level) are critical
    - to_response() produces the REST envelope consumed by api/error_handlers.py
    - ValidationError always carries the full list of messages, never just the first

Design Decisions:
    - Single hierarchy with CustomerImagesError base: the FastAPI global handler catches all
    - ErrorContext as dataclass: observability fields without coupling to the logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from customer_images.core.domain_types import MAX_IMAGES_PER_CUSTOMER


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    STORAGE = "storage"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    customer_id: str | None = None
    image_id: str | None = None
    storage_key: str | None = None
    debug_info: dict[str, Any] | None = None


class CustomerImagesError(Exception):
    """Base exception for all customer/image errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    @property
    def details(self) -> list[str]:
        return []

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "details": self.details,
                "context": {
                    "customer_id": self.context.customer_id,
                    "image_id": self.context.image_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(CustomerImagesError):
    """One or more structural or business-rule violations."""

    def __init__(
        self,
        errors: list[str] | str,
        context: ErrorContext | None = None,
        code: str = "VALIDATION_ERROR",
        category: ErrorCategory = ErrorCategory.VALIDATION,
    ):
        if isinstance(errors, str):
            errors = [errors]
        super().__init__(
            ", ".join(errors), code, category,
            ErrorSeverity.ERROR, context, 400,
        )
        self.errors = list(errors)

    @property
    def details(self) -> list[str]:
        return self.errors


class ImageLimitExceededError(ValidationError):
    """Adding images would push a customer past the cardinality ceiling."""

    def __init__(
        self, current_count: int, attempting_to_add: int,
        max_images: int = MAX_IMAGES_PER_CUSTOMER, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Cannot add {attempting_to_add} images. Customer already has "
            f"{current_count} images. Maximum allowed is {max_images}.",
            context, "IMAGE_LIMIT_EXCEEDED", ErrorCategory.BUSINESS_RULE,
        )
        self.current_count = current_count
        self.attempting_to_add = attempting_to_add


class InvalidArgumentError(CustomerImagesError):
    """A use case received an argument it cannot act on."""

    def __init__(self, message: str, argument: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_ARGUMENT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.argument = argument


class NotFoundError(CustomerImagesError):
    """Referenced customer or image does not exist."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )

    @classmethod
    def for_customer(cls, customer_id) -> "NotFoundError":
        return cls(
            f"Customer with ID '{customer_id}' was not found",
            ErrorContext(customer_id=str(customer_id)),
        )

    @classmethod
    def for_image(cls, image_id) -> "NotFoundError":
        return cls(
            f"Image with ID '{image_id}' was not found",
            ErrorContext(image_id=str(image_id)),
        )

    @classmethod
    def for_customer_image(cls, customer_id, image_id) -> "NotFoundError":
        return cls(
            f"Image with ID '{image_id}' was not found for customer '{customer_id}'",
            ErrorContext(customer_id=str(customer_id), image_id=str(image_id)),
        )


class ConflictError(CustomerImagesError):
    """Identifier collision on create."""

    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} with ID {resource_id} already exists",
            "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(CustomerImagesError):
    """Reading, parsing or writing the backing JSON store failed."""

    def __init__(self, key: str, operation: str, cause: BaseException | None = None):
        message = f"Failed to {operation} storage key '{key}'"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(
            message, "STORAGE_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, ErrorContext(storage_key=key), 500,
        )
        self.key = key
        self.operation = operation
        self.cause = cause


class OperationFailedError(CustomerImagesError):
    """Unexpected underlying failure, re-surfaced with use case context."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "OPERATION_FAILED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
