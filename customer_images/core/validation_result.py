"""Validation Result — typed outcome for business-rule checks that must not raise.

Invariants:
    - A success carries no errors; a failure carries at least one
    - errors preserves insertion order (callers rely on it for aggregated messages)
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a business-rule check or a result-style use case."""

    is_success: bool
    errors: list[str] = field(default_factory=list)

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @property
    def error_message(self) -> str:
        return ", ".join(self.errors)

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls(True, [])

    @classmethod
    def failure(cls, errors: str | list[str]) -> "ValidationResult":
        if isinstance(errors, str):
            errors = [errors]
        if not errors:
            raise ValueError("failure requires at least one error message")
        return cls(False, list(errors))

    @classmethod
    def from_errors(cls, errors: list[str]) -> "ValidationResult":
        """Success when errors is empty, failure otherwise."""
        return cls.failure(errors) if errors else cls.success()
