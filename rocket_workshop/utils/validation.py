"""Design rule checking for Rocket Workshop.

Findings are collected as severity-tagged messages; the performance
calculator flattens them into error and warning strings on its result.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(Enum):
    """Severity level for validation messages."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding."""

    severity: Severity
    parameter: str
    message: str
    value: Any = None
    limit: Any = None


@dataclass
class ValidationResult:
    """Aggregated validation result."""

    messages: list[ValidationMessage] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not any(m.severity == Severity.ERROR for m in self.messages)

    @property
    def has_warnings(self) -> bool:
        return any(m.severity == Severity.WARNING for m in self.messages)

    @property
    def errors(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    def error_texts(self) -> tuple[str, ...]:
        return tuple(m.message for m in self.errors)

    def warning_texts(self) -> tuple[str, ...]:
        return tuple(m.message for m in self.warnings)

    def add(self, severity: Severity, parameter: str, message: str, **kwargs: Any) -> None:
        self.messages.append(
            ValidationMessage(severity=severity, parameter=parameter, message=message, **kwargs)
        )

    def error(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.ERROR, parameter, message, **kwargs)

    def warning(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.WARNING, parameter, message, **kwargs)

    def info(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.INFO, parameter, message, **kwargs)

    def merge(self, other: ValidationResult) -> None:
        self.messages.extend(other.messages)


# --- Common validators ---


def validate_positive(name: str, value: float, result: ValidationResult, label: str = "") -> None:
    """Validate that a value is strictly positive and finite."""
    if not math.isfinite(value) or value <= 0:
        result.error(
            name, f"{label or name} must be positive and finite, got {value:g}", value=value, limit=0.0
        )


def validate_non_negative(name: str, value: float, result: ValidationResult, label: str = "") -> None:
    """Validate that a value is finite and not below zero."""
    if not math.isfinite(value) or value < 0:
        result.error(
            name, f"{label or name} must be finite and non-negative, got {value:g}", value=value, limit=0.0
        )


def validate_at_least(
    name: str,
    value: float,
    minimum: float,
    result: ValidationResult,
    message: str,
    severity: Severity = Severity.ERROR,
) -> None:
    """Validate that a value is at least *minimum*, reporting *message* otherwise."""
    if value < minimum:
        result.add(severity, name, message, value=value, limit=minimum)
