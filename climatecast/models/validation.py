"""Validation result model."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: list[str] = field(default_factory=list)

    @classmethod
    def from_errors(cls, errors: list[str]) -> "ValidationResult":
        return cls(valid=not errors, errors=list(errors))

    def __str__(self) -> str:
        if self.valid:
            return "Validation passed"
        return "Validation failed: " + ", ".join(self.errors)
