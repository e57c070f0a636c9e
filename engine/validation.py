"""Error-accumulating builder shared by the validators."""

from typing import TypeVar

from models.validation import ValidationResult

ResultT = TypeVar("ResultT", bound=ValidationResult)


class ErrorCollector:
    """
    Collects violations in the order they are found.

    Usage:
        errors = ErrorCollector()
        errors.add("Item 1: contagem inválida")
        result = errors.build(CountValidationResult)
    """

    def __init__(self):
        self._errors: list[str] = []

    def add(self, message: str) -> None:
        self._errors.append(message)

    def __len__(self) -> int:
        return len(self._errors)

    def build(self, result_cls: type[ResultT] = ValidationResult, **extra) -> ResultT:
        """Freeze the collected messages into a verdict."""
        return result_cls(
            valid=not self._errors,
            errors=tuple(self._errors),
            **extra,
        )
