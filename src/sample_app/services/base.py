"""Result and error values shared by the service layer.

Validation failures never escape the service layer as exceptions. They come
back as a :class:`SaveResult` carrying field-level :class:`FieldError` values
so callers can branch on ``result.ok``.
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from pydantic import ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class FieldError:
    """A validation problem attached to one input field."""

    field: str
    message: str


@dataclass
class SaveResult(Generic[T]):
    """Outcome of a validate-and-save operation."""

    record: T | None = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Whether the record was saved."""
        return self.record is not None and not self.errors

    def messages(self) -> list[str]:
        """Flat list of error messages, in field order."""
        return [error.message for error in self.errors]


def collect_field_errors(exc: ValidationError) -> list[FieldError]:
    """Convert a pydantic ValidationError into field errors."""
    errors = []
    for error in exc.errors():
        field_name = ".".join(str(part) for part in error["loc"]) or "base"
        message = error["msg"].removeprefix("Value error, ")
        errors.append(FieldError(field=field_name, message=message))
    return errors
