from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Optional

from domain.models.country import COUNTRY_FIELDS


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a fail-fast check. Truthy when the record passed."""

    field: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.field is None

    def __bool__(self) -> bool:
        return self.ok


def validate_required(
    record: Mapping[str, str],
    field_order: Iterable[str] = COUNTRY_FIELDS,
) -> ValidationResult:
    """
    Stop at the first field in ``field_order`` whose value is empty.

    Only the first violation is reported; fields after it are not looked at.
    A field missing from ``record`` counts as empty.
    """
    for field in field_order:
        if record.get(field, "") == "":
            return ValidationResult(field=field)
    return ValidationResult()
