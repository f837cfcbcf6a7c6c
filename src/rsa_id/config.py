"""Параметры разбора номера.

- enforce_decommissioned: требовать 8 в 12-й позиции (поле упразднено, часть
  старых номеров его не соблюдает, по умолчанию не проверяем).
- eligibility_age: минимальный возраст получения ID, по нему выбирается век.
"""
from __future__ import annotations

from dataclasses import dataclass, replace

ELIGIBILITY_AGE = 16


@dataclass(frozen=True)
class ParseOptions:
    enforce_decommissioned: bool = False
    eligibility_age: int = ELIGIBILITY_AGE

    def __post_init__(self) -> None:
        if self.eligibility_age < 0:
            raise ValueError(f"eligibility_age must be >= 0, got {self.eligibility_age}")

    @classmethod
    def strict(cls) -> "ParseOptions":
        return cls(enforce_decommissioned=True)

    def with_enforcement(self, enabled: bool = True) -> "ParseOptions":
        return replace(self, enforce_decommissioned=enabled)


DEFAULT_OPTIONS = ParseOptions()
