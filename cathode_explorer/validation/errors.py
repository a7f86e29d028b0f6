from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ValidationIssue:
    code: str
    message: str
    field: Optional[str] = None


class ValidationError(Exception):
    """All issues found in one record table, reported together."""

    def __init__(self, issues: list[ValidationIssue]):
        self.issues = issues
        super().__init__("\n".join(f"{i.code}: {i.message}" for i in issues))

    @property
    def codes(self) -> list[str]:
        return [i.code for i in self.issues]

    def for_field(self, field: str) -> list[ValidationIssue]:
        return [i for i in self.issues if i.field == field]
