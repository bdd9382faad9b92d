"""Lint result models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

Severity = Literal["error", "warning"]
SEVERITIES: tuple[str, ...] = ("error", "warning")


class LintMessage(BaseModel):
    """One problem reported against a source file."""

    rule_id: str
    message: str
    line: int
    column: int
    severity: Severity = "error"
    path: str = "<string>"

    def format(self) -> str:
        return f"{self.path}:{self.line}:{self.column}: {self.severity} {self.rule_id} {self.message}"
