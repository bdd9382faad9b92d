"""Base rule interface and per-file rule context."""

from __future__ import annotations

import ast
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from core.messages import LintMessage, Severity
from core.safe_emitter import ListenerRegistrar


@dataclass
class RuleContext:
    """State one rule sees while a single file is linted.

    Each rule gets its own context, so reports from one rule are invisible to
    every other rule.
    """

    rule_id: str
    path: str
    severity: Severity
    settings: dict[str, Any] = field(default_factory=dict)
    source_lines: list[str] = field(default_factory=list)
    _messages: list[LintMessage] = field(default_factory=list, repr=False)

    def report(self, node: ast.AST, message: str) -> None:
        """Record a problem at ``node``'s position."""
        self._messages.append(
            LintMessage(
                rule_id=self.rule_id,
                message=message,
                line=getattr(node, "lineno", 1),
                column=getattr(node, "col_offset", 0) + 1,
                severity=self.severity,
                path=self.path,
            )
        )

    def messages(self) -> list[LintMessage]:
        return list(self._messages)


class BaseRule(ABC):
    """Base class for rule plugins.

    ``create`` is called once per linted file. Rules keep any per-file state
    inside ``create`` rather than on ``self``, since one rule instance serves
    every file.

    ``option_types`` maps each option a rule understands to a converter.
    Configured values are converted once at construction time; a value the
    converter rejects raises ``ValueError``.
    """

    rule_id: str = ""
    description: str = ""
    default_severity: Severity = "error"
    option_types: dict[str, Callable[[Any], Any]] = {}

    def __init__(
        self,
        enabled: bool = True,
        severity: Severity | None = None,
        settings: dict[str, Any] | None = None,
    ) -> None:
        self.enabled = enabled
        self.severity: Severity = severity or self.default_severity
        self.settings = self._convert_options(settings or {})

    def _convert_options(self, settings: dict[str, Any]) -> dict[str, Any]:
        converted = dict(settings)
        for option, convert in self.option_types.items():
            if option not in converted:
                continue
            value = converted[option]
            try:
                converted[option] = convert(value)
            except (TypeError, ValueError) as exc:
                raise ValueError(
                    f"Invalid value {value!r} for option '{option}' of rule '{self.rule_id}'."
                ) from exc
        return converted

    @abstractmethod
    def create(self, context: RuleContext, registrar: ListenerRegistrar) -> None:
        """Register node listeners for one file."""
