"""Rule registry and default rule wiring."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from core.config import config_section
from core.messages import SEVERITIES
from rules.base_rule import BaseRule
from rules.builtin_rules import BUILTIN_RULES

logger = logging.getLogger("se.rules")


@dataclass
class RegisteredRule:
    """Metadata for rule listing output."""

    rule_id: str
    enabled: bool
    severity: str


class RuleRegistry:
    """Simple in-memory rule registry."""

    def __init__(self) -> None:
        self._rules: dict[str, BaseRule] = {}

    def register(self, rule: BaseRule) -> None:
        if not rule.rule_id:
            raise ValueError(f"Rule {type(rule).__name__} has no rule_id.")
        if rule.rule_id in self._rules:
            raise ValueError(f"Rule '{rule.rule_id}' is already registered.")
        self._rules[rule.rule_id] = rule

    def get(self, rule_id: str) -> BaseRule | None:
        return self._rules.get(rule_id)

    def enabled_rules(self) -> list[BaseRule]:
        return [rule for rule in self._rules.values() if rule.enabled]

    def list_rules(self) -> list[RegisteredRule]:
        return [
            RegisteredRule(rule_id=rule_id, enabled=rule.enabled, severity=rule.severity)
            for rule_id, rule in sorted(self._rules.items())
        ]


def _rule_settings(config: dict[str, Any], rule_id: str) -> dict[str, Any]:
    rules_cfg = config_section(config, "rules")
    rule_cfg = rules_cfg.get(rule_id, {})
    if not isinstance(rule_cfg, dict):
        return {}
    return dict(rule_cfg)


def build_default_registry(config: dict[str, Any]) -> RuleRegistry:
    """Build default rule registry from config."""
    registry = RuleRegistry()
    for rule_cls in BUILTIN_RULES:
        settings = _rule_settings(config, rule_cls.rule_id)
        severity = settings.pop("severity", rule_cls.default_severity)
        if severity not in SEVERITIES:
            raise ValueError(f"Unknown severity '{severity}' for rule '{rule_cls.rule_id}'.")
        enabled = bool(settings.pop("enabled", True))
        registry.register(rule_cls(enabled=enabled, severity=severity, settings=settings))
        logger.debug("Registered rule %s (enabled=%s)", rule_cls.rule_id, enabled)
    return registry
