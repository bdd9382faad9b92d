"""Top-level wiring of config, rules and linter."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from core.config import config_section, load_effective_config
from core.linter import Linter
from rules.rule_registry import RuleRegistry, build_default_registry


@dataclass
class RuntimeBundle:
    """Holds initialized runtime components."""

    config: dict[str, Any]
    rule_registry: RuleRegistry
    linter: Linter


class Orchestrator:
    """Creates and wires runtime components for CLI use."""

    def __init__(self, config_dir: Path | None = None) -> None:
        default_dir = Path(__file__).resolve().parents[1] / "config"
        self.config_dir = (config_dir or default_dir).resolve()

    def build(self) -> RuntimeBundle:
        config = load_effective_config(self.config_dir)
        registry = build_default_registry(config)
        pattern = str(config_section(config, "lint").get("include", "*.py"))
        return RuntimeBundle(
            config=config,
            rule_registry=registry,
            linter=Linter(registry, pattern=pattern),
        )
